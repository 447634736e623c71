"""Errors raised by dungeon generation."""


class ConfigurationError(Exception):
    """Raised when a configuration cannot produce a dungeon at all.

    This covers malformed settings (such as an empty room-count range) and
    grids too small for the carver to fit a single room. An attempt that
    merely fails validation never raises; see `DungeonGenerator.generate`.
    """

    pass
