"""Named random streams derived from one master seed.

Each consumer (carving, room selection, theming, ...) draws from its own
stream. A stream is derived from ``master_seed`` and the stream's domain name,
so the dungeon produced for a given seed does not change when an unrelated
consumer starts drawing more numbers.

Usage:
    # At startup
    from delve.util import rng
    rng.init(config.RANDOM_SEED)

    # In any module - the stream reference may be cached
    _rng = rng.get("dungeon.generation")

    def pick_room_count(low: int, high: int) -> int:
        return _rng.randint(low, high)

Every generation entry point also accepts an explicit ``random.Random``, which
is what tests use to pin down exact output.

Domain naming convention (hierarchical):
    - "dungeon.generation", "dungeon.carve"
    - "theme.palette"
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from delve.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Stand-in for ``random.Random`` bound to one domain of a provider.

    The underlying ``Random`` is looked up on every call, so a cached stream
    keeps working after the provider is reseeded.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng().randint(a, b)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        """Return randomly selected element from range(start, stop, step)."""
        return self._rng().randrange(start, stop, step)

    def choice(self, seq: Sequence[T]) -> T:
        """Return random element from non-empty sequence."""
        return self._rng().choice(seq)

    def shuffle(self, x: list) -> None:
        """Shuffle list x in place."""
        self._rng().shuffle(x)

    def getrandbits(self, k: int) -> int:
        """Return an integer with k random bits."""
        return self._rng().getrandbits(k)


# Anything generation code can draw from.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Owns one ``Random`` per domain, all derived from a master seed."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        """Return the (cacheable) stream for ``domain``.

        Args:
            domain: Hierarchical name like "dungeon.carve".

        Returns:
            An RNGStream with the drawing methods of ``random.Random``.
        """
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): str hashing is salted per process.
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reseed every domain. Streams handed out earlier stay valid."""
        self._master_seed = master_seed
        self._streams.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Create the global provider, or reseed it if it already exists.

    Args:
        master_seed: int, str, or None for a fresh entropy-seeded run.
    """
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Return the global stream for ``domain``, creating an unseeded provider
    on first use."""
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    """Reseed the global provider.

    Raises:
        RuntimeError: If ``init()`` or ``get()`` has not been called yet.
    """
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
