from __future__ import annotations

import random

import pytest

from delve.__main__ import main, render_ascii
from delve.environment.generators import DungeonConfig, RoomCountRange, generate


def test_render_ascii_marks_entrance_and_exit() -> None:
    dungeon = generate(
        DungeonConfig(width=30, height=20, room_count=RoomCountRange(3, 5)),
        rng=random.Random(2),
    )
    lines = render_ascii(dungeon).splitlines()

    assert len(lines) == 20
    assert all(len(line) == 30 for line in lines)
    text = "\n".join(lines)
    assert text.count("E") == 1
    assert text.count("X") == 1
    ex, ey = dungeon.entrance_room.floor_center
    assert lines[ey][ex] == "E"


def test_main_prints_a_floor(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--seed", "crypt-7", "--floor", "3"])
    out = capsys.readouterr().out

    assert exit_code in (0, 1)
    assert "teal palette" in out
    assert "room  0 entrance" in out


def test_main_rejects_bad_room_range(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--min-rooms", "5", "--max-rooms", "2"])

    assert excinfo.value.code == 2
    assert "Invalid room count range" in capsys.readouterr().err
