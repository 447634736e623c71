#!/usr/bin/env python3
"""Benchmark dungeon generation and wall autotiling."""

from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path

from delve.environment.generators import DungeonConfig, DungeonGenerator, RoomCountRange
from delve.environment.walls import resolve_wall_frames
from delve.util.tilesets import frame_set_for_floor

# (width, height, min rooms, max rooms)
CASES: tuple[tuple[int, int, int, int], ...] = (
    (30, 20, 3, 5),
    (60, 40, 10, 12),
    (100, 80, 20, 30),
    (160, 120, 40, 60),
)


class GenerationBenchmark:
    """Times full generation attempts and wall resolution per map size."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(
        self, width: int, height: int, min_rooms: int, max_rooms: int
    ) -> dict[str, float]:
        generate_total = 0.0
        walls_total = 0.0
        attempts_total = 0
        failures = 0
        frames = frame_set_for_floor(1)
        dungeon_config = DungeonConfig(
            width=width,
            height=height,
            room_count=RoomCountRange(min_rooms, max_rooms),
        )

        for i in range(self.iterations):
            rng = random.Random((width * 1_000_000) + (height * 1_000) + i)
            generator = DungeonGenerator(rng=rng)

            start = time.perf_counter()
            result = generator.generate(dungeon_config)
            generate_total += time.perf_counter() - start

            start = time.perf_counter()
            resolve_wall_frames(result.dungeon.tiles, frames)
            walls_total += time.perf_counter() - start

            attempts_total += result.attempts
            failures += 0 if result.validated else 1

        return {
            "generate_ms": (generate_total / self.iterations) * 1000.0,
            "walls_ms": (walls_total / self.iterations) * 1000.0,
            "mean_attempts": attempts_total / self.iterations,
            "fallbacks": float(failures),
        }

    def run(self) -> None:
        print("Dungeon Generation Benchmark")
        print("=" * 60)
        print(f"Iterations per size: {self.iterations}")
        print()
        print(
            f"{'Size':>10} {'Generate (ms)':>14} {'Walls (ms)':>11} "
            f"{'Attempts':>9} {'Fallbacks':>10}"
        )
        print("-" * 60)

        for width, height, min_rooms, max_rooms in CASES:
            stats = self._run_case(width, height, min_rooms, max_rooms)
            size_key = f"{width}x{height}"
            self.results[size_key] = stats
            print(
                f"{size_key:>10} {stats['generate_ms']:14.2f} "
                f"{stats['walls_ms']:11.2f} {stats['mean_attempts']:9.2f} "
                f"{int(stats['fallbacks']):10d}"
            )

    def save_results(self, filename: str) -> None:
        """Save benchmark output to a JSON file."""
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")

    def compare_with_baseline(self, baseline_file: str) -> None:
        """Compare generation times with a saved baseline JSON file."""
        try:
            with Path(baseline_file).open() as f:
                baseline: dict[str, dict[str, float]] = json.load(f)
        except FileNotFoundError:
            print(f"\nBaseline file not found: {baseline_file}")
            return

        print(f"\nComparison vs baseline: {baseline_file}")
        print("=" * 60)

        for size_key, current in self.results.items():
            old_ms = baseline.get(size_key, {}).get("generate_ms", 0.0)
            if old_ms <= 0:
                continue
            new_ms = current["generate_ms"]
            delta_pct = ((new_ms - old_ms) / old_ms) * 100.0
            trend = "faster" if new_ms < old_ms else "slower"
            print(
                f"{size_key:>10}: {new_ms:8.2f}ms vs {old_ms:8.2f}ms "
                f"{trend} ({delta_pct:+6.1f}%)"
            )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark dungeon generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=20,
        help="Number of dungeons per map size (default: 20)",
    )
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    parser.add_argument(
        "--compare",
        type=str,
        help="Compare current results against baseline JSON",
    )
    args = parser.parse_args(argv)

    benchmark = GenerationBenchmark(iterations=args.iterations)
    benchmark.run()

    if args.save:
        benchmark.save_results(args.save)

    if args.compare:
        benchmark.compare_with_baseline(args.compare)


if __name__ == "__main__":
    main()
