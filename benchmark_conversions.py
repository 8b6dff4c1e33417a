#!/usr/bin/env python
"""Benchmark round-trip accuracy of the color conversions.

This script sweeps a grid of RGB colors through every matrix color space and
records the worst and mean round-trip errors (RGB -> XYZ -> RGB, XYZ -> xyY
-> XYZ and the gamma pair). Results are saved to a JSON file for comparison
across code changes.

Usage:
    python benchmark_conversions.py [--output results.json] [--step N]
"""
from __future__ import annotations

import json
import sys
import time
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from chromaticity_picker import (
    RGBColor,
    gamma_correct,
    gamma_uncorrect,
    rgb_to_xyz,
    xyy_to_xyz,
    xyz_to_rgb,
    xyz_to_xyy,
)
from chromaticity_picker.spaces import MATRIX_SPACES, ColorSpace


@dataclass
class SpaceResult:
    """Round-trip errors for a single color space."""
    space: str
    num_colors: int
    max_rgb_error: float
    mean_rgb_error: float
    max_xyy_error: float
    processing_time_ms: float


@dataclass
class BenchmarkResults:
    """Aggregate benchmark results."""
    timestamp: str
    grid_step: int
    total_time_ms: float
    max_gamma_error: float
    space_results: List[Dict[str, Any]]


def rgb_grid(step: int) -> List[RGBColor]:
    """Get every RGB color on a grid with the given channel step."""
    levels = list(range(0, 256, step))
    if levels[-1] != 255:
        levels.append(255)
    return [RGBColor(r, g, b) for r in levels for g in levels for b in levels]


def measure_space(space: ColorSpace, colors: List[RGBColor]) -> SpaceResult:
    """Measure round-trip errors for one color space."""
    start_time = time.perf_counter()
    max_rgb = 0.0
    total_rgb = 0.0
    max_xyy = 0.0

    for rgb in colors:
        xyz = rgb_to_xyz(rgb, space)
        back = xyz_to_rgb(xyz, space)
        err = max(abs(back.r - rgb.r), abs(back.g - rgb.g), abs(back.b - rgb.b))
        max_rgb = max(max_rgb, err)
        total_rgb += err

        if xyz.x + xyz.y + xyz.z > 0:
            again = xyy_to_xyz(xyz_to_xyy(xyz))
            xyy_err = max(
                abs(again.x - xyz.x), abs(again.y - xyz.y), abs(again.z - xyz.z)
            )
            max_xyy = max(max_xyy, xyy_err)

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    return SpaceResult(
        space=space.value,
        num_colors=len(colors),
        max_rgb_error=max_rgb,
        mean_rgb_error=total_rgb / len(colors),
        max_xyy_error=max_xyy,
        processing_time_ms=round(elapsed_ms, 2),
    )


def measure_gamma(samples: int = 10001) -> float:
    """Worst |gamma_uncorrect(gamma_correct(v)) - v| over [0, 1]."""
    worst = 0.0
    for i in range(samples):
        v = i / (samples - 1)
        worst = max(worst, abs(gamma_uncorrect(gamma_correct(v)) - v))
    return worst


def run_benchmark(step: int) -> BenchmarkResults:
    """Run the benchmark over every matrix space."""
    colors = rgb_grid(step)
    print(f"Sweeping {len(colors)} colors per space")
    print("-" * 60)

    total_start = time.perf_counter()
    space_results: List[SpaceResult] = []
    for space in MATRIX_SPACES:
        print(f"Measuring {space.value}...", end=" ", flush=True)
        result = measure_space(space, colors)
        space_results.append(result)
        print(f"max={result.max_rgb_error:.2e} mean={result.mean_rgb_error:.2e}")

    gamma_error = measure_gamma()
    total_time_ms = (time.perf_counter() - total_start) * 1000

    return BenchmarkResults(
        timestamp=datetime.now().isoformat(),
        grid_step=step,
        total_time_ms=round(total_time_ms, 2),
        max_gamma_error=gamma_error,
        space_results=[asdict(r) for r in space_results],
    )


def print_summary(results: BenchmarkResults) -> None:
    """Print a summary of the benchmark results."""
    print("\n" + "=" * 60)
    print("BENCHMARK SUMMARY")
    print("=" * 60)
    print(f"Grid step: {results.grid_step}")
    print(f"Total time: {results.total_time_ms:.0f}ms")
    print(f"Gamma round trip: {results.max_gamma_error:.2e}")
    print()

    print("RGB ROUND TRIP BY SPACE:")
    print("-" * 40)
    for result in results.space_results:
        print(
            f"  {result['space']:10s}: max={result['max_rgb_error']:.2e} "
            f"mean={result['mean_rgb_error']:.2e} "
            f"xyY={result['max_xyy_error']:.2e}"
        )


def main() -> None:
    """Main entry point."""
    output_file = "benchmark_results.json"
    step = 15
    args = sys.argv[1:]
    i = 0
    while i < len(args):
        if args[i] in ('-h', '--help'):
            print(__doc__)
            sys.exit(0)
        elif args[i] == '--output' and i + 1 < len(args):
            output_file = args[i + 1]
            i += 2
        elif args[i] == '--step' and i + 1 < len(args):
            step = int(args[i + 1])
            i += 2
        else:
            output_file = args[i]
            i += 1

    if step <= 0:
        print("Error: --step must be a positive integer")
        sys.exit(1)

    results = run_benchmark(step)
    print_summary(results)

    output_path = Path(__file__).parent / output_file
    with open(output_path, 'w') as f:
        json.dump(asdict(results), f, indent=2)

    print(f"\nResults saved to: {output_path}")


if __name__ == "__main__":
    main()
