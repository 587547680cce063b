#!/usr/bin/env python3
"""Performance benchmark script for the signal calculator."""

import math
import sys
import time
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stocks_app.signals.calculator import SignalCalculator


def generate_sample_series(count: int) -> list[float]:
    """Generate a wavy price series for benchmarking."""
    return [100.0 + 10.0 * math.sin(i / 25.0) + i * 0.01 for i in range(count)]


def benchmark_calculator(data_points: int, window_size: int = 30, rounds: int = 20) -> dict[str, float]:
    """Benchmark a full signal calculation over one series."""
    print(f"🏃 Benchmarking signal calculator with {data_points} prices (window {window_size})...")

    calculator = SignalCalculator(window_size=window_size)
    series = generate_sample_series(data_points)

    # Warm up
    calculator.calculate(series)

    start_time = time.perf_counter()
    for _ in range(rounds):
        calculator.calculate(series)
    total_time = time.perf_counter() - start_time

    return {
        "total_time": total_time,
        "avg_time_per_series": total_time / rounds,
        "data_points": data_points,
    }


def main():
    """Main benchmark function."""
    print("⚡ Stocks App Signal Benchmark")
    print("=" * 40)

    # Roughly one month, one year, ten and forty years of daily closes
    test_sizes = [21, 252, 2520, 10080]

    for size in test_sizes:
        results = benchmark_calculator(size)

        print(f"\n📊 Results for {size} prices:")
        print(f"   Total time: {results['total_time']:.3f}s")
        print(f"   Avg per series: {results['avg_time_per_series']*1000:.3f}ms")


if __name__ == "__main__":
    main()
