#!/usr/bin/env python3
"""Benchmark xdot parsing and interpretation throughput."""

import time
import argparse
from xdotdraw.xdot.interpreter import DrawInterpreter
from xdotdraw.xdot.library import SAMPLE_DRAWINGS, edge_xdot
from xdotdraw.xdot.parser import XDotParser


def benchmark_parse(repeats: int = 10_000) -> float:
    """Benchmark raw parsing speed over the sample drawings."""
    parser = XDotParser()
    start = time.perf_counter()
    for _ in range(repeats):
        for raw in SAMPLE_DRAWINGS:
            parser.parse(raw)
    elapsed = time.perf_counter() - start
    return repeats * len(SAMPLE_DRAWINGS) / elapsed


def benchmark_long_edge(num_segments: int = 2_000) -> tuple[float, int]:
    """Benchmark one long B-spline edge parsed then interpreted."""
    points = [(i * 3, (i * 7) % 50) for i in range(3 * num_segments + 1)]
    raw = edge_xdot(points)

    start = time.perf_counter()
    ops = XDotParser().parse(raw)
    DrawInterpreter().interpret(ops, lambda state, op: None)
    elapsed = time.perf_counter() - start
    return len(raw) / max(elapsed, 1e-9), len(raw)


def main():
    parser = argparse.ArgumentParser(description="Benchmark xdotdraw parsing")
    parser.add_argument("--repeats", type=int, default=10_000)
    parser.add_argument("--segments", type=int, default=2_000)
    args = parser.parse_args()

    print("=" * 60)
    print("xdotdraw Parser Benchmark")
    print("=" * 60)

    print(f"\nParsing {len(SAMPLE_DRAWINGS)} sample drawings x {args.repeats:,}...")
    per_sec = benchmark_parse(args.repeats)
    print(f"  Attributes/sec: {per_sec:,.0f}")

    print(f"\nParsing + interpreting a {args.segments:,}-segment edge...")
    bytes_per_sec, size = benchmark_long_edge(args.segments)
    print(f"  Attribute size: {size:,} bytes")
    print(f"  Bytes/sec: {bytes_per_sec:,.0f}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
