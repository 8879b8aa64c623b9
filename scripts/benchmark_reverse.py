#!/usr/bin/env python3
"""Time codepoint reversal over a few representative inputs.

Usage:
    python scripts/benchmark_reverse.py
    python scripts/benchmark_reverse.py --iterations 1000000
    python scripts/benchmark_reverse.py --text "Hello, 世界" --text "abc"
"""
import argparse
import timeit
from typing import List, Optional, Tuple

from stringutil import reverse

# ASCII, empty, and multi-byte
DEFAULT_TEXTS = ["Hello, world", "", "Hello, 世界"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the benchmark CLI."""
    parser = argparse.ArgumentParser(description="Benchmark stringutil.reverse")
    parser.add_argument("--iterations", type=int, default=100000,
                        help="Calls per input (default: 100000)")
    parser.add_argument("--text", action="append", dest="texts",
                        help="Input to benchmark; may be repeated")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments, filling in the default inputs."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.iterations < 1:
        parser.error("--iterations must be at least 1")
    if args.texts is None:
        args.texts = list(DEFAULT_TEXTS)
    return args


def benchmark(text: str, iterations: int) -> float:
    """Return the average time of one reverse(text) call in nanoseconds."""
    elapsed = timeit.timeit(lambda: reverse(text), number=iterations)
    return elapsed * 1e9 / iterations


def run(texts: List[str], iterations: int) -> List[Tuple[str, float]]:
    """Benchmark each text, returning (text, ns per call) pairs."""
    return [(text, benchmark(text, iterations)) for text in texts]


def main(argv: Optional[List[str]] = None) -> None:
    """Run the benchmark and print one line per input."""
    args = parse_args(argv)
    print(f"reverse() x {args.iterations}")
    for text, ns_per_call in run(args.texts, args.iterations):
        print(f"  {text!r:<20} {ns_per_call:10.1f} ns/op")


if __name__ == "__main__":
    main()
