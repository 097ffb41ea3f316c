#!/usr/bin/env python3
"""Generate a Poisson-disk point distribution and print it as CSV.

Usage:
    # 2D unit square, default radius 0.1:
    python scripts/generate_poisson_points.py --seed 195935983

    # 3D box of side 100 with radius 5, torch PRNG:
    python scripts/generate_poisson_points.py --dimensions 3 --box 100 100 100 --radius 5 --rng torch

Defaults for radius, max_attempts, seed and precision come from POISSON_*
environment variables (see poisson_disk.config).
"""
import argparse
import csv
import itertools
import logging
import sys


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a Poisson-disk point distribution")
    parser.add_argument("--dimensions", type=int, default=2)
    parser.add_argument("--radius", type=float, default=settings.radius)
    parser.add_argument("--max_attempts", type=int, default=settings.max_attempts,
                        help="Candidates tried around each active point")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="PRNG seed; omit for non-deterministic output")
    parser.add_argument("--box", type=float, nargs="+", default=None,
                        help="Box side lengths, one per dimension (default: unit box)")
    parser.add_argument("--precision", choices=["double", "single"], default=settings.precision)
    parser.add_argument("--rng", choices=["numpy", "torch"], default="numpy")
    parser.add_argument("--limit", type=int, default=None,
                        help="Stop after this many points")
    return parser


def main(argv=None):
    from poisson_disk import Poisson, TorchRandomSource
    from poisson_disk.config import settings

    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    try:
        poisson = Poisson(
            args.dimensions,
            max_attempts=args.max_attempts,
            seed=args.seed,
            precision=args.precision,
        )
        if args.box is not None:
            poisson.set_dimensions(args.box, args.radius)
        else:
            poisson.set_radius(args.radius)
        if args.limit is not None and args.limit < 0:
            raise ValueError(f"limit must be non-negative, got {args.limit}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.rng == "torch":
        poisson.set_random_source(TorchRandomSource)

    print(f"Generating {poisson}", file=sys.stderr)

    points = iter(poisson)
    if args.limit is not None:
        points = itertools.islice(points, args.limit)

    writer = csv.writer(sys.stdout)
    writer.writerow([f"x{i}" for i in range(args.dimensions)])
    count = 0
    for point in points:
        writer.writerow(point)
        count += 1

    print(f"Done. Wrote {count} points", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
