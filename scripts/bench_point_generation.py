#!/usr/bin/env python3
"""Time full generation of seeded 2D and 3D distributions.

Usage:
    python scripts/bench_point_generation.py --repeat 5
"""
import argparse
import timeit

SEED = 0xBADBEEF


def cases():
    from poisson_disk import Poisson2D, Poisson3D

    return {
        "Poisson2D": Poisson2D(seed=SEED),
        "Poisson3D": Poisson3D(seed=SEED),
        "Poisson2D r=5 box=100": Poisson2D(seed=SEED).with_dimensions([100.0] * 2, 5.0),
        "Poisson3D r=5 box=100": Poisson3D(seed=SEED).with_dimensions([100.0] * 3, 5.0),
    }


def main():
    parser = argparse.ArgumentParser(description="Benchmark Poisson-disk generation")
    parser.add_argument("--repeat", type=int, default=5)
    args = parser.parse_args()

    for name, poisson in cases().items():
        n_points = len(poisson.generate())
        times = timeit.repeat(poisson.generate, number=1, repeat=args.repeat)
        print(f"{name:<24} {n_points:>7} points  best {min(times) * 1e3:9.2f} ms")


if __name__ == "__main__":
    main()
