import argparse
import logging

import numpy as np

from ._runtime import get_fill_range, get_print_precision, get_seed
from .console import fill_from_keyboard
from .errors import GridError
from .formatting import format_grid
from .grid import Grid2D, Grid3D

logger = logging.getLogger(__name__)

RULE = "=" * 55


def build_parser() -> argparse.ArgumentParser:
    low, high = get_fill_range()
    parser = argparse.ArgumentParser(
        prog="gridlab", description="Fill 2D and 3D matrices and find their minimum element"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random fill")
    parser.add_argument("--low", type=float, default=low, help="Lower bound of random values")
    parser.add_argument("--high", type=float, default=high, help="Upper bound of random values")
    parser.add_argument("--size", type=int, default=3, help="Extent of every axis")
    parser.add_argument(
        "--interactive", action="store_true", help="Read the values from the keyboard"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run_demo(grid, args, rng, precision, number) -> None:
    print("\n" + RULE)
    print(f"{number}. Working with {grid.dimensions_label()}")
    print(RULE)
    if args.interactive:
        fill_from_keyboard(grid)
        print("\nMatrix after keyboard entry:")
    else:
        print(f"Filling with random numbers (from {args.low:g} to {args.high:g})...")
        grid.fill_uniform_random(args.low, args.high, rng)
        print("\nMatrix after random fill:")
    print(format_grid(grid, precision=precision))
    result = grid.find_minimum()
    print(f"Minimum element: {result.describe(precision)}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    if not args.low < args.high:
        parser.error("--low must be smaller than --high")

    seed = args.seed if args.seed is not None else get_seed()
    rng = np.random.default_rng(seed)
    precision = get_print_precision()

    print("--- Matrices: abstraction, inheritance and polymorphism ---")
    try:
        grids = [Grid2D(args.size, args.size), Grid3D(args.size, args.size, args.size)]
        for number, grid in enumerate(grids, 1):
            run_demo(grid, args, rng, precision, number)
    except GridError as e:
        logger.error("%s", e)
        return 1
    except EOFError:
        logger.error("input ended before all values were read")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
