"""
Command-line entry point.

    seam-carve image.pgm 2 1

Loads a P2 raster, prints its image, energy and cumulative energy maps,
removes the requested vertical seams then horizontal seams, and prints
the carved image.
"""

import argparse
import sys

import torch

from .carving import carve_image
from .display import print_grid, plot_carving
from .energy import gradient_magnitude_energy, cumulative_energy
from .pgm import PGMError, load_pgm
from .seam import find_seam

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seam count: '{value}'") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"seam count must be non-negative, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seam-carve',
        description='Content-aware resizing of plain-text greyscale (P2) images '
                    'by seam carving.')
    parser.add_argument('image', help='P2 pgm image file')
    parser.add_argument('vertical', type=non_negative_int,
                        help='number of vertical seams (columns) to remove')
    parser.add_argument('horizontal', type=non_negative_int,
                        help='number of horizontal seams (rows) to remove')
    output = parser.add_mutually_exclusive_group()
    output.add_argument('-q', '--quiet', action='store_true',
                        help='print only the seam-carved image')
    output.add_argument('-v', '--verbose', action='store_true',
                        help='report every removed seam and its cost')
    parser.add_argument('--plot', metavar='PNG',
                        help='save a figure of the image, its first seam, '
                             'energy and cumulative energy maps')
    parser.add_argument('--device', default='cpu',
                        help="torch device for the grids (default: 'cpu')")
    return parser


def report_seam(direction: str, index: int, seam: torch.Tensor, cost,
                carved: torch.Tensor):
    print(f"  {direction} seam {index + 1}: cost {cost}, "
          f"path {seam.tolist()}, remaining {tuple(carved.shape)}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        image, max_value = load_pgm(args.image)
    except OSError as e:
        print(f"error: could not open file '{args.image}': {e.strerror or e}", file=sys.stderr)
        return EXIT_ERROR
    except PGMError as e:
        print(f"error: invalid pgm file: {e}", file=sys.stderr)
        return EXIT_ERROR

    image = image.to(args.device)

    energy = gradient_magnitude_energy(image)
    M = cumulative_energy(energy)

    if not args.quiet:
        print_grid(image, title=f"Image Map For '{args.image}':")
        print_grid(energy, title="\nEnergy Map:")
        print_grid(M, title="\nCumulative Energy Map:")

    if args.plot:
        if image.shape[1] > 1:
            seam = find_seam(M)
        else:
            seam = torch.zeros(image.shape[0], dtype=torch.long)
        plot_carving(image, energy, M, seam, args.plot, max_value=max_value)
        if not args.quiet:
            print(f"\nSaved: {args.plot}")

    if args.verbose:
        print(f"\nRemoving {args.vertical} vertical and "
              f"{args.horizontal} horizontal seam(s)...")

    try:
        carved = carve_image(image, args.vertical, args.horizontal,
                             callback=report_seam if args.verbose else None)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print_grid(carved, title=None if args.quiet else "\nSeam-Carved Image:")
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
