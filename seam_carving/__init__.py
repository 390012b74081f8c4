"""
Seam carving for plain-text greyscale (P2) images.

Repeatedly removes the lowest-energy connected top-to-bottom path of
pixels (Avidan & Shamir 2007), shrinking the image one column at a time.
Horizontal seams are removed by carving the transposed image.
"""

__version__ = "0.1.0"

from .energy import gradient_magnitude_energy, cumulative_energy
from .seam import find_seam, seam_cost, remove_seam, carve_seam
from .carving import carve_vertical, carve_horizontal, carve_image
from .pgm import PGMError, PGMFormatError, PGMRangeError, parse_pgm, load_pgm
from .display import format_grid, print_grid, plot_carving

__all__ = [
    'gradient_magnitude_energy',
    'cumulative_energy',
    'find_seam',
    'seam_cost',
    'remove_seam',
    'carve_seam',
    'carve_vertical',
    'carve_horizontal',
    'carve_image',
    'PGMError',
    'PGMFormatError',
    'PGMRangeError',
    'parse_pgm',
    'load_pgm',
    'format_grid',
    'print_grid',
    'plot_carving',
]
