"""
High-level carving functions that repeat the single-seam step.

Every iteration recomputes the energy of the shrunk grid, so iterations
are strictly sequential. Horizontal seams are removed by transposing the
grid and carving vertical seams.
"""

import torch
from typing import Callable, Optional, Union

from .seam import carve_seam

# callback(direction, index, seam, cost, carved)
SeamCallback = Callable[[str, int, torch.Tensor, Union[int, float], torch.Tensor], None]


def _check_count(n_seams: int, size: int, axis: str):
    if n_seams < 0:
        raise ValueError(f"Number of {axis} seams must be non-negative, got {n_seams}")
    if n_seams > size - 1:
        raise ValueError(
            f"Cannot remove {n_seams} {axis} seam(s) from a grid with {size} "
            f"{'column' if axis == 'vertical' else 'row'}(s); at most {size - 1} allowed")


def carve_vertical(image: torch.Tensor, n_seams: int,
                   callback: Optional[SeamCallback] = None,
                   direction: str = 'vertical') -> torch.Tensor:
    """
    Remove n_seams vertical seams.

    Args:
        image: Intensity grid (H, W)
        n_seams: Number of seams to remove
        callback: Called after each removal with
                  (direction, index, seam, cost, carved)
        direction: Label passed to the callback

    Returns:
        Carved grid (H, W - n_seams)
    """
    _check_count(n_seams, image.shape[1], 'vertical')

    carved = image.clone()
    for i in range(n_seams):
        carved, seam, cost = carve_seam(carved)
        if callback is not None:
            callback(direction, i, seam, cost, carved)

    return carved


def carve_horizontal(image: torch.Tensor, n_seams: int,
                     callback: Optional[SeamCallback] = None) -> torch.Tensor:
    """
    Remove n_seams horizontal seams by carving the transposed grid.

    The seam and carved grid given to the callback are in transposed
    (W, H) coordinates, i.e. seam[j] is the row removed from column j.

    Returns:
        Carved grid (H - n_seams, W)
    """
    _check_count(n_seams, image.shape[0], 'horizontal')

    carved = carve_vertical(image.t().contiguous(), n_seams,
                            callback=callback, direction='horizontal')
    return carved.t().contiguous()


def carve_image(image: torch.Tensor, n_vertical: int, n_horizontal: int = 0,
                callback: Optional[SeamCallback] = None) -> torch.Tensor:
    """
    Seam carving on both axes: vertical seams first, then horizontal.

    Both counts are validated before any seam is removed.

    Args:
        image: Intensity grid (H, W)
        n_vertical: Number of vertical seams (columns) to remove
        n_horizontal: Number of horizontal seams (rows) to remove
        callback: See carve_vertical

    Returns:
        Carved grid (H - n_horizontal, W - n_vertical)
    """
    if image.dim() != 2:
        raise ValueError(f"image must be a 2D (H, W) grid, got shape {tuple(image.shape)}")

    H, W = image.shape
    _check_count(n_vertical, W, 'vertical')
    _check_count(n_horizontal, H, 'horizontal')

    carved = carve_vertical(image, n_vertical, callback=callback)
    carved = carve_horizontal(carved, n_horizontal, callback=callback)
    return carved
