"""
Seam computation and removal.

A vertical seam is found by backtracking through the cumulative energy
map from the cheapest cell of the last row. At each step the parent is
chosen among the (up to) three columns adjacent to the current one, so
the seam stays connected. Ties go to the leftmost candidate.
"""

import torch
from typing import Tuple, Union

from .energy import gradient_magnitude_energy, cumulative_energy


def _check_removable(W: int):
    if W <= 1:
        raise ValueError(f"Cannot remove a seam from a grid with {W} column(s)")


def find_seam(cumulative: torch.Tensor) -> torch.Tensor:
    """
    Backtrack the minimum-cost vertical seam through a cumulative energy map.

    Args:
        cumulative: Cumulative energy map (H, W)

    Returns:
        Seam indices (H,) with column index per row
    """
    if cumulative.dim() != 2:
        raise ValueError(f"cumulative must be a 2D (H, W) grid, got shape {tuple(cumulative.shape)}")

    H, W = cumulative.shape
    if H == 0:
        raise ValueError("cumulative must have at least one row")
    _check_removable(W)

    seam = torch.zeros(H, dtype=torch.long, device=cumulative.device)
    # argmin returns the first minimal index on ties
    seam[H - 1] = torch.argmin(cumulative[H - 1])

    for i in range(H - 1, 0, -1):
        col = seam[i].item()
        left = max(0, col - 1)
        right = min(W - 1, col + 1)
        parents = cumulative[i - 1, left:right + 1]
        seam[i - 1] = left + torch.argmin(parents)

    return seam


def seam_cost(cumulative: torch.Tensor, seam: torch.Tensor) -> Union[int, float]:
    """Total energy along a seam, read from its bottom cell."""
    H = cumulative.shape[0]
    return cumulative[H - 1, seam[H - 1]].item()


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from a greyscale image.

    Args:
        image: Intensity grid (H, W)
        seam: Seam indices (H,)

    Returns:
        Carved grid (H, W - 1); pixels keep their left-to-right order
    """
    if image.dim() != 2:
        raise ValueError(f"image must be a 2D (H, W) grid, got shape {tuple(image.shape)}")

    H, W = image.shape
    _check_removable(W)

    if seam.shape != (H,):
        raise ValueError(f"Seam has {seam.numel()} entries, expected one per row ({H})")
    if (seam < 0).any() or (seam >= W).any():
        raise ValueError(f"Seam column out of range [0, {W - 1}]: {seam.tolist()}")

    keep = torch.ones(H, W, dtype=torch.bool, device=image.device)
    keep[torch.arange(H, device=image.device), seam.to(image.device)] = False

    return image[keep].view(H, W - 1)


def carve_seam(image: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor, Union[int, float]]:
    """
    Run one full carving step: energy, cumulative energy, backtrack, remove.

    Args:
        image: Intensity grid (H, W)

    Returns:
        (carved, seam, cost) where carved is (H, W - 1), seam is (H,)
        and cost is the total energy of the removed seam
    """
    energy = gradient_magnitude_energy(image)
    M = cumulative_energy(energy)
    seam = find_seam(M)
    return remove_seam(image, seam), seam, seam_cost(M, seam)
