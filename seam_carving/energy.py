"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

Energy here is the sum of absolute intensity differences between a pixel
and its four axis-aligned neighbours. Neighbours that fall outside the
grid are replaced by the pixel itself, so borders contribute nothing.
"""

import torch


def _check_grid(grid: torch.Tensor, name: str):
    if grid.dim() != 2:
        raise ValueError(f"{name} must be a 2D (H, W) grid, got shape {tuple(grid.shape)}")
    if grid.shape[0] == 0 or grid.shape[1] == 0:
        raise ValueError(f"{name} must have at least one row and one column")


def _promote(grid: torch.Tensor) -> torch.Tensor:
    """Widen integer grids to int64 so differences and sums cannot wrap."""
    if grid.dtype.is_floating_point:
        return grid
    return grid.long()


def _sentinel(dtype: torch.dtype):
    """Largest representable value for dtype, used for out-of-range parents."""
    if dtype.is_floating_point:
        return float('inf')
    return torch.iinfo(dtype).max


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute the gradient magnitude energy of a greyscale image.

    E(i,j) = |I(i,j) - I(i,j-1)| + |I(i,j) - I(i,j+1)|
           + |I(i,j) - I(i-1,j)| + |I(i,j) - I(i+1,j)|

    Args:
        image: Greyscale intensity grid (H, W)

    Returns:
        Energy map (H, W); integer images give int64, floating images keep
        their dtype
    """
    _check_grid(image, 'image')
    image = _promote(image)

    # I(i, j-1): left neighbour
    left = image.clone()
    left[:, 1:] = image[:, :-1]

    # I(i, j+1): right neighbour
    right = image.clone()
    right[:, :-1] = image[:, 1:]

    # I(i-1, j): above neighbour
    above = image.clone()
    above[1:, :] = image[:-1, :]

    # I(i+1, j): below neighbour
    below = image.clone()
    below[:-1, :] = image[1:, :]

    change_x = torch.abs(image - left) + torch.abs(image - right)
    change_y = torch.abs(image - above) + torch.abs(image - below)

    return change_x + change_y


def cumulative_energy(energy: torch.Tensor) -> torch.Tensor:
    """
    Build the cumulative minimum energy map by dynamic programming.

    M(0, j) = E(0, j)
    M(i, j) = E(i, j) + min(M(i-1, j-1), M(i-1, j), M(i-1, j+1))

    Parents outside [0, W-1] are excluded. M(i, j) is the cost of the
    cheapest connected top-to-bottom path ending at (i, j).

    Args:
        energy: Energy map (H, W)

    Returns:
        Cumulative energy map (H, W); int64 for integer energy
    """
    _check_grid(energy, 'energy')
    energy = _promote(energy)

    H, W = energy.shape
    M = energy.clone()
    fill = _sentinel(energy.dtype)

    for i in range(1, H):
        M_prev = M[i - 1]
        M_left = torch.full((W,), fill, device=energy.device, dtype=energy.dtype)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), fill, device=energy.device, dtype=energy.dtype)
        M_right[:-1] = M_prev[1:]

        # Three options: come from above-left, above, or above-right
        best_parent = torch.min(torch.min(M_left, M_prev), M_right)
        M[i] = energy[i] + best_parent

    return M
