"""
Text and figure output for inspecting grids.
"""

import sys

import numpy as np
import torch
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt


def format_grid(grid: torch.Tensor) -> str:
    """Render a grid one row per line, values zero-padded to three digits."""
    return '\n'.join(
        ''.join(f" {int(value):03d} " for value in row)
        for row in grid.tolist()
    )


def print_grid(grid: torch.Tensor, title=None, file=None):
    """Print a grid, optionally preceded by a title line."""
    out = file if file is not None else sys.stdout
    if title is not None:
        print(title, file=out)
    print(format_grid(grid), file=out)


def tensor_to_numpy(t: torch.Tensor) -> np.ndarray:
    """Convert an (H, W) tensor to a float numpy array for display."""
    return t.detach().cpu().numpy().astype(np.float64)


def plot_carving(image: torch.Tensor, energy: torch.Tensor, cumulative: torch.Tensor,
                 seam: torch.Tensor, path, max_value: int = 255):
    """
    Save a three-panel figure: image with seam overlay, energy, cumulative energy.

    Args:
        image: Intensity grid (H, W)
        energy: Energy map (H, W)
        cumulative: Cumulative energy map (H, W)
        seam: Vertical seam (H,) found on cumulative
        path: Output figure path (format from extension)
        max_value: Intensity shown as white
    """
    H, W = image.shape
    rows = np.arange(H)
    cols = seam.detach().cpu().numpy()

    fig_h = 4
    fig_w = max(3 * fig_h * (W / H), 6.0)
    fig, axes = plt.subplots(1, 3, figsize=(fig_w, fig_h))

    axes[0].imshow(tensor_to_numpy(image), cmap='gray', vmin=0, vmax=max_value,
                   interpolation='nearest')
    axes[0].plot(cols, rows, color='red', linewidth=2, marker='s', markersize=3)
    axes[0].set_title('Image + seam')

    axes[1].imshow(tensor_to_numpy(energy), cmap='hot', interpolation='nearest')
    axes[1].set_title('Energy')

    axes[2].imshow(tensor_to_numpy(cumulative), cmap='viridis', interpolation='nearest')
    axes[2].set_title('Cumulative energy')

    for ax in axes:
        ax.set_xticks([])
        ax.set_yticks([])

    fig.tight_layout()
    fig.savefig(str(path), dpi=100)
    plt.close(fig)
