"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


EXAMPLE_PGM = """P2
# Created by hand
3 3
9
1 2 3
4 5 6
7 8 9
"""


@pytest.fixture
def example_image():
    """3x3 grid whose energy, cumulative energy and first seam are known."""
    return torch.tensor([[1, 2, 3],
                         [4, 5, 6],
                         [7, 8, 9]])


@pytest.fixture
def example_pgm(tmp_path):
    """The example grid written as a P2 file."""
    path = tmp_path / 'example.pgm'
    path.write_text(EXAMPLE_PGM)
    return path


def make_random_image(H, W, seed=42, max_value=255):
    """Seeded random integer greyscale grid."""
    gen = torch.Generator().manual_seed(seed)
    return torch.randint(0, max_value + 1, (H, W), generator=gen)


def make_edge_image(H, W, edge_col, low=0, high=255):
    """Grid with a single vertical step edge at edge_col."""
    image = torch.full((H, W), low, dtype=torch.long)
    image[:, edge_col:] = high
    return image
