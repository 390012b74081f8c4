"""Tests for the energy and cumulative energy maps."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seam_carving.energy import gradient_magnitude_energy, cumulative_energy

from conftest import make_random_image, make_edge_image


class TestGradientMagnitudeEnergy:
    def test_known_example(self, example_image):
        energy = gradient_magnitude_energy(example_image)
        expected = torch.tensor([[4, 5, 4],
                                 [7, 8, 7],
                                 [4, 5, 4]])
        assert torch.equal(energy, expected)

    def test_uniform_image_is_zero(self):
        """A constant image has zero energy everywhere, borders included."""
        image = torch.full((6, 9), 128, dtype=torch.long)
        energy = gradient_magnitude_energy(image)
        assert torch.equal(energy, torch.zeros(6, 9, dtype=torch.long))

    def test_single_pixel_is_zero(self):
        energy = gradient_magnitude_energy(torch.tensor([[200]]))
        assert torch.equal(energy, torch.tensor([[0]]))

    def test_border_uses_pixel_itself(self):
        """Out-of-range neighbours contribute nothing at the borders."""
        energy = gradient_magnitude_energy(torch.tensor([[1, 5, 2]]))
        assert torch.equal(energy, torch.tensor([[4, 7, 3]]))

        energy = gradient_magnitude_energy(torch.tensor([[1], [4], [9]]))
        assert torch.equal(energy, torch.tensor([[3], [8], [5]]))

    def test_vertical_edge_has_energy(self):
        image = make_edge_image(10, 12, edge_col=6)
        energy = gradient_magnitude_energy(image)
        assert (energy[:, 5] == 255).all()
        assert (energy[:, 6] == 255).all()
        assert energy[:, :5].sum() == 0
        assert energy[:, 7:].sum() == 0

    def test_output_shape_matches_input(self):
        image = make_random_image(13, 21)
        assert gradient_magnitude_energy(image).shape == (13, 21)

    def test_energy_nonnegative(self):
        image = make_random_image(30, 30)
        assert (gradient_magnitude_energy(image) >= 0).all()

    def test_is_pure(self):
        """Same input twice gives the same output and the input is untouched."""
        image = make_random_image(8, 11)
        original = image.clone()
        first = gradient_magnitude_energy(image)
        second = gradient_magnitude_energy(image)
        assert torch.equal(first, second)
        assert torch.equal(image, original)

    def test_unsigned_input_does_not_wrap(self):
        """uint8 grids are widened before differences are taken."""
        image = torch.tensor([[0, 200]], dtype=torch.uint8)
        energy = gradient_magnitude_energy(image)
        assert torch.equal(energy, torch.tensor([[200, 200]]))
        assert energy.dtype == torch.long

    def test_uint8_matches_long(self):
        image = make_random_image(9, 12, seed=4)
        assert torch.equal(gradient_magnitude_energy(image.to(torch.uint8)),
                           gradient_magnitude_energy(image))

    def test_rejects_non_2d(self):
        with pytest.raises(ValueError):
            gradient_magnitude_energy(torch.zeros(3, 4, 4, dtype=torch.long))

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            gradient_magnitude_energy(torch.zeros(0, 4, dtype=torch.long))


class TestCumulativeEnergy:
    def test_known_example(self, example_image):
        M = cumulative_energy(gradient_magnitude_energy(example_image))
        expected = torch.tensor([[4, 5, 4],
                                 [11, 12, 11],
                                 [15, 16, 15]])
        assert torch.equal(M, expected)

    def test_first_row_equals_energy(self):
        energy = gradient_magnitude_energy(make_random_image(12, 17))
        M = cumulative_energy(energy)
        assert torch.equal(M[0], energy[0])

    def test_uniform_image_is_zero(self):
        image = torch.full((5, 7), 3, dtype=torch.long)
        M = cumulative_energy(gradient_magnitude_energy(image))
        assert torch.equal(M, torch.zeros(5, 7, dtype=torch.long))

    def test_recurrence_holds(self):
        """Every cell is its energy plus the cheapest in-range parent."""
        energy = gradient_magnitude_energy(make_random_image(15, 10, seed=7))
        M = cumulative_energy(energy)
        H, W = energy.shape
        for i in range(1, H):
            for j in range(W):
                parents = M[i - 1, max(0, j - 1):min(W, j + 2)]
                assert M[i, j] == energy[i, j] + parents.min()

    def test_single_column(self):
        energy = torch.tensor([[3], [8], [5]])
        M = cumulative_energy(energy)
        assert torch.equal(M, torch.tensor([[3], [11], [16]]))

    def test_float_energy(self):
        energy = torch.tensor([[1.0, 2.0], [3.0, 4.0]])
        M = cumulative_energy(energy)
        assert torch.equal(M, torch.tensor([[1.0, 2.0], [4.0, 5.0]]))

    def test_narrow_energy_does_not_overflow(self):
        energy = torch.full((3, 2), 200, dtype=torch.uint8)
        M = cumulative_energy(energy)
        assert torch.equal(M[-1], torch.tensor([600, 600]))

    def test_does_not_modify_energy(self):
        energy = gradient_magnitude_energy(make_random_image(6, 6))
        original = energy.clone()
        cumulative_energy(energy)
        assert torch.equal(energy, original)
