"""Tests for solidscene.construction.bonds: pairwise and k-d tree bond search."""

import numpy as np
import pytest

from solidscene.construction import compute_bonds
from solidscene.construction import bonds as bonds_module


class TestComputeBonds:
    def test_simple_pair(self):
        coords = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [5.0, 0.0, 0.0]])
        result = compute_bonds(coords, 1.5)
        assert len(result) == 1
        i, j, length = result[0]
        assert (i, j) == (0, 1)
        assert length == pytest.approx(1.0)

    def test_threshold_is_strict(self):
        coords = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
        for method in ("pairwise", "tree"):
            assert compute_bonds(coords, 1.0, method=method) == []

    def test_empty_coords(self):
        assert compute_bonds(np.zeros((0, 3)), 1.0) == []

    def test_single_point(self):
        for method in ("pairwise", "tree"):
            assert compute_bonds(np.zeros((1, 3)), 1.0, method=method) == []

    def test_sorted_by_index_pair(self):
        coords = np.array([[0.0, 0.0, 0.0], [0.0, 0.0, 0.5], [0.0, 0.5, 0.0]])
        result = compute_bonds(coords, 1.0)
        assert [(i, j) for i, j, _ in result] == [(0, 1), (0, 2), (1, 2)]

    def test_methods_agree_on_random_points(self):
        rng = np.random.default_rng(42)
        coords = rng.uniform(0.0, 10.0, size=(300, 3))
        pairwise = compute_bonds(coords, 1.2, method="pairwise")
        tree = compute_bonds(coords, 1.2, method="tree")
        assert [(i, j) for i, j, _ in pairwise] == [(i, j) for i, j, _ in tree]
        np.testing.assert_allclose(
            [d for _, _, d in pairwise], [d for _, _, d in tree],
        )

    def test_auto_switches_to_tree(self, monkeypatch):
        calls = []
        original = bonds_module._compute_bonds_tree

        def spy(coords, max_length):
            calls.append(len(coords))
            return original(coords, max_length)

        monkeypatch.setattr(bonds_module, "PAIRWISE_LIMIT", 3)
        monkeypatch.setattr(bonds_module, "_compute_bonds_tree", spy)
        compute_bonds(np.arange(12.0).reshape(4, 3), 1.0)
        assert calls == [4]

    def test_unknown_method_raises(self):
        with pytest.raises(ValueError, match="method"):
            compute_bonds(np.zeros((2, 3)), 1.0, method="grid")

    def test_non_positive_length_raises(self):
        with pytest.raises(ValueError, match="max_length"):
            compute_bonds(np.zeros((2, 3)), 0.0)

    def test_bad_shape_raises(self):
        with pytest.raises(ValueError, match="3 columns"):
            compute_bonds(np.zeros((2, 2)), 1.0)
