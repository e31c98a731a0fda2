"""
tests/test_purity.py

Pytest unit tests for cluster purity tallies and their report lines.
"""

import numpy as np
import pytest

from label_kmeans.kmeans import ClusterPurity, compute_cluster_purity, format_purity_line
from label_kmeans.kmeans.purity import compute_purities


@pytest.fixture()
def labels():
    return ["A", "A", "B", "C"]


class TestComputeClusterPurity:
    def test_counts_in_first_appearance_order(self, labels) -> None:
        purity = compute_cluster_purity(0, np.array([2, 0, 1]), labels)

        assert purity.size == 3
        assert list(purity.label_counts.items()) == [("B", 1), ("A", 2)]

    def test_percentages_sum_to_hundred(self, labels) -> None:
        purity = compute_cluster_purity(0, np.array([0, 1, 2]), labels)
        assert sum(purity.percentages().values()) == pytest.approx(100.0)

    def test_empty_cluster(self, labels) -> None:
        purity = compute_cluster_purity(1, np.array([], dtype=int), labels)

        assert purity.size == 0
        assert purity.percentages() == {}

    def test_compute_purities_covers_every_cluster(self, labels) -> None:
        assignment = (np.array([0, 1]), np.array([], dtype=int), np.array([2, 3]))
        purities = compute_purities(assignment, labels)
        assert [p.cluster_index for p in purities] == [0, 1, 2]
        assert [p.size for p in purities] == [2, 0, 2]


class TestFormatPurityLine:
    def test_two_thirds_one_third(self) -> None:
        purity = compute_cluster_purity(0, np.array([0, 1, 2]), ["A", "A", "B"])
        assert format_purity_line(purity) == "Cluster 1: 66.67% A, 33.33% B"

    def test_single_label(self) -> None:
        purity = ClusterPurity(cluster_index=3, size=4, label_counts={"x": 4})
        assert format_purity_line(purity) == "Cluster 4: 100.00% x"

    def test_empty_cluster_has_no_entries(self) -> None:
        purity = ClusterPurity(cluster_index=2, size=0)
        assert format_purity_line(purity) == "Cluster 3"
