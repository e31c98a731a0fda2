"""
tests/test_viz.py

Smoke tests for the matplotlib figures.
"""

import matplotlib.pyplot as plt
import pytest

from label_kmeans.kmeans import ClusterPurity
from label_kmeans.viz import plot_cluster_purity, plot_convergence


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotConvergence:
    def test_one_point_per_iteration(self) -> None:
        fig, ax = plot_convergence([12.0, 8.5, 8.5], tol=1e-4)

        line = ax.lines[0]
        assert list(line.get_xdata()) == [1, 2, 3]
        assert list(line.get_ydata()) == [12.0, 8.5, 8.5]
        assert "3 iterations" in ax.get_title()

    def test_empty_history(self) -> None:
        with pytest.raises(ValueError):
            plot_convergence([])


class TestPlotClusterPurity:
    def test_one_bar_group_per_label(self) -> None:
        purities = [
            ClusterPurity(cluster_index=0, size=3, label_counts={"A": 2, "B": 1}),
            ClusterPurity(cluster_index=1, size=2, label_counts={"B": 2}),
            ClusterPurity(cluster_index=2, size=0),
        ]

        fig, ax = plot_cluster_purity(purities)

        assert len(ax.containers) == 2
        tick_labels = [t.get_text() for t in ax.get_yticklabels()]
        assert tick_labels == [
            "Cluster 1 (n=3)", "Cluster 2 (n=2)", "Cluster 3 (n=0)"
        ]

    def test_no_clusters(self) -> None:
        with pytest.raises(ValueError):
            plot_cluster_purity([])
