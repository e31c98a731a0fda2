"""
Cluster purity against ground-truth labels.

Purity never feeds back into the clustering; it only describes how the
labels of the points in each cluster are distributed.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np


@dataclass(frozen=True)
class ClusterPurity:
    """
    Label tally of one cluster.

    Attributes:
        cluster_index: 0-based cluster index
        size: Number of points assigned to the cluster
        label_counts: Occurrences per label, in order of first appearance
    """
    cluster_index: int
    size: int
    label_counts: Dict[str, int] = field(default_factory=dict)

    def percentages(self) -> Dict[str, float]:
        """
        Share of each label in the cluster, in percent.

        Returns:
            Dict {label: count / size * 100}. Empty for an empty cluster.
        """
        return {
            label: count / self.size * 100
            for label, count in self.label_counts.items()
        }


def compute_cluster_purity(
    cluster_index: int,
    member_indices: np.ndarray,
    labels: Sequence[str]
) -> ClusterPurity:
    """
    Tally the labels of the points assigned to one cluster.

    Args:
        cluster_index: 0-based cluster index
        member_indices: Indices of the points in the cluster
        labels: Labels of the whole dataset, parallel to the feature rows

    Returns:
        ClusterPurity for the cluster
    """
    counts = Counter(labels[int(idx)] for idx in member_indices)
    return ClusterPurity(
        cluster_index=cluster_index,
        size=len(member_indices),
        label_counts=dict(counts)
    )


def compute_purities(
    assignment: Sequence[np.ndarray],
    labels: Sequence[str]
) -> List[ClusterPurity]:
    """Purity of every cluster in an assignment."""
    return [
        compute_cluster_purity(i, members, labels)
        for i, members in enumerate(assignment)
    ]


def format_purity_line(purity: ClusterPurity) -> str:
    """
    Render a purity tally as a single report line.

    Example:
        >>> p = ClusterPurity(0, 3, {'A': 2, 'B': 1})
        >>> format_purity_line(p)
        'Cluster 1: 66.67% A, 33.33% B'

    An empty cluster has no entries and renders as 'Cluster <n>'.
    """
    entries = [
        f"{percent:.2f}% {label}"
        for label, percent in purity.percentages().items()
    ]
    header = f"Cluster {purity.cluster_index + 1}"
    if not entries:
        return header
    return f"{header}: " + ", ".join(entries)
