"""
K-Means clustering module: Lloyd iteration and label purity.
"""

from .config import KMeansConfig
from .kmeans import (
    ClusterState,
    IterationResult,
    KMeans,
    KMeansResult,
    assign_clusters,
    euclidean_distances,
    initialize_centroids,
    update_centroids,
)
from .purity import ClusterPurity, compute_cluster_purity, format_purity_line

__all__ = [
    'KMeansConfig',
    'ClusterState',
    'IterationResult',
    'KMeans',
    'KMeansResult',
    'assign_clusters',
    'euclidean_distances',
    'initialize_centroids',
    'update_centroids',
    'ClusterPurity',
    'compute_cluster_purity',
    'format_purity_line',
]
