"""
K-Means Configuration

Parameters for the Lloyd iteration run by label_kmeans.kmeans.KMeans.
"""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidClusterCountError


CONVERGENCE_TOL = 1e-4


@dataclass
class KMeansConfig:
    """
    Configuration for K-Means clustering.

    Attributes:
        n_clusters: Number of clusters (k)
        tol: Convergence threshold on the change of the total distance
        max_iter: Optional iteration cap. None runs until convergence.
        random_state: Seed for the initial centroid draw. None uses fresh entropy.
    """
    n_clusters: int = 3
    """Number of clusters (k parameter)."""

    tol: float = CONVERGENCE_TOL
    """Iteration stops once |previous total - total| < tol."""

    max_iter: Optional[int] = None
    """Maximum number of iterations. The default loop is unbounded."""

    random_state: Optional[int] = None
    """Random seed for reproducible centroid initialization."""

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.n_clusters < 1:
            raise InvalidClusterCountError(
                f"n_clusters must be >= 1, got {self.n_clusters}"
            )
        if self.tol <= 0:
            raise ValueError(f"tol must be > 0, got {self.tol}")
        if self.max_iter is not None and self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
