"""
K-Means Clustering over labeled feature vectors

Lloyd's algorithm with random initial centroids picked from the data:

    1. Assign every point to its nearest centroid (Euclidean distance)
    2. Sum the distances of the points to the centroids they were assigned to
    3. Replace each centroid with the mean of its points
    4. Stop once that sum changes by less than tol between two iterations

Each iteration is expressed as pure functions over a ClusterState, so a
single step can be driven and inspected on its own.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..exceptions import InvalidClusterCountError
from .config import KMeansConfig
from .purity import ClusterPurity, compute_purities

logger = logging.getLogger(__name__)


# ============================================================================
# State and Results
# ============================================================================

Assignment = Tuple[np.ndarray, ...]
"""One ascending array of point indices per cluster."""


@dataclass(frozen=True)
class ClusterState:
    """
    Centroids and the assignment computed from them.

    Passed from step to step (assign -> update -> report). A fresh state is
    built each iteration; arrays are never shared with the dataset.
    """
    centroids: np.ndarray
    """Cluster centers. Shape: (k, n_attributes)"""

    assignment: Assignment = ()
    """Point indices per cluster. Empty before the first assignment."""


@dataclass(frozen=True)
class IterationResult:
    """Observable output of one iteration."""
    iteration: int
    """1-based iteration number."""

    total_distance: float
    """Sum of point distances to their pre-update centroids."""

    purities: List[ClusterPurity]
    """Label tally per cluster, in cluster order."""

    converged: bool
    """Whether this iteration satisfied the convergence test."""


@dataclass
class KMeansResult:
    """
    Final outcome of KMeans.run().

    Contains the last centroids and assignment plus the distance history.
    """
    centroids: np.ndarray
    """Centroids after the last update. Shape: (k, n_attributes)"""

    assignment: Assignment
    """Point indices per cluster from the last assignment."""

    cluster_ids: np.ndarray
    """Cluster index of every point. Shape: (n_points,)"""

    history: List[float] = field(default_factory=list)
    """Total distance of every iteration, in order."""

    converged: bool = False
    """False only when an iteration cap stopped the loop first."""

    @property
    def n_iter(self) -> int:
        return len(self.history)


# ============================================================================
# Step functions
# ============================================================================

def euclidean_distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Euclidean distance from every point to every centroid.

    Args:
        points: Shape (N, D)
        centroids: Shape (K, D)

    Returns:
        distances: Shape (N, K), sqrt(sum((p - c) ** 2))
    """
    diff = points[:, np.newaxis, :] - centroids[np.newaxis, :, :]
    return np.sqrt(np.sum(diff ** 2, axis=2))


def initialize_centroids(
    features: np.ndarray,
    n_clusters: int,
    rng: np.random.Generator
) -> np.ndarray:
    """
    Copy k distinct data points, drawn uniformly without replacement.

    Raises:
        InvalidClusterCountError: If k is not in 1..N
    """
    n_points = len(features)
    if not 1 <= n_clusters <= n_points:
        raise InvalidClusterCountError(
            f"k must be between 1 and the number of points ({n_points}), "
            f"got {n_clusters}"
        )
    indices = rng.choice(n_points, size=n_clusters, replace=False)
    return np.array(features[indices], dtype=np.float64, copy=True)


def assign_clusters(features: np.ndarray, centroids: np.ndarray) -> Assignment:
    """
    Assign every point to its nearest centroid.

    Ties go to the lowest cluster index. A NaN distance never wins, so a
    cluster whose centroid became NaN receives no points; a point with no
    finite distance falls into cluster 0.

    Returns:
        Tuple of k ascending index arrays partitioning range(N)
    """
    distances = euclidean_distances(features, centroids)
    distances = np.where(np.isnan(distances), np.inf, distances)
    # argmin keeps the first minimum
    cluster_ids = np.argmin(distances, axis=1)
    return tuple(
        np.flatnonzero(cluster_ids == j) for j in range(len(centroids))
    )


def total_distance(
    features: np.ndarray,
    centroids: np.ndarray,
    assignment: Assignment
) -> float:
    """Sum over all clusters of the member distances to the cluster centroid."""
    total = 0.0
    for j, members in enumerate(assignment):
        if len(members) == 0:
            continue
        distances = euclidean_distances(features[members], centroids[j:j + 1])
        total += float(np.sum(distances))
    return total


def update_centroids(
    features: np.ndarray,
    centroids: np.ndarray,
    assignment: Assignment
) -> Tuple[np.ndarray, float]:
    """
    Recompute centroids as the mean of their members.

    The returned total is measured against the centroids passed in, before
    they are replaced. An empty cluster gets a NaN centroid (0 / 0).

    Returns:
        new_centroids: Fresh array, shape (k, D)
        total: Sum of distances to the old centroids
    """
    total = total_distance(features, centroids, assignment)

    new_centroids = np.empty_like(centroids, dtype=np.float64)
    for j, members in enumerate(assignment):
        if len(members) == 0:
            logger.warning("Cluster %d is empty, its centroid becomes NaN", j + 1)
        with np.errstate(divide='ignore', invalid='ignore'):
            new_centroids[j] = features[members].sum(axis=0) / len(members)

    return new_centroids, total


def cluster_ids_from_assignment(assignment: Assignment, n_points: int) -> np.ndarray:
    """Flatten an assignment into one cluster index per point."""
    cluster_ids = np.full(n_points, -1, dtype=np.int64)
    for j, members in enumerate(assignment):
        cluster_ids[members] = j
    return cluster_ids


# ============================================================================
# Engine
# ============================================================================

class KMeans:
    """
    Lloyd's K-Means over a labeled dataset.

    Owns the (read-only) dataset, the current ClusterState and the distance
    history. step() runs one assign -> update -> purity iteration; run()
    repeats it until the total distance changes by less than config.tol.

    Example:
        >>> from label_kmeans.data_loader import DataLoader
        >>> from label_kmeans.report import Reporter
        >>> dataset = DataLoader().load('iris.data')
        >>> kmeans = KMeans(dataset.features, dataset.labels, k=3)
        >>> result = kmeans.run(Reporter())
        >>> print(result.n_iter, result.history[-1])
    """

    def __init__(
        self,
        features,
        labels: Sequence[str],
        k: Optional[int] = None,
        config: Optional[KMeansConfig] = None
    ):
        """
        Initialize the engine and draw the initial centroids.

        Args:
            features: Array-like of shape (N, D), N >= 1
            labels: N labels, parallel to features
            k: Number of clusters. Overrides config.n_clusters when given.
            config: Configuration parameters. If None, uses defaults.

        Raises:
            ValueError: If features is empty or not 2D, or labels mismatch
            InvalidClusterCountError: If k is not in 1..N
        """
        if config is None:
            config = KMeansConfig(n_clusters=k) if k is not None else KMeansConfig()
        elif k is not None and k != config.n_clusters:
            config = KMeansConfig(
                n_clusters=k,
                tol=config.tol,
                max_iter=config.max_iter,
                random_state=config.random_state
            )
        self.config = config

        data = np.array(features, dtype=np.float64, copy=True)
        if data.ndim != 2 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(
                f"features must be a non-empty 2D array (N, D), got shape {data.shape}"
            )
        if len(labels) != len(data):
            raise ValueError(
                f"Got {len(labels)} labels for {len(data)} feature rows"
            )
        data.setflags(write=False)

        self._features = data
        self._labels = tuple(labels)
        self._rng = np.random.default_rng(config.random_state)

        centroids = initialize_centroids(data, config.n_clusters, self._rng)
        self._state = ClusterState(centroids=centroids)
        self._prev_total = math.inf
        self._history: List[float] = []
        self._converged = False

    @classmethod
    def from_config(cls, dataset, config: KMeansConfig) -> 'KMeans':
        """Build an engine from a LabeledDataset."""
        return cls(dataset.features, dataset.labels, config=config)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def features(self) -> np.ndarray:
        return self._features

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    @property
    def n_clusters(self) -> int:
        return self.config.n_clusters

    @property
    def centroids(self) -> np.ndarray:
        """Current centroids (a copy)."""
        return self._state.centroids.copy()

    @property
    def assignment(self) -> Assignment:
        return self._state.assignment

    @property
    def history(self) -> List[float]:
        return list(self._history)

    @property
    def n_iter(self) -> int:
        return len(self._history)

    @property
    def converged(self) -> bool:
        return self._converged

    def cluster_ids(self) -> np.ndarray:
        """
        Cluster index of every point from the latest assignment.

        Raises:
            RuntimeError: If no iteration has run yet
        """
        if not self._state.assignment:
            raise RuntimeError("Must call step() or run() before reading cluster ids")
        return cluster_ids_from_assignment(self._state.assignment, len(self._features))

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def step(self) -> IterationResult:
        """
        Run a single assign -> update -> purity iteration.

        Returns:
            IterationResult with the total distance and convergence flag

        Raises:
            RuntimeError: If the engine has already converged
        """
        if self._converged:
            raise RuntimeError("KMeans has already converged")

        old_centroids = self._state.centroids
        assignment = assign_clusters(self._features, old_centroids)
        new_centroids, total = update_centroids(
            self._features, old_centroids, assignment
        )
        purities = compute_purities(assignment, self._labels)

        self._state = ClusterState(centroids=new_centroids, assignment=assignment)
        self._history.append(total)

        converged = abs(self._prev_total - total) < self.config.tol
        self._prev_total = total
        self._converged = converged

        logger.debug(
            "Iteration %d: total distance %.6f (converged=%s)",
            len(self._history), total, converged
        )

        return IterationResult(
            iteration=len(self._history),
            total_distance=total,
            purities=purities,
            converged=converged
        )

    def run(self, reporter=None) -> KMeansResult:
        """
        Iterate until convergence.

        With config.max_iter unset this loops until the convergence test
        holds, however long that takes.

        Args:
            reporter: Optional object with a report(IterationResult) method,
                      called once per iteration.

        Returns:
            KMeansResult with final centroids, assignment and history
        """
        while not self._converged:
            if self.config.max_iter is not None and self.n_iter >= self.config.max_iter:
                logger.warning(
                    "Stopped after %d iterations without converging",
                    self.n_iter
                )
                break
            result = self.step()
            if reporter is not None:
                reporter.report(result)

        if self._converged:
            logger.info("Converged after %d iterations", self.n_iter)

        return KMeansResult(
            centroids=self.centroids,
            assignment=self._state.assignment,
            cluster_ids=self.cluster_ids(),
            history=self.history,
            converged=self._converged
        )
