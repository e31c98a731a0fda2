"""
Plots of a K-Means run.

Provides figures for the total distance per iteration and for the label
composition of each cluster.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from ..kmeans.purity import ClusterPurity


def plot_convergence(
    history: Sequence[float],
    tol: Optional[float] = None,
    figsize: Tuple[int, int] = (8, 5)
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Line plot of the total distance per iteration.

    Args:
        history: Total distance of every iteration (KMeansResult.history)
        tol: If given, shown in the title as the convergence threshold
        figsize: Figure size (width, height) in inches

    Returns:
        fig, ax: The matplotlib figure and its axes

    Raises:
        ValueError: If history is empty

    Example:
        >>> result = kmeans.run()
        >>> fig, ax = plot_convergence(result.history)
        >>> fig.savefig('convergence.png')
    """
    if len(history) == 0:
        raise ValueError("history must contain at least one iteration")

    iterations = np.arange(1, len(history) + 1)

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(iterations, history, marker='o', linewidth=2)

    ax.set_xlabel('Iteration', fontsize=12)
    ax.set_ylabel('Sum of distances', fontsize=12)
    title = f'K-Means convergence ({len(history)} iterations)'
    if tol is not None:
        title += f', tol={tol:g}'
    ax.set_title(title, fontsize=14, pad=10)
    ax.set_xticks(iterations)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    return fig, ax


def plot_cluster_purity(
    purities: List[ClusterPurity],
    figsize: Optional[Tuple[int, int]] = None
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Stacked horizontal bars of the label percentages in each cluster.

    One bar per cluster, one colored segment per label. Labels keep the
    same color across clusters. Empty clusters are drawn as an empty bar.

    Args:
        purities: One ClusterPurity per cluster (IterationResult.purities)
        figsize: Figure size. Defaults to a height proportional to k.

    Returns:
        fig, ax: The matplotlib figure and its axes

    Raises:
        ValueError: If purities is empty
    """
    if not purities:
        raise ValueError("purities must contain at least one cluster")

    all_labels = list(dict.fromkeys(
        label for purity in purities for label in purity.label_counts
    ))
    cmap = plt.get_cmap('tab10' if len(all_labels) <= 10 else 'tab20')
    colors = {label: cmap(i % cmap.N) for i, label in enumerate(all_labels)}

    if figsize is None:
        figsize = (9, max(2, len(purities)))

    fig, ax = plt.subplots(figsize=figsize)

    y_positions = np.arange(len(purities))
    for label in all_labels:
        widths = []
        lefts = []
        for purity in purities:
            percentages = purity.percentages()
            left = 0.0
            for other, pct in percentages.items():
                if other == label:
                    break
                left += pct
            lefts.append(left)
            widths.append(percentages.get(label, 0.0))
        ax.barh(y_positions, widths, left=lefts, color=colors[label], label=label)

    ax.set_yticks(y_positions)
    ax.set_yticklabels([
        f'Cluster {p.cluster_index + 1} (n={p.size})' for p in purities
    ])
    ax.invert_yaxis()
    ax.set_xlim(0, 100)
    ax.set_xlabel('Label share (%)', fontsize=12)
    ax.set_title('Cluster purity', fontsize=14, pad=10)
    if all_labels:
        ax.legend(loc='center left', bbox_to_anchor=(1.0, 0.5), fontsize=9)

    plt.tight_layout()

    return fig, ax
