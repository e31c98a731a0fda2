"""
Visualization module for label_kmeans.

Provides matplotlib figures of the convergence curve and of the label
composition of each cluster.
"""

from .plots import plot_convergence, plot_cluster_purity

__all__ = ['plot_convergence', 'plot_cluster_purity']
