"""
label_kmeans - Lloyd's K-Means over labeled feature vectors.

Clusters numeric records read from a comma-delimited file and reports,
for every iteration, the total point-to-centroid distance and the label
purity of each cluster.
"""

__version__ = "0.1.0"
