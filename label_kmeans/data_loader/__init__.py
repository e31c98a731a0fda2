"""
Data loading module for label_kmeans.

Components:
- LabeledDataset: feature matrix plus ground-truth labels
- DataLoader: parser for comma-delimited files

Example:
    >>> from label_kmeans.data_loader import DataLoader
    >>> dataset = DataLoader().load('iris.data')
    >>> print(dataset.features.shape)  # (150, 4)
"""

from .csv_loader import DataLoader, LabeledDataset

__all__ = [
    'DataLoader',
    'LabeledDataset'
]
