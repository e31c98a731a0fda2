"""Shared fixtures for the label_kmeans test suite."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from label_kmeans.data_loader import LabeledDataset


@pytest.fixture()
def two_points() -> LabeledDataset:
    """Two far-apart points with different labels."""
    features = np.array([[0.0, 0.0], [10.0, 10.0]])
    return LabeledDataset(features=features, labels=("A", "B"))


@pytest.fixture()
def blobs() -> LabeledDataset:
    """Three well-separated labeled blobs of 20 points each."""
    rng = np.random.default_rng(7)
    centers = np.array([[0.0, 0.0], [20.0, 0.0], [0.0, 20.0]])
    features = np.vstack([
        center + rng.normal(scale=0.5, size=(20, 2)) for center in centers
    ])
    labels = tuple(["left"] * 20 + ["right"] * 20 + ["top"] * 20)
    return LabeledDataset(features=features, labels=labels)


@pytest.fixture()
def write_data(tmp_path):
    """Write text to a data file and return its path."""
    def _write(text: str, name: str = "data.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
