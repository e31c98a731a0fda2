"""Error types raised by label_kmeans."""

from typing import Optional


class LabelKMeansError(Exception):
    """Base class for every error raised by this package."""


class DataSourceError(LabelKMeansError):
    """The data file could not be opened or read."""


class DataFormatError(LabelKMeansError):
    """A record in the data file could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class InvalidClusterCountError(LabelKMeansError, ValueError):
    """k is outside 1..n_points."""
