"""
Loader for comma-delimited labeled datasets.

Each record holds n-1 numeric features followed by one label:

    5.1,3.5,1.4,0.2,Iris-setosa
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from ..exceptions import DataFormatError, DataSourceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabeledDataset:
    """
    Feature vectors and their ground-truth labels.

    Attributes:
        features: Read-only float array, shape (n_points, n_attributes)
        labels: One label per feature row
        source: Where the records came from
    """
    features: np.ndarray
    labels: Tuple[str, ...]
    source: str = "<memory>"

    @property
    def n_points(self) -> int:
        return self.features.shape[0]

    @property
    def n_attributes(self) -> int:
        return self.features.shape[1]

    def distinct_labels(self) -> Tuple[str, ...]:
        """Labels in order of first appearance."""
        return tuple(dict.fromkeys(self.labels))


class DataLoader:
    """
    Parser for delimited files of numeric features plus a trailing label.

    The field count of the first record fixes the layout; every other record
    must match it. Blank lines are skipped.

    Example:
        >>> loader = DataLoader()
        >>> dataset = loader.load('data/iris.data')
        >>> print(dataset.n_points, dataset.n_attributes)  # 150 4
        >>> print(dataset.distinct_labels())
    """

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    def load(self, path: Union[str, Path]) -> LabeledDataset:
        """
        Read and parse a data file.

        Args:
            path: Path of the delimited file

        Returns:
            LabeledDataset with the parsed records

        Raises:
            DataSourceError: If the file cannot be opened or read
            DataFormatError: If a record is malformed or the file is empty
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Cannot read data file {path}: {e}") from e

        return self.load_text(lines, source=str(path))

    def load_text(self, lines: Iterable[str], source: str = "<memory>") -> LabeledDataset:
        """
        Parse records that have already been read.

        Args:
            lines: Record lines, with or without trailing newlines
            source: Name used in error messages and on the dataset

        Returns:
            LabeledDataset with the parsed records

        Raises:
            DataFormatError: If a record is malformed or there are no records
        """
        records = [
            (line_number, line.rstrip("\r\n"))
            for line_number, line in enumerate(lines, start=1)
            if line.strip()
        ]
        if not records:
            raise DataFormatError(f"{source}: no records found")

        first_line_number, first_line = records[0]
        n_fields = first_line.count(self.delimiter) + 1
        if n_fields < 2:
            raise DataFormatError(
                f"{source}: expected at least one feature and a label, "
                f"got {n_fields} field(s)",
                first_line_number
            )
        for line_number, line in records:
            if line.count(self.delimiter) + 1 != n_fields:
                raise DataFormatError(
                    f"{source}: expected {n_fields} fields, "
                    f"got {line.count(self.delimiter) + 1}",
                    line_number
                )

        text = [line for _, line in records]
        try:
            features = self._parse_features(text, n_fields)
            labels = np.loadtxt(
                text, delimiter=self.delimiter, usecols=n_fields - 1,
                dtype=str, comments=None, ndmin=1
            )
        except ValueError as e:
            raise DataFormatError(
                f"{source}: {e}", self._find_bad_line(records, n_fields)
            ) from e

        non_finite = np.flatnonzero(~np.isfinite(features).all(axis=1))
        if len(non_finite) > 0:
            raise DataFormatError(
                f"{source}: feature values must be finite numbers",
                records[non_finite[0]][0]
            )
        features.setflags(write=False)

        logger.info(
            "Loaded %d records with %d attributes from %s",
            features.shape[0], features.shape[1], source
        )

        return LabeledDataset(
            features=features,
            labels=tuple(str(label).strip() for label in labels),
            source=source
        )

    def _parse_features(self, text: List[str], n_fields: int) -> np.ndarray:
        return np.loadtxt(
            text, delimiter=self.delimiter, usecols=range(n_fields - 1),
            dtype=np.float64, comments=None, ndmin=2
        )

    def _find_bad_line(self, records, n_fields: int) -> Optional[int]:
        """Line number of the first record numpy cannot parse on its own."""
        for line_number, line in records:
            try:
                self._parse_features([line], n_fields)
            except ValueError:
                return line_number
        return None
