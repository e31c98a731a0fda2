"""
Text report of the K-Means iterations.

Per iteration:

    Sum of distances: 97.2046...
    Cluster 1: 100.00% Iris-setosa
    Cluster 2: 77.42% Iris-versicolor, 22.58% Iris-virginica
"""

import sys
from typing import List, Optional, TextIO

from ..kmeans.kmeans import IterationResult
from ..kmeans.purity import format_purity_line


def format_iteration(result: IterationResult) -> List[str]:
    """Report lines for one iteration, without newlines."""
    lines = [f"Sum of distances: {result.total_distance}"]
    lines.extend(format_purity_line(purity) for purity in result.purities)
    return lines


class Reporter:
    """
    Writes each IterationResult to a text stream.

    Args:
        stream: Output stream. Defaults to sys.stdout at report time.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def report(self, result: IterationResult) -> None:
        for line in format_iteration(result):
            print(line, file=self.stream)
