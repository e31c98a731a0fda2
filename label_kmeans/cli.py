"""
Interactive entry point.

Prompts for the data file and k, then prints every iteration of the run:

    $ python -m label_kmeans
    Enter the path of the data file: iris.data
    Enter the number of clusters (k): 3
    Sum of distances: 142.75...
    Cluster 1: 100.00% Iris-setosa
    ...
"""

import logging
import os
import sys
from typing import Callable, Optional, TextIO

from .data_loader import DataLoader
from .exceptions import LabelKMeansError
from .kmeans import KMeans, KMeansConfig
from .report import Reporter

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LABEL_KMEANS_LOG_LEVEL"


def configure_logging() -> None:
    """Set up root logging from LABEL_KMEANS_LOG_LEVEL (default WARNING)."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )


def main(
    input_func: Callable[[str], str] = input,
    stream: Optional[TextIO] = None
) -> int:
    """
    Prompt for a file path and k, then run K-Means on the file.

    Args:
        input_func: Prompt function, input() by default
        stream: Where the report and error messages go. Defaults to stdout.

    Returns:
        Process exit status: 0 on success, 1 on any input error
    """
    stream = stream if stream is not None else sys.stdout

    try:
        file_path = input_func("Enter the path of the data file: ").strip()
    except EOFError:
        print("Error!! No data file given", file=stream)
        return 1

    try:
        dataset = DataLoader().load(file_path)
    except LabelKMeansError as e:
        logger.error("Failed to load %s: %s", file_path, e)
        print(f"Error!! {e}", file=stream)
        return 1

    try:
        raw_k = input_func("Enter the number of clusters (k): ").strip()
        k = int(raw_k)
    except EOFError:
        print("Error!! No cluster count given", file=stream)
        return 1
    except ValueError:
        print(f"Error!! k must be an integer, got {raw_k!r}", file=stream)
        return 1

    try:
        kmeans = KMeans.from_config(dataset, KMeansConfig(n_clusters=k))
    except LabelKMeansError as e:
        print(f"Error!! {e}", file=stream)
        return 1

    kmeans.run(Reporter(stream))
    return 0


def run() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(main())
