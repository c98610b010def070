"""High-level orchestration of a batch conversion run."""

from .batch import (
    find_source_documents,
    output_path_for,
    run_batch,
)
from .console import Console
from .model import BatchOptions, BatchReport, FileOutcome

__all__ = [
    "BatchOptions",
    "BatchReport",
    "Console",
    "FileOutcome",
    "find_source_documents",
    "output_path_for",
    "run_batch",
]
