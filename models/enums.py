"""
Enumerations for search data models.
"""

from enum import Enum


class PipelineState(str, Enum):
    """Lifecycle of a single source pipeline."""
    PENDING = "PENDING"
    FETCHING = "FETCHING"
    EXTRACTING = "EXTRACTING"
    DONE = "DONE"


class ResultStatus(str, Enum):
    """How a source pipeline ended."""
    OK = "OK"
    FAILED = "FAILED"
