"""
Models package initialization.
"""

from .enums import PipelineState, ResultStatus
from .schema import (
    MAX_LINKS,
    SearchRequest,
    SourceResult,
    SearchReport,
)

__all__ = [
    "PipelineState",
    "ResultStatus",
    "MAX_LINKS",
    "SearchRequest",
    "SourceResult",
    "SearchReport",
]
