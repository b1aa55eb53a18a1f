"""
Pydantic data models for search requests and reports.
"""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_validator
from .enums import ResultStatus

# Hard cap on links kept per source
MAX_LINKS = 8


class SearchRequest(BaseModel):
    """A single user search invocation."""
    raw_query: str = Field(..., description="Query text exactly as the user typed it")

    @field_validator('raw_query')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only queries."""
        if not v or not v.strip():
            raise ValueError("Search query must not be blank")
        return v

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"raw_query": "rust ownership"}
        }


class SourceResult(BaseModel):
    """Links extracted from one search engine for one query."""
    source_identifier: str = Field(..., description="Engine identifier, e.g. 'Google'")
    links: List[str] = Field(default_factory=list, description="Absolute result URLs in page order")
    status: ResultStatus = Field(ResultStatus.OK, description="Whether the pipeline completed")
    http_status: Optional[int] = Field(None, description="HTTP status of the results page")
    page_title: Optional[str] = Field(None, description="<title> of the results page")
    error: Optional[str] = Field(None, description="Failure description when status is FAILED")

    @field_validator('links')
    @classmethod
    def validate_links(cls, v: List[str]) -> List[str]:
        """Enforce the link cap and absolute http(s) prefix."""
        if len(v) > MAX_LINKS:
            raise ValueError(f"At most {MAX_LINKS} links allowed, got {len(v)}")
        for link in v:
            if not link.startswith("http"):
                raise ValueError(f"Not an absolute http link: {link!r}")
        return v

    @property
    def failed(self) -> bool:
        return self.status == ResultStatus.FAILED

    @classmethod
    def empty(
        cls,
        source_identifier: str,
        error: Optional[str] = None,
        http_status: Optional[int] = None,
    ) -> 'SourceResult':
        """Result for a source whose pipeline did not produce links."""
        return cls(
            source_identifier=source_identifier,
            links=[],
            status=ResultStatus.FAILED if error else ResultStatus.OK,
            http_status=http_status,
            error=error,
        )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "source_identifier": "Bing",
                "links": ["https://doc.rust-lang.org/book/ch04-01-what-is-ownership.html"],
                "status": "OK",
                "http_status": 200,
                "page_title": "rust ownership - Search",
                "error": None,
            }
        }


class SearchReport(BaseModel):
    """Aggregated results, one entry per configured source in declaration order."""
    query: str = Field(..., description="Query the report was produced for")
    entries: List[SourceResult] = Field(default_factory=list, description="Per-source results")

    def for_source(self, source_identifier: str) -> Optional[SourceResult]:
        """Look up the entry for one engine."""
        for entry in self.entries:
            if entry.source_identifier == source_identifier:
                return entry
        return None

    @property
    def total_links(self) -> int:
        return sum(len(e.links) for e in self.entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return self.model_dump(mode='json')

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "query": "rust ownership",
                "entries": [
                    {"source_identifier": "Google", "links": [], "status": "FAILED",
                     "error": "ConnectError: [Errno -2] Name or service not known"},
                ],
            }
        }
