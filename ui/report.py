"""
Search results page — plain-text rendering of a SearchReport.
"""

import sys
from typing import List, Optional, TextIO

from models.schema import SearchReport, SourceResult


def render_lines(report: SearchReport, show_errors: bool = True) -> List[str]:
    """Format a report as text lines, engines in report order, links 1-indexed."""
    lines = ["Search Results"]
    for entry in report.entries:
        lines.append(f"| {entry.source_identifier}{_status_suffix(entry, show_errors)}")
        for idx, link in enumerate(entry.links, start=1):
            lines.append(f"  * #{idx}: {link}")
    return lines


def render(report: SearchReport, stream: Optional[TextIO] = None, show_errors: bool = True):
    """Print the report."""
    out = stream or sys.stdout
    for line in render_lines(report, show_errors=show_errors):
        print(line, file=out)


def render_status(source_identifier: str, message: str, stream: Optional[TextIO] = None):
    """Progress line for one engine."""
    print(f"  {message}", file=stream or sys.stderr)


def _status_suffix(entry: SourceResult, show_errors: bool) -> str:
    if not show_errors or not entry.failed:
        return ""
    return f" (failed: {entry.error})" if entry.error else " (failed)"
