"""
UI package initialization.
"""

from . import report

__all__ = ["report"]
