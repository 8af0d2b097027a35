"""
Reporting - Presentation of sessions and batch runs.

Text pictures for the terminal, pydantic models for JSON output.
"""

from .render import render_grid, render_status
from .schemas import BatchConfig, SessionSummary, BatchReport

__all__ = [
    "render_grid",
    "render_status",
    "BatchConfig",
    "SessionSummary",
    "BatchReport",
]
