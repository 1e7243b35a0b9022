"""Helper functions for report generation."""

from typing import TextIO

from rimeguard.core.types import BatchConflictResult, BatchPRItem, PRAction
from rimeguard.resolution.batch import is_resolved


def write_section_header(f: TextIO, title: str) -> None:
    """Write a section header."""
    f.write("=" * 70 + "\n")
    f.write(f"{title}\n")
    f.write("=" * 70 + "\n\n")


def format_operation(item: BatchPRItem) -> str:
    """One-line description of a batch item."""
    if item.action is PRAction.CHANGE:
        return f"Change '{item.old_word}' -> '{item.word}' @ {item.code}"
    if item.action is PRAction.CREATE or item.action is PRAction.DELETE:
        return f"{item.action.value} '{item.word}' @ {item.code}"
    raise ValueError(f"Unhandled action: {item.action}")


def format_status(result: BatchConflictResult) -> str:
    """Short status label of a result."""
    if result.conflict.has_conflict:
        return "BLOCKED"
    if is_resolved(result):
        return "RESOLVED"
    if result.conflict.is_warning:
        return "WARNING"
    return "OK"
