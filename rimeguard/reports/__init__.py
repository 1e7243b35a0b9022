"""Report generation for RimeGuard."""

from .helpers import format_operation, format_status, write_section_header
from .writers import results_to_json, write_report, write_text_report

__all__ = [
    "format_operation",
    "format_status",
    "results_to_json",
    "write_report",
    "write_section_header",
    "write_text_report",
]
