"""Report writing for batch conflict results."""

import json
import os
import sys
from typing import TextIO

from loguru import logger

from rimeguard.core.phrase_types import get_phrase_type_label
from rimeguard.core.types import BatchConflictResult, BatchPRItem, PRAction
from rimeguard.reports.helpers import (
    format_operation,
    format_status,
    write_section_header,
)
from rimeguard.resolution.batch import summarize_results


def results_to_json(results: list[BatchConflictResult]) -> str:
    """Serialize results with the web API's camelCase keys."""
    payload = {
        "results": [
            result.model_dump(mode="json", by_alias=True, exclude_none=True) for result in results
        ]
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _write_item(index: int, item: BatchPRItem, result: BatchConflictResult, f: TextIO) -> None:
    conflict = result.conflict
    f.write(f"#{index + 1} [{format_status(result)}] {format_operation(item)}\n")

    if item.type is not None and item.action is PRAction.CREATE:
        weight = result.calculated_weight if result.calculated_weight is not None else "-"
        f.write(f"    Type: {get_phrase_type_label(item.type)}  Weight: {weight}\n")
    if conflict.current_phrase:
        phrase = conflict.current_phrase
        f.write(
            f"    Current: '{phrase.word}' @ {phrase.code} (weight {phrase.weight})\n"
        )
    if conflict.impact:
        f.write(f"    Impact: {conflict.impact}\n")
    for suggestion in conflict.suggestions:
        move = f" {suggestion.from_code} -> {suggestion.to_code}" if suggestion.to_code else ""
        f.write(f"    - {suggestion.action.value}{move}: {suggestion.reason}\n")


def write_text_report(
    items: list[BatchPRItem],
    results: list[BatchConflictResult],
    f: TextIO,
) -> None:
    """Write a human-readable report: one block per item, then a summary.

    Args:
        items: The checked batch
        results: Results in the same order as items
        f: File to write to
    """
    write_section_header(f, "BATCH CONFLICT CHECK")
    for index, (item, result) in enumerate(zip(items, results)):
        _write_item(index, item, result, f)
    f.write("\n")

    summary = summarize_results(results)
    write_section_header(f, "SUMMARY")
    f.write(f"  Items:              {summary.total}\n")
    f.write(f"  Blocked:            {summary.blocked}\n")
    f.write(f"  Warnings:           {summary.warnings}\n")
    f.write(f"  Resolved in batch:  {summary.resolved}\n")
    f.write(f"  Clean:              {summary.clean}\n")


def write_report(
    items: list[BatchPRItem],
    results: list[BatchConflictResult],
    output_path: str | None,
    report_format: str = "text",
) -> None:
    """Write the report to output_path, or to stdout when no path is given.

    Args:
        items: The checked batch
        results: Results in the same order as items
        output_path: Output file (None = stdout)
        report_format: "text" or "json"
    """
    if report_format not in ("text", "json"):
        raise ValueError(f"Unknown report format: {report_format}")

    def _write(f: TextIO) -> None:
        if report_format == "json":
            f.write(results_to_json(results) + "\n")
        else:
            write_text_report(items, results, f)

    if output_path:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            _write(f)
        logger.info(f"Wrote {report_format} report for {len(results)} items to {output_path}")
    else:
        _write(sys.stdout)
