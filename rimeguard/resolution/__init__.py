"""Conflict detection and batch resolution for RimeGuard."""

from .batch import (
    BatchSummary,
    build_operation_maps,
    check_batch_conflicts_with_weight,
    check_item,
    is_resolved,
    resolve_within_batch,
    summarize_results,
)
from .detector import ConflictDetector
from .duplicates import DuplicateCheck, check_batch_duplicates
from .weights import WeightSimulation, calculate_dynamic_weight, replay_batch, replay_operation

__all__ = [
    "BatchSummary",
    "ConflictDetector",
    "DuplicateCheck",
    "WeightSimulation",
    "build_operation_maps",
    "calculate_dynamic_weight",
    "check_batch_conflicts_with_weight",
    "check_batch_duplicates",
    "check_item",
    "is_resolved",
    "replay_batch",
    "replay_operation",
    "resolve_within_batch",
    "summarize_results",
]
