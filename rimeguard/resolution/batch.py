"""Batch conflict resolution with dynamic weights.

Pass 1 checks every item on its own: in-batch duplicates, conflicts with the
store and the weight a Create will receive. Pass 2 looks for other items of
the batch that remove an item's conflict (deleting or renaming the phrase it
collides with) and rewrites that item's result.

Batches are treated as applied atomically: a resolver may sit before or after
the item it resolves.
"""

from collections.abc import Collection, Mapping
from dataclasses import dataclass

from loguru import logger
from tqdm import tqdm

from rimeguard.core.types import (
    BatchConflictResult,
    BatchPRItem,
    CodeSuggestion,
    ConflictInfo,
    PRAction,
    SuggestionAction,
)
from rimeguard.resolution import messages
from rimeguard.resolution.detector import ConflictDetector
from rimeguard.resolution.duplicates import check_batch_duplicates
from rimeguard.resolution.weights import calculate_dynamic_weight
from rimeguard.store.base import PhraseStore
from rimeguard.utils.debug import log_if_debug_code


@dataclass(frozen=True)
class IndexedOperation:
    """A batch item together with its position."""

    index: int
    item: BatchPRItem


@dataclass(frozen=True)
class OperationMaps:
    """Lookup of Delete targets and Change sources, keyed by (code, word)."""

    deletes: dict[tuple[str, str], IndexedOperation]
    changes: dict[tuple[str, str], IndexedOperation]


@dataclass(frozen=True)
class BatchSummary:
    """Counts of result categories for one batch."""

    total: int
    blocked: int
    warnings: int
    resolved: int
    clean: int


def is_resolved(result: BatchConflictResult) -> bool:
    """Whether Pass 2 marked the result as resolved by another item."""
    return any(s.action is SuggestionAction.RESOLVED for s in result.conflict.suggestions)


def summarize_results(results: list[BatchConflictResult]) -> BatchSummary:
    """Count blocked, warned, resolved and clean results."""
    blocked = sum(1 for r in results if r.conflict.has_conflict)
    resolved = sum(1 for r in results if not r.conflict.has_conflict and is_resolved(r))
    warnings = sum(
        1 for r in results if r.conflict.is_warning and not is_resolved(r)
    )
    return BatchSummary(
        total=len(results),
        blocked=blocked,
        warnings=warnings,
        resolved=resolved,
        clean=len(results) - blocked - warnings - resolved,
    )


# Pass 1


def _duplicate_result(item: BatchPRItem, duplicate_index: int) -> BatchConflictResult:
    impact, reason = messages.batch_duplicate(duplicate_index)
    return BatchConflictResult(
        id=item.id,
        conflict=ConflictInfo(
            has_conflict=True,
            code=item.code,
            impact=impact,
            suggestions=[
                CodeSuggestion(action=SuggestionAction.CANCEL, word=item.word, reason=reason)
            ],
        ),
    )


def check_item(
    items: list[BatchPRItem],
    index: int,
    store: PhraseStore,
    detector: ConflictDetector,
    type_weights: Mapping[str, int] | None = None,
    debug_codes: Collection[str] | None = None,
) -> BatchConflictResult:
    """Pass 1 for a single item: duplicate check, store check and weight."""
    item = items[index]

    duplicate = check_batch_duplicates(items, index)
    if duplicate.has_duplicate:
        log_if_debug_code(
            item.code,
            f"'{item.word}' (#{index + 1}) repeats #{duplicate.duplicate_index + 1}",
            debug_codes,
            "Pass 1",
        )
        return _duplicate_result(item, duplicate.duplicate_index)

    conflict = detector.check_conflict(item.to_change())

    calculated_weight = None
    if item.action is PRAction.CREATE and item.type is not None:
        calculated_weight = calculate_dynamic_weight(
            item, items, index, store, type_weights, debug_codes
        )
        if conflict.is_warning:
            conflict = conflict.model_copy(
                update={"impact": messages.with_weight(conflict.impact, calculated_weight)}
            )

    return BatchConflictResult(id=item.id, conflict=conflict, calculated_weight=calculated_weight)


# Pass 2


def build_operation_maps(items: list[BatchPRItem]) -> OperationMaps:
    """Index Deletes by their target and Changes by their source.

    When several items share a key, the last one wins.
    """
    deletes: dict[tuple[str, str], IndexedOperation] = {}
    changes: dict[tuple[str, str], IndexedOperation] = {}
    for index, item in enumerate(items):
        if item.action is PRAction.DELETE:
            deletes[(item.code, item.word)] = IndexedOperation(index, item)
        elif item.action is PRAction.CHANGE:
            if item.old_word:
                changes[(item.code, item.old_word)] = IndexedOperation(index, item)
        elif item.action is not PRAction.CREATE:
            raise ValueError(f"Unhandled action: {item.action}")
    return OperationMaps(deletes=deletes, changes=changes)


def _mark_resolved(
    result: BatchConflictResult,
    index: int,
    resolver: IndexedOperation,
    reason: str,
) -> BatchConflictResult:
    conflict = result.conflict.model_copy(
        update={
            "has_conflict": False,
            "impact": messages.resolved_in_batch(
                resolver.index, index, reason, result.calculated_weight
            ),
            "suggestions": [
                CodeSuggestion(
                    action=SuggestionAction.RESOLVED, word=resolver.item.word, reason=reason
                )
            ],
        }
    )
    return result.model_copy(update={"conflict": conflict})


def _rename_occupant(
    result: BatchConflictResult,
    index: int,
    item: BatchPRItem,
    resolver: IndexedOperation,
) -> BatchConflictResult:
    """Point a Create's conflict at the word its occupant is renamed to.

    The code stays occupied, so the conflict status is left as it was.
    """
    old_word = resolver.item.old_word
    new_word = resolver.item.word
    impact, reason = messages.renamed_occupant_duplicate(
        item.code, old_word, new_word, item.word, resolver.index, index, result.calculated_weight
    )

    suggestions = []
    for suggestion in result.conflict.suggestions:
        if suggestion.action is SuggestionAction.MOVE and suggestion.word == old_word:
            suggestions.append(
                suggestion.model_copy(
                    update={
                        "word": new_word,
                        "reason": messages.move_reason(new_word, suggestion.to_code),
                    }
                )
            )
        elif suggestion.action is SuggestionAction.ADJUST:
            suggestions.append(suggestion)
    suggestions.append(
        CodeSuggestion(action=SuggestionAction.CANCEL, word=item.word, reason=reason)
    )

    current_phrase = result.conflict.current_phrase.model_copy(update={"word": new_word})
    conflict = result.conflict.model_copy(
        update={"current_phrase": current_phrase, "impact": impact, "suggestions": suggestions}
    )
    return result.model_copy(update={"conflict": conflict})


def resolve_result(
    index: int,
    item: BatchPRItem,
    result: BatchConflictResult,
    maps: OperationMaps,
    debug_codes: Collection[str] | None = None,
) -> BatchConflictResult:
    """Pass 2 for a single result; returns a new result or the original one."""
    phrase = result.conflict.current_phrase
    if phrase is None:
        return result

    key = (phrase.code, phrase.word)

    deleter = maps.deletes.get(key)
    if deleter is not None and deleter.index != index:
        log_if_debug_code(
            item.code,
            f"#{index + 1} resolved by Delete #{deleter.index + 1}",
            debug_codes,
            "Pass 2",
        )
        return _mark_resolved(
            result, index, deleter, messages.deleted_occupant_reason(deleter.item.word)
        )

    changer = maps.changes.get(key)
    if changer is not None and changer.index != index:
        # Only an occupant on the Create's own code keeps it duplicated
        if item.action is PRAction.CREATE and phrase.code == item.code:
            log_if_debug_code(
                item.code,
                f"#{index + 1} occupant renamed by Change #{changer.index + 1}, still duplicate",
                debug_codes,
                "Pass 2",
            )
            return _rename_occupant(result, index, item, changer)
        log_if_debug_code(
            item.code,
            f"#{index + 1} resolved by Change #{changer.index + 1}",
            debug_codes,
            "Pass 2",
        )
        return _mark_resolved(
            result,
            index,
            changer,
            messages.renamed_occupant_reason(changer.item.old_word, changer.item.word),
        )

    return result


def resolve_within_batch(
    items: list[BatchPRItem],
    results: list[BatchConflictResult],
    debug_codes: Collection[str] | None = None,
) -> list[BatchConflictResult]:
    """Pass 2: apply in-batch resolutions to the Pass-1 results.

    Pure: builds a new list and never modifies the given results.
    """
    if len(items) != len(results):
        raise ValueError(f"Got {len(results)} results for {len(items)} items")

    maps = build_operation_maps(items)
    return [
        resolve_result(index, item, result, maps, debug_codes)
        for index, (item, result) in enumerate(zip(items, results))
    ]


def check_batch_conflicts_with_weight(
    items: list[BatchPRItem],
    store: PhraseStore,
    *,
    detector: ConflictDetector | None = None,
    type_weights: Mapping[str, int] | None = None,
    debug_codes: Collection[str] | None = None,
    verbose: bool = False,
) -> list[BatchConflictResult]:
    """Check a whole batch against the store and against itself.

    Args:
        items: The batch, in submission order
        store: Phrase store to check against (read only)
        detector: Conflict detector to use (default: one over store)
        type_weights: Optional per-type base weight overrides
        debug_codes: Codes to trace at debug level
        verbose: Show a progress bar and a summary

    Returns:
        One result per item, in input order, correlated by item id

    Raises:
        Whatever the store raises on access failure; nothing is retried
    """
    if detector is None:
        detector = ConflictDetector(store, debug_codes)

    indexes = range(len(items))
    if verbose:
        indexes = tqdm(indexes, total=len(items), desc="Checking batch", unit="item")

    results = [
        check_item(items, index, store, detector, type_weights, debug_codes) for index in indexes
    ]
    results = resolve_within_batch(items, results, debug_codes)

    if verbose:
        summary = summarize_results(results)
        logger.info(
            f"  {summary.total} items: {summary.blocked} blocked, {summary.warnings} warnings, "
            f"{summary.resolved} resolved in batch, {summary.clean} clean"
        )

    return results
