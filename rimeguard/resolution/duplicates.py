"""Detection of repeated Create operations within one batch."""

from dataclasses import dataclass

from rimeguard.core.types import BatchPRItem, PRAction


@dataclass(frozen=True)
class DuplicateCheck:
    """Result of the in-batch duplicate check for one item."""

    has_duplicate: bool
    duplicate_index: int | None = None  # Earliest matching earlier item


def check_batch_duplicates(items: list[BatchPRItem], current_index: int) -> DuplicateCheck:
    """Check whether an earlier item already creates the same (word, code).

    Only Create items are checked; Change and Delete never count as
    duplicates.

    Args:
        items: The whole batch
        current_index: Index of the item being checked

    Returns:
        DuplicateCheck pointing at the earliest matching Create, if any
    """
    current = items[current_index]
    if current.action is not PRAction.CREATE:
        return DuplicateCheck(has_duplicate=False)

    for index, item in enumerate(items[:current_index]):
        if item.action is PRAction.CREATE and item.code == current.code and item.word == current.word:
            return DuplicateCheck(has_duplicate=True, duplicate_index=index)

    return DuplicateCheck(has_duplicate=False)
