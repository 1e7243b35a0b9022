"""Conflict detection for a single proposed change."""

from collections.abc import Collection

from loguru import logger

from rimeguard.core.codes import generate_alternative_codes
from rimeguard.core.types import (
    BatchValidation,
    CodeSuggestion,
    ConflictInfo,
    Phrase,
    PhraseChange,
    PRAction,
    SuggestionAction,
)
from rimeguard.resolution import messages
from rimeguard.store.base import PhraseStore
from rimeguard.utils.debug import log_if_debug_code


def _blocked(
    change: PhraseChange,
    impact_and_reason: tuple[str, str],
    current_phrase: Phrase | None = None,
) -> ConflictInfo:
    """Build a hard conflict carrying a single Cancel suggestion."""
    impact, reason = impact_and_reason
    return ConflictInfo(
        has_conflict=True,
        code=change.code,
        current_phrase=current_phrase,
        impact=impact,
        suggestions=[CodeSuggestion(action=SuggestionAction.CANCEL, word=change.word, reason=reason)],
    )


class ConflictDetector:
    """Checks proposed changes against the current contents of a phrase store.

    Rules per action:

    - Change: the old (word, code) must exist, and renaming must not produce
      an existing (word, code) pair.
    - Delete: the (word, code) must exist.
    - Create: an existing (word, code) pair blocks. A code used by another
      word (duplicate code) or a word used on another code (multi-code word)
      is allowed with a warning; the code collision takes precedence.

    Business-rule failures come back as ConflictInfo values. Store errors
    propagate.
    """

    def __init__(self, store: PhraseStore, debug_codes: Collection[str] | None = None):
        self.store = store
        self.debug_codes = debug_codes

    def check_conflict(self, change: PhraseChange) -> ConflictInfo:
        """Classify one change as clean, warned or blocked."""
        if change.action is PRAction.CHANGE:
            result = self._check_change(change)
        elif change.action is PRAction.DELETE:
            result = self._check_delete(change)
        elif change.action is PRAction.CREATE:
            result = self._check_create(change)
        else:
            raise ValueError(f"Unhandled action: {change.action}")

        log_if_debug_code(
            change.code,
            f"{change.action.value} '{change.word}': "
            f"{'BLOCKED' if result.has_conflict else 'ok'} ({result.impact or 'no impact'})",
            self.debug_codes,
            "Detector",
        )
        return result

    def _check_change(self, change: PhraseChange) -> ConflictInfo:
        if not change.old_word:
            return _blocked(change, messages.change_missing_old_word())

        old_phrase = self.store.find_one(word=change.old_word, code=change.code)
        if old_phrase is None:
            return _blocked(change, messages.change_old_word_missing(change.code, change.old_word))

        if change.word != change.old_word:
            existing = self.store.find_one(
                word=change.word, code=change.code, exclude_id=change.phrase_id
            )
            if existing is not None:
                return _blocked(
                    change, messages.change_target_exists(change.code, change.word), existing
                )

        return ConflictInfo(has_conflict=False, code=change.code, current_phrase=old_phrase)

    def _check_delete(self, change: PhraseChange) -> ConflictInfo:
        phrase = self.store.find_one(word=change.word, code=change.code)
        if phrase is None:
            return _blocked(change, messages.delete_missing(change.word, change.code))
        return ConflictInfo(has_conflict=False, code=change.code, current_phrase=phrase)

    def _check_create(self, change: PhraseChange) -> ConflictInfo:
        exact = self.store.find_one(
            word=change.word, code=change.code, exclude_id=change.phrase_id
        )
        if exact is not None:
            return _blocked(change, messages.exact_duplicate(change.word, change.code), exact)

        # With the exact pair ruled out, any phrase on this code has another word
        code_occupant = self.store.find_one(code=change.code, exclude_id=change.phrase_id)
        word_elsewhere = self.store.find_one(
            word=change.word, exclude_id=change.phrase_id, exclude_code=change.code
        )

        if code_occupant is not None:
            return ConflictInfo(
                has_conflict=False,
                code=change.code,
                current_phrase=code_occupant,
                impact=messages.duplicate_code(
                    change.code,
                    code_occupant.word,
                    change.word,
                    word_elsewhere.code if word_elsewhere else None,
                ),
                suggestions=self.generate_suggestions(change, code_occupant),
            )

        if word_elsewhere is not None:
            return ConflictInfo(
                has_conflict=False,
                code=change.code,
                current_phrase=word_elsewhere,
                impact=messages.multi_code_word(change.word, word_elsewhere.code),
            )

        return ConflictInfo(has_conflict=False, code=change.code)

    def _first_available_code(self, code: str) -> str | None:
        for alternative in generate_alternative_codes(code):
            if self.store.is_code_available(alternative):
                return alternative
        return None

    def generate_suggestions(self, proposed: PhraseChange, existing: Phrase) -> list[CodeSuggestion]:
        """Suggest ways around a duplicate code.

        Tries moving the existing occupant, then moving the proposed word, to
        the first free alternative code, and suggests cancelling when the
        occupant outweighs the proposal. A heuristic, not an exhaustive search.
        """
        suggestions = []

        occupant_alternative = self._first_available_code(existing.code)
        if occupant_alternative:
            suggestions.append(
                CodeSuggestion(
                    action=SuggestionAction.MOVE,
                    word=existing.word,
                    from_code=existing.code,
                    to_code=occupant_alternative,
                    reason=messages.move_reason(existing.word, occupant_alternative),
                )
            )

        proposed_alternative = self._first_available_code(proposed.code)
        if proposed_alternative:
            suggestions.append(
                CodeSuggestion(
                    action=SuggestionAction.ADJUST,
                    word=proposed.word,
                    from_code=proposed.code,
                    to_code=proposed_alternative,
                    reason=messages.adjust_reason(proposed_alternative),
                )
            )

        if existing.weight > (proposed.weight or 0):
            suggestions.append(
                CodeSuggestion(
                    action=SuggestionAction.CANCEL,
                    word=proposed.word,
                    reason=messages.cancel_lower_priority_reason(existing.word),
                )
            )

        return suggestions

    def validate_batch(self, changes: list[PhraseChange]) -> BatchValidation:
        """Check independent changes and report which hard conflicts remain.

        A hard conflict counts as resolved when another change of the batch
        targets the conflicting phrase by id and deletes it or moves it to a
        different code. Conflicts without a current phrase never resolve.
        """
        conflicts = [
            conflict
            for conflict in (self.check_conflict(change) for change in changes)
            if conflict.has_conflict
        ]

        def is_resolved(conflict: ConflictInfo) -> bool:
            if conflict.current_phrase is None:
                return False
            return any(
                change.phrase_id == conflict.current_phrase.id
                and (
                    change.action is PRAction.DELETE
                    or (change.action is PRAction.CHANGE and change.code != conflict.code)
                )
                for change in changes
            )

        unresolved = [conflict for conflict in conflicts if not is_resolved(conflict)]
        logger.debug(
            f"Batch validation: {len(conflicts)} conflicts, {len(unresolved)} unresolved"
        )
        return BatchValidation(
            valid=not unresolved,
            conflicts=conflicts,
            unresolved_conflicts=unresolved,
        )
