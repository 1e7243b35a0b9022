"""Unit tests for single-change conflict detection behavior."""

from conftest import make_store

from rimeguard.core import PhraseChange, PRAction, SuggestionAction
from rimeguard.resolution import ConflictDetector


def _check(store, action, word, code, **kwargs):
    return ConflictDetector(store).check_conflict(
        PhraseChange(action=action, word=word, code=code, **kwargs)
    )


class TestCreate:
    """Test Create classification."""

    def test_exact_pair_is_blocked(self, rjgl_store) -> None:
        """Creating an existing (word, code) pair is a hard conflict."""
        result = _check(rjgl_store, PRAction.CREATE, "如果", "rjgl")
        assert result.has_conflict

    def test_exact_pair_reports_existing_phrase(self, rjgl_store) -> None:
        """The existing pair is returned as the current phrase."""
        result = _check(rjgl_store, PRAction.CREATE, "如果", "rjgl")
        assert result.current_phrase.word == "如果"

    def test_exact_pair_suggests_cancel(self, rjgl_store) -> None:
        """The first suggestion for an exact duplicate is Cancel."""
        result = _check(rjgl_store, PRAction.CREATE, "如果", "rjgl")
        assert result.suggestions[0].action is SuggestionAction.CANCEL

    def test_exact_pair_impact_mentions_combination(self, rjgl_store) -> None:
        """The impact says the combination already exists."""
        result = _check(rjgl_store, PRAction.CREATE, "如果", "rjgl")
        assert "组合已存在" in result.impact

    def test_duplicate_code_is_allowed(self, rjgl_store) -> None:
        """A different word on an occupied code is not blocked."""
        result = _check(rjgl_store, PRAction.CREATE, "茹果", "rjgl")
        assert not result.has_conflict

    def test_duplicate_code_reports_occupant(self, rjgl_store) -> None:
        """The occupant of the code is returned as the current phrase."""
        result = _check(rjgl_store, PRAction.CREATE, "茹果", "rjgl")
        assert result.current_phrase.word == "如果"

    def test_duplicate_code_is_a_warning(self, rjgl_store) -> None:
        """A duplicate code is flagged as a warning with an impact mentioning 重码."""
        result = _check(rjgl_store, PRAction.CREATE, "茹果", "rjgl")
        assert result.is_warning and "重码" in result.impact

    def test_duplicate_code_suggestions_in_order(self, rjgl_store) -> None:
        """Move, Adjust and Cancel are suggested in that order."""
        result = _check(rjgl_store, PRAction.CREATE, "茹果", "rjgl")
        assert [s.action for s in result.suggestions] == [
            SuggestionAction.MOVE,
            SuggestionAction.ADJUST,
            SuggestionAction.CANCEL,
        ]

    def test_move_suggestion_uses_first_free_alternative(self) -> None:
        """Taken alternative codes are skipped."""
        store = make_store(("如果", "rjgl", 100), ("占位", "rjgla", 100))
        result = _check(store, PRAction.CREATE, "茹果", "rjgl")
        move = result.suggestions[0]
        assert (move.word, move.from_code, move.to_code) == ("如果", "rjgl", "rjgli")

    def test_no_cancel_when_proposal_outweighs_occupant(self, rjgl_store) -> None:
        """Cancel is only suggested when the existing phrase weighs more."""
        result = _check(rjgl_store, PRAction.CREATE, "茹果", "rjgl", weight=200)
        assert SuggestionAction.CANCEL not in [s.action for s in result.suggestions]

    def test_no_alternatives_when_all_taken(self) -> None:
        """With every alternative code taken only Cancel remains."""
        taken = [("占" + suffix, "ab" + suffix, 1) for suffix in ("a", "i", "o", "u", "v", "b")]
        store = make_store(("如果", "ab", 100), *taken)
        result = _check(store, PRAction.CREATE, "茹果", "ab")
        assert [s.action for s in result.suggestions] == [SuggestionAction.CANCEL]

    def test_word_on_other_code_is_allowed(self) -> None:
        """A word already stored on another code is a warning, not a conflict."""
        store = make_store(("茹果", "rjgm", 100))
        result = _check(store, PRAction.CREATE, "茹果", "rjgl")
        assert not result.has_conflict and "多编码词条" in result.impact

    def test_word_on_other_code_has_no_suggestions(self) -> None:
        """Multi-code warnings carry no suggestions."""
        store = make_store(("茹果", "rjgm", 100))
        result = _check(store, PRAction.CREATE, "茹果", "rjgl")
        assert result.suggestions == []

    def test_code_collision_takes_precedence(self) -> None:
        """With both collisions the code occupant is the current phrase."""
        store = make_store(("如果", "rjgl", 100), ("茹果", "rjgm", 100))
        result = _check(store, PRAction.CREATE, "茹果", "rjgl")
        assert result.current_phrase.word == "如果"

    def test_word_collision_folded_into_impact(self) -> None:
        """The multi-code word is mentioned as an extra warning."""
        store = make_store(("如果", "rjgl", 100), ("茹果", "rjgm", 100))
        result = _check(store, PRAction.CREATE, "茹果", "rjgl")
        assert "重码" in result.impact and 'rjgm' in result.impact

    def test_free_code_is_clean(self, rjgl_store) -> None:
        """A new word on a free code has no conflict and no current phrase."""
        result = _check(rjgl_store, PRAction.CREATE, "新词", "xinc")
        assert not result.has_conflict and result.current_phrase is None

    def test_phrase_id_excludes_own_row(self, rjgl_store) -> None:
        """Editing a proposal does not collide with its own phrase."""
        result = _check(rjgl_store, PRAction.CREATE, "如果", "rjgl", phrase_id=1)
        assert not result.has_conflict and result.current_phrase is None


class TestChange:
    """Test Change classification."""

    def test_missing_old_word_is_blocked(self, rjgl_store) -> None:
        """A Change without an old word is a hard conflict."""
        result = _check(rjgl_store, PRAction.CHANGE, "茹果", "rjgl")
        assert result.has_conflict and "需要指定旧词" in result.impact

    def test_unknown_old_word_is_blocked(self, rjgl_store) -> None:
        """A Change of a phrase that does not exist is a hard conflict."""
        result = _check(rjgl_store, PRAction.CHANGE, "茹果", "rjgl", old_word="不存在")
        assert result.has_conflict and "不存在" in result.impact

    def test_existing_target_is_blocked(self) -> None:
        """Renaming onto an existing (word, code) pair is a hard conflict."""
        store = make_store(("如果", "rjgl", 100), ("茹果", "rjgl", 101))
        result = _check(store, PRAction.CHANGE, "茹果", "rjgl", old_word="如果")
        assert result.has_conflict and result.current_phrase.word == "茹果"

    def test_valid_change_returns_old_phrase(self, rjgl_store) -> None:
        """A valid Change reports the phrase it replaces."""
        result = _check(rjgl_store, PRAction.CHANGE, "茹果", "rjgl", old_word="如果")
        assert not result.has_conflict and result.current_phrase.word == "如果"

    def test_same_word_change_is_valid(self, rjgl_store) -> None:
        """Changing a word to itself is not a conflict."""
        result = _check(rjgl_store, PRAction.CHANGE, "如果", "rjgl", old_word="如果")
        assert not result.has_conflict


class TestDelete:
    """Test Delete classification."""

    def test_missing_phrase_is_blocked(self, empty_store) -> None:
        """Deleting a phrase that does not exist is a hard conflict."""
        result = _check(empty_store, PRAction.DELETE, "不存在", "xxxx")
        assert result.has_conflict and "不存在" in result.impact

    def test_existing_phrase_is_valid(self, rjgl_store) -> None:
        """Deleting an existing phrase reports that phrase."""
        result = _check(rjgl_store, PRAction.DELETE, "如果", "rjgl")
        assert not result.has_conflict and result.current_phrase.id == 1


class TestValidateBatch:
    """Test validate_batch behavior."""

    def test_delete_by_id_resolves_conflict(self, rjgl_store) -> None:
        """A Delete targeting the conflicting phrase id resolves the conflict."""
        changes = [
            PhraseChange(action=PRAction.CREATE, word="如果", code="rjgl"),
            PhraseChange(action=PRAction.DELETE, word="如果", code="rjgl", phrase_id=1),
        ]
        validation = ConflictDetector(rjgl_store).validate_batch(changes)
        assert validation.valid

    def test_unresolved_conflict_invalidates_batch(self, rjgl_store) -> None:
        """A hard conflict with no resolver leaves the batch invalid."""
        changes = [PhraseChange(action=PRAction.CREATE, word="如果", code="rjgl")]
        validation = ConflictDetector(rjgl_store).validate_batch(changes)
        assert not validation.valid and len(validation.unresolved_conflicts) == 1

    def test_change_on_same_code_does_not_resolve(self, rjgl_store) -> None:
        """Only a Change moving the phrase to another code resolves it."""
        changes = [
            PhraseChange(action=PRAction.CREATE, word="如果", code="rjgl"),
            PhraseChange(
                action=PRAction.CHANGE, word="茹果", old_word="如果", code="rjgl", phrase_id=1
            ),
        ]
        validation = ConflictDetector(rjgl_store).validate_batch(changes)
        assert not validation.valid

    def test_conflict_without_phrase_never_resolves(self, empty_store) -> None:
        """A failed Delete has no phrase to resolve against."""
        changes = [PhraseChange(action=PRAction.DELETE, word="不存在", code="xxxx")]
        validation = ConflictDetector(empty_store).validate_batch(changes)
        assert validation.unresolved_conflicts == validation.conflicts
