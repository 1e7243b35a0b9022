"""Type definitions for RimeGuard.

Records exchanged with the web application are pydantic models. They use
snake_case attributes in Python and accept/emit the camelCase keys of the web
API (``oldWord``, ``hasConflict``, ``calculatedWeight`` ...).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rimeguard.core.phrase_types import PhraseType


class PRAction(Enum):
    """Operation proposed by a pull request item."""

    CREATE = "Create"
    CHANGE = "Change"
    DELETE = "Delete"


class SuggestionAction(Enum):
    """Kind of suggestion attached to a conflict."""

    MOVE = "Move"  # Relocate the existing occupant
    ADJUST = "Adjust"  # Relocate the proposed word
    CANCEL = "Cancel"  # Drop the proposed operation
    RESOLVED = "Resolved"  # Another batch item removes the conflict


class ApiModel(BaseModel):
    """Base model accepting both snake_case and camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Phrase(ApiModel):
    """A stored dictionary entry. (word, code) is unique in the store."""

    id: int
    word: str
    code: str
    weight: int = 0
    user_id: int | None = None
    type: PhraseType | None = None


class PhraseChange(ApiModel):
    """A single proposed change, as checked by the conflict detector."""

    action: PRAction
    word: str
    code: str
    old_word: str | None = None  # Change only: the word being replaced
    phrase_id: int | None = None  # Excluded from collision lookups
    weight: int | None = None


class BatchPRItem(ApiModel):
    """One proposed operation of a batch."""

    id: str
    action: PRAction
    word: str
    code: str
    old_word: str | None = None
    weight: int | None = None
    type: PhraseType | None = None

    def to_change(self) -> PhraseChange:
        """Convert to the detector's input record."""
        return PhraseChange(
            action=self.action,
            word=self.word,
            old_word=self.old_word,
            code=self.code,
            weight=self.weight,
        )


class CodeSuggestion(ApiModel):
    """A hint for resolving a conflict."""

    action: SuggestionAction
    word: str
    reason: str
    from_code: str | None = None
    to_code: str | None = None


class ConflictInfo(ApiModel):
    """Result of checking one operation.

    ``has_conflict`` blocks submission. A non-blocking result that still
    carries ``current_phrase`` and ``impact`` is a warning (duplicate code or
    multi-code word) that the user must acknowledge.
    """

    has_conflict: bool
    code: str
    current_phrase: Phrase | None = None
    impact: str | None = None
    suggestions: list[CodeSuggestion] = Field(default_factory=list)

    @property
    def is_warning(self) -> bool:
        """True for an allowed-but-warned result."""
        return not self.has_conflict and self.current_phrase is not None and bool(self.impact)


class BatchConflictResult(ApiModel):
    """Conflict check result for one batch item, correlated by ``id``."""

    id: str
    conflict: ConflictInfo
    calculated_weight: int | None = None


class BatchValidation(ApiModel):
    """Outcome of validating a batch of independent changes."""

    valid: bool
    conflicts: list[ConflictInfo] = Field(default_factory=list)
    unresolved_conflicts: list[ConflictInfo] = Field(default_factory=list)
