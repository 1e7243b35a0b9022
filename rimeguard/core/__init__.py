"""Core domain types for RimeGuard."""

from .codes import generate_alternative_codes, get_code_validation_error, is_valid_code
from .config import Config, load_config
from .errors import InputError
from .phrase_types import (
    PHRASE_TYPE_CONFIGS,
    PhraseType,
    PhraseTypeConfig,
    get_default_weight,
    get_phrase_type_label,
    is_valid_phrase_type,
)
from .types import (
    BatchConflictResult,
    BatchPRItem,
    BatchValidation,
    CodeSuggestion,
    ConflictInfo,
    Phrase,
    PhraseChange,
    PRAction,
    SuggestionAction,
)

__all__ = [
    "BatchConflictResult",
    "BatchPRItem",
    "BatchValidation",
    "CodeSuggestion",
    "Config",
    "ConflictInfo",
    "InputError",
    "PHRASE_TYPE_CONFIGS",
    "Phrase",
    "PhraseChange",
    "PhraseType",
    "PhraseTypeConfig",
    "PRAction",
    "SuggestionAction",
    "generate_alternative_codes",
    "get_code_validation_error",
    "get_default_weight",
    "get_phrase_type_label",
    "is_valid_code",
    "is_valid_phrase_type",
    "load_config",
]
