"""RimeGuard - Batch conflict checker for Rime dictionary pull requests.

Check proposed Create/Change/Delete operations against a KeyTao phrase
dictionary and predict the weight each new entry will receive.
"""

from .core import (
    BatchConflictResult,
    BatchPRItem,
    CodeSuggestion,
    Config,
    ConflictInfo,
    Phrase,
    PhraseChange,
    PhraseType,
    PRAction,
    SuggestionAction,
    load_config,
)
from .resolution import (
    ConflictDetector,
    calculate_dynamic_weight,
    check_batch_conflicts_with_weight,
    check_batch_duplicates,
)
from .store import InMemoryPhraseStore, PhraseStore, SqlitePhraseStore

__version__ = "0.3.0"
__all__ = [
    "BatchConflictResult",
    "BatchPRItem",
    "CodeSuggestion",
    "Config",
    "ConflictDetector",
    "ConflictInfo",
    "InMemoryPhraseStore",
    "Phrase",
    "PhraseChange",
    "PhraseStore",
    "PhraseType",
    "PRAction",
    "SqlitePhraseStore",
    "SuggestionAction",
    "calculate_dynamic_weight",
    "check_batch_conflicts_with_weight",
    "check_batch_duplicates",
    "load_config",
]
