"""Phrase store access for RimeGuard."""

from .base import PhraseStore
from .loading import load_batch_items, load_phrases_json, open_store
from .memory import InMemoryPhraseStore
from .sqlite import SqlitePhraseStore, create_phrase_database

__all__ = [
    "InMemoryPhraseStore",
    "PhraseStore",
    "SqlitePhraseStore",
    "create_phrase_database",
    "load_batch_items",
    "load_phrases_json",
    "open_store",
]
