"""Shared fixtures for RimeGuard tests."""

import pytest

from rimeguard.core import BatchPRItem, Phrase, PhraseType, PRAction
from rimeguard.store import InMemoryPhraseStore


def make_store(*entries: tuple) -> InMemoryPhraseStore:
    """Build a store from (word, code, weight[, type]) tuples; ids follow order."""
    phrases = []
    for index, entry in enumerate(entries, start=1):
        word, code, weight = entry[:3]
        phrase_type = entry[3] if len(entry) > 3 else PhraseType.PHRASE
        phrases.append(
            Phrase(id=index, word=word, code=code, weight=weight, user_id=1, type=phrase_type)
        )
    return InMemoryPhraseStore(phrases)


def create(item_id: str, word: str, code: str, phrase_type=PhraseType.PHRASE, **kwargs) -> BatchPRItem:
    return BatchPRItem(
        id=item_id, action=PRAction.CREATE, word=word, code=code, type=phrase_type, **kwargs
    )


def delete(item_id: str, word: str, code: str) -> BatchPRItem:
    return BatchPRItem(id=item_id, action=PRAction.DELETE, word=word, code=code)


def change(item_id: str, old_word: str | None, word: str, code: str) -> BatchPRItem:
    return BatchPRItem(
        id=item_id,
        action=PRAction.CHANGE,
        word=word,
        old_word=old_word,
        code=code,
        type=PhraseType.PHRASE,
    )


@pytest.fixture
def empty_store() -> InMemoryPhraseStore:
    return InMemoryPhraseStore()


@pytest.fixture
def rjgl_store() -> InMemoryPhraseStore:
    """如果 on rjgl with weight 100."""
    return make_store(("如果", "rjgl", 100))
