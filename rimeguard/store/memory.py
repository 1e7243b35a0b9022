"""In-memory phrase store."""

from collections import defaultdict
from collections.abc import Iterable

from rimeguard.core.types import Phrase
from rimeguard.store.base import PhraseStore


class InMemoryPhraseStore(PhraseStore):
    """Phrase store backed by a list loaded once at construction.

    Raises:
        ValueError: If two phrases share an id or a (word, code) pair
    """

    def __init__(self, phrases: Iterable[Phrase] = ()):
        self._phrases = sorted(phrases, key=lambda phrase: phrase.id)
        self._by_code: dict[str, list[Phrase]] = defaultdict(list)

        seen_ids: set[int] = set()
        seen_pairs: set[tuple[str, str]] = set()
        for phrase in self._phrases:
            pair = (phrase.word, phrase.code)
            if phrase.id in seen_ids:
                raise ValueError(f"Duplicate phrase id {phrase.id}")
            if pair in seen_pairs:
                raise ValueError(f"Duplicate phrase '{phrase.word}' for code '{phrase.code}'")
            seen_ids.add(phrase.id)
            seen_pairs.add(pair)
            self._by_code[phrase.code].append(phrase)

    def __len__(self) -> int:
        return len(self._phrases)

    def _candidates(self, code: str | None) -> list[Phrase]:
        if code is None:
            return self._phrases
        return self._by_code.get(code, [])

    def find_one(
        self,
        word: str | None = None,
        code: str | None = None,
        exclude_id: int | None = None,
        exclude_code: str | None = None,
    ) -> Phrase | None:
        for phrase in self._candidates(code):
            if word is not None and phrase.word != word:
                continue
            if exclude_id is not None and phrase.id == exclude_id:
                continue
            if exclude_code is not None and phrase.code == exclude_code:
                continue
            return phrase
        return None

    def find_many(self, code: str | None = None) -> list[Phrase]:
        return list(self._candidates(code))

    def count(self, code: str | None = None) -> int:
        return len(self._candidates(code))
