"""Base class for read-only phrase store access."""

from abc import ABC, abstractmethod

from rimeguard.core.types import Phrase


class PhraseStore(ABC):
    """Read-only view of the persistent phrase dictionary.

    The conflict engine only ever reads through this interface. Lookups
    return phrases in ascending id order, so ``find_one`` is the oldest match.
    """

    @abstractmethod
    def find_one(
        self,
        word: str | None = None,
        code: str | None = None,
        exclude_id: int | None = None,
        exclude_code: str | None = None,
    ) -> Phrase | None:
        """
        Find the first phrase matching all given criteria.

        Args:
            word: Match this word exactly (None = any word)
            code: Match this code exactly (None = any code)
            exclude_id: Skip the phrase with this id
            exclude_code: Skip phrases with this code

        Returns:
            The matching phrase with the lowest id, or None
        """

    @abstractmethod
    def find_many(self, code: str | None = None) -> list[Phrase]:
        """Return all phrases with the given code (None = every phrase)."""

    @abstractmethod
    def count(self, code: str | None = None) -> int:
        """Count phrases with the given code (None = every phrase)."""

    def is_code_available(self, code: str) -> bool:
        """A code is available when no phrase uses it at all."""
        return self.count(code) == 0

    def get_name(self) -> str:
        """Return store name for display."""
        return self.__class__.__name__.replace("PhraseStore", "").lower()

    def close(self) -> None:
        """Release resources held by the store."""

    def __enter__(self) -> "PhraseStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
