"""SQLite phrase store.

The engine opens the database read-only. ``create_phrase_database`` exists to
build fixture databases and exports with the same schema.
"""

import sqlite3
from collections.abc import Iterable
from pathlib import Path

from rimeguard.core.phrase_types import PhraseType, is_valid_phrase_type
from rimeguard.core.types import Phrase
from rimeguard.store.base import PhraseStore

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS phrase (
    id INTEGER PRIMARY KEY,
    word TEXT NOT NULL,
    code TEXT NOT NULL,
    weight INTEGER NOT NULL DEFAULT 0,
    user_id INTEGER,
    type TEXT,
    UNIQUE(word, code)
);

CREATE INDEX IF NOT EXISTS idx_phrase_code ON phrase(code);
"""

_COLUMNS = "id, word, code, weight, user_id, type"


def _row_to_phrase(row: sqlite3.Row) -> Phrase:
    type_value = row["type"]
    return Phrase(
        id=row["id"],
        word=row["word"],
        code=row["code"],
        weight=row["weight"],
        user_id=row["user_id"],
        type=PhraseType(type_value) if type_value and is_valid_phrase_type(type_value) else None,
    )


def create_phrase_database(db_path: str | Path, phrases: Iterable[Phrase]) -> None:
    """Create (or extend) a phrase database and insert the given phrases.

    Raises:
        sqlite3.IntegrityError: If a (word, code) pair or id already exists
    """
    conn = sqlite3.connect(str(db_path))
    try:
        conn.executescript(SCHEMA_SQL)
        with conn:
            conn.executemany(
                f"INSERT INTO phrase ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                [
                    (
                        phrase.id,
                        phrase.word,
                        phrase.code,
                        phrase.weight,
                        phrase.user_id,
                        phrase.type.value if phrase.type else None,
                    )
                    for phrase in phrases
                ],
            )
    finally:
        conn.close()


class SqlitePhraseStore(PhraseStore):
    """Read-only phrase store over a SQLite database file.

    The connection is closed when the store is used as a context manager.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self._conn = sqlite3.connect(f"{self.db_path.resolve().as_uri()}?mode=ro", uri=True)
        self._conn.row_factory = sqlite3.Row

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def find_one(
        self,
        word: str | None = None,
        code: str | None = None,
        exclude_id: int | None = None,
        exclude_code: str | None = None,
    ) -> Phrase | None:
        clauses = []
        params: list[object] = []
        if word is not None:
            clauses.append("word = ?")
            params.append(word)
        if code is not None:
            clauses.append("code = ?")
            params.append(code)
        if exclude_id is not None:
            clauses.append("id != ?")
            params.append(exclude_id)
        if exclude_code is not None:
            clauses.append("code != ?")
            params.append(exclude_code)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        row = self._conn.execute(
            f"SELECT {_COLUMNS} FROM phrase {where} ORDER BY id LIMIT 1", params
        ).fetchone()
        return _row_to_phrase(row) if row else None

    def find_many(self, code: str | None = None) -> list[Phrase]:
        if code is None:
            cursor = self._conn.execute(f"SELECT {_COLUMNS} FROM phrase ORDER BY id")
        else:
            cursor = self._conn.execute(
                f"SELECT {_COLUMNS} FROM phrase WHERE code = ? ORDER BY id", (code,)
            )
        return [_row_to_phrase(row) for row in cursor]

    def count(self, code: str | None = None) -> int:
        if code is None:
            row = self._conn.execute("SELECT COUNT(*) FROM phrase").fetchone()
        else:
            row = self._conn.execute("SELECT COUNT(*) FROM phrase WHERE code = ?", (code,)).fetchone()
        return row[0]
