"""Loading phrase stores and batch files from disk."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from rimeguard.core.codes import get_code_validation_error
from rimeguard.core.errors import InputError
from rimeguard.core.types import BatchPRItem, Phrase
from rimeguard.store.base import PhraseStore
from rimeguard.store.memory import InMemoryPhraseStore
from rimeguard.store.sqlite import SqlitePhraseStore
from rimeguard.utils.constants import Constants
from rimeguard.utils.helpers import expand_file_path, read_json_file, unwrap_list


def _read_entries(path: str, key: str) -> list:
    try:
        return unwrap_list(read_json_file(path), key)
    except json.JSONDecodeError as e:
        raise InputError(path, [f"not valid JSON ({e})"]) from e
    except ValueError as e:
        raise InputError(path, [str(e)]) from e


def _format_validation_error(index: int, error: ValidationError) -> str:
    fields = ", ".join(
        ".".join(str(part) for part in detail["loc"]) or "entry" for detail in error.errors()
    )
    return f"entry #{index + 1}: invalid {fields}"


def load_phrases_json(path: str) -> InMemoryPhraseStore:
    """Load a JSON phrase dump into an in-memory store.

    The file holds a list of phrase objects, or ``{"phrases": [...]}``.

    Raises:
        InputError: If the file is malformed or breaks (word, code) uniqueness
    """
    entries = _read_entries(path, "phrases")

    phrases = []
    problems = []
    for index, entry in enumerate(entries):
        try:
            phrases.append(Phrase.model_validate(entry))
        except ValidationError as e:
            problems.append(_format_validation_error(index, e))
    if problems:
        raise InputError(path, problems)

    try:
        store = InMemoryPhraseStore(phrases)
    except ValueError as e:
        raise InputError(path, [str(e)]) from e

    logger.debug(f"Loaded {len(store)} phrases from {path}")
    return store


def open_store(path: str) -> PhraseStore:
    """Open a phrase store, choosing the backend from the file suffix.

    Raises:
        InputError: If the suffix is not recognised
    """
    expanded = Path(expand_file_path(path))
    suffix = expanded.suffix.lower()

    if suffix in Constants.JSON_STORE_SUFFIXES:
        return load_phrases_json(str(expanded))
    if suffix in Constants.SQLITE_STORE_SUFFIXES:
        logger.debug(f"Opening SQLite phrase store {expanded}")
        return SqlitePhraseStore(expanded)

    known = ", ".join(Constants.JSON_STORE_SUFFIXES + Constants.SQLITE_STORE_SUFFIXES)
    raise InputError(path, [f"unknown store format '{suffix}' (expected one of {known})"])


def load_batch_items(path: str) -> list[BatchPRItem]:
    """Load and validate a batch file.

    The file holds a list of items, or ``{"items": [...]}``, with camelCase or
    snake_case keys. Every code must pass the code format check and item ids
    must be unique, since results are correlated by id.

    Raises:
        InputError: Listing every problem found
    """
    entries = _read_entries(path, "items")

    items = []
    problems = []
    for index, entry in enumerate(entries):
        try:
            item = BatchPRItem.model_validate(entry)
        except ValidationError as e:
            problems.append(_format_validation_error(index, e))
            continue

        code_error = get_code_validation_error(item.code)
        if code_error:
            problems.append(f"entry #{index + 1}: code '{item.code}': {code_error}")
        items.append(item)

    seen_ids: set[str] = set()
    for item in items:
        if item.id in seen_ids:
            problems.append(f"duplicate item id '{item.id}'")
        seen_ids.add(item.id)

    if problems:
        raise InputError(path, problems)
    if not items:
        raise InputError(path, ["batch is empty"])

    logger.debug(f"Loaded {len(items)} batch items from {path}")
    return items
