"""Constants used throughout the RimeGuard codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Code format
    MAX_CODE_LENGTH = 6
    """Maximum length of a phrase code."""

    CODE_PATTERN = r"^;{1,2}$|^;?[a-zA-Z]+$"
    """Letters with an optional leading semicolon, or one/two bare semicolons."""

    # Alternative code generation
    ALTERNATIVE_CODE_SUFFIXES = ("a", "i", "o", "u", "v")
    """Suffixes tried, in order, when looking for a free alternative code."""

    # Weights
    FALLBACK_DEFAULT_WEIGHT = 100
    """Default weight for a phrase type missing from the weight table."""

    # Store files
    JSON_STORE_SUFFIXES = (".json",)
    """File suffixes loaded as JSON phrase dumps."""

    SQLITE_STORE_SUFFIXES = (".db", ".sqlite", ".sqlite3")
    """File suffixes opened as SQLite phrase databases."""

    # Report text
    WEIGHT_NOT_CALCULATED = "未计算"
    """Placeholder shown when no weight was calculated for an item."""
