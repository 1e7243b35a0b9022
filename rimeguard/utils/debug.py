"""Debug tracing for selected codes.

Codes named in ``Config.debug_codes`` get a ``[DEBUG CODE: 'x']`` line at every
stage that touches them, so a single code can be followed through duplicate
checking, conflict detection, weight replay and batch resolution.
"""

from collections.abc import Collection

from loguru import logger


def is_debug_code(code: str, debug_codes: Collection[str] | None) -> bool:
    """Check if a code is being traced."""
    return bool(debug_codes) and code in debug_codes


def log_debug_code(code: str, message: str, stage: str = "") -> None:
    """Log a debug message for a traced code.

    Args:
        code: The code being traced
        message: The message to log
        stage: Optional stage label, e.g. "Pass 1"
    """
    stage_label = f"[{stage}] " if stage else ""
    logger.debug(f"[DEBUG CODE: '{code}'] {stage_label}{message}")


def log_if_debug_code(
    code: str,
    message: str,
    debug_codes: Collection[str] | None,
    stage: str = "",
) -> None:
    """Log a debug message only if the code is being traced."""
    if is_debug_code(code, debug_codes):
        log_debug_code(code, message, stage)
