"""Code format validation and alternative code generation."""

import re

from rimeguard.utils.constants import Constants

_CODE_RE = re.compile(Constants.CODE_PATTERN)


def get_code_validation_error(code: str) -> str | None:
    """Describe what is wrong with a code, or return None if it is valid.

    Valid codes are letters with an optional leading semicolon (``abc``,
    ``;abc``) or one or two bare semicolons, at most MAX_CODE_LENGTH long.
    """
    if not code:
        return "编码不能为空"
    if len(code) > Constants.MAX_CODE_LENGTH:
        return f"编码长度超过{Constants.MAX_CODE_LENGTH}个字符"
    if not _CODE_RE.fullmatch(code):
        return "编码格式错误"
    return None


def is_valid_code(code: str) -> bool:
    """Check code format and length."""
    return get_code_validation_error(code) is None


def generate_alternative_codes(code: str) -> list[str]:
    """Generate candidate codes near the given one, in preference order.

    Appends each common suffix, then a repeat of the last character:
    ``rjgl`` -> ``rjgla, rjgli, rjglo, rjglu, rjglv, rjgll``.
    """
    alternatives = [code + suffix for suffix in Constants.ALTERNATIVE_CODE_SUFFIXES]
    if code:
        alternatives.append(code + code[-1])
    return alternatives
