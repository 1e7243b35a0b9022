"""User-facing impact and reason texts.

All strings shown in the web UI are built here so the wording of the detector
and of the batch passes stays consistent.
"""

from rimeguard.utils.constants import Constants


def position(index: int) -> int:
    """1-based batch position of a 0-based index."""
    return index + 1


def format_weight(weight: int | None) -> str:
    """Weight for display, or the not-calculated placeholder."""
    return str(weight) if weight is not None else Constants.WEIGHT_NOT_CALCULATED


# Change


def change_missing_old_word() -> tuple[str, str]:
    """(impact, reason) for a Change without an old word."""
    return "修改操作需要指定旧词", "请指定要修改的旧词"


def change_old_word_missing(code: str, old_word: str) -> tuple[str, str]:
    """(impact, reason) for a Change whose old phrase does not exist."""
    return (
        f'编码 "{code}" 下不存在词 "{old_word}"，无法修改',
        "旧词不存在，请检查编码和旧词是否正确",
    )


def change_target_exists(code: str, word: str) -> tuple[str, str]:
    """(impact, reason) for a Change whose new word already exists on the code."""
    return f'编码 "{code}" 下已存在词 "{word}"', "目标词已存在该编码下，会产生重复"


# Delete


def delete_missing(word: str, code: str) -> tuple[str, str]:
    """(impact, reason) for a Delete of a phrase that does not exist."""
    return (
        f'词条 "{word}" (编码: {code}) 不存在，无法删除',
        "该词条在字典中不存在，请检查词和编码是否正确",
    )


# Create


def exact_duplicate(word: str, code: str) -> tuple[str, str]:
    """(impact, reason) for a Create of an existing (word, code) pair."""
    return (
        f'词条 "{word}" 与编码 "{code}" 的组合已存在，不能重复添加',
        "该词条和编码的组合已在字典中存在",
    )


def duplicate_code(code: str, occupant: str, word: str, other_code: str | None = None) -> str:
    """Impact for a Create on an occupied code, optionally noting a multi-code word."""
    extra = f'；词条 "{word}" 已存在于编码 "{other_code}"' if other_code else ""
    return f'编码 "{code}" 已被词条 "{occupant}" 占用，将创建重码{extra}'


def multi_code_word(word: str, other_code: str) -> str:
    """Impact for a Create of a word that already has another code."""
    return f'词条 "{word}" 已存在于编码 "{other_code}"，将创建多编码词条'


def with_weight(impact: str, weight: int) -> str:
    """Append the calculated weight to an impact text."""
    return f"{impact}（建议权重: {weight}）"


def move_reason(word: str, alternative: str) -> str:
    return f'将 "{word}" 移动到次选编码 "{alternative}"'


def adjust_reason(alternative: str) -> str:
    return f'使用次选编码 "{alternative}" 替代'


def cancel_lower_priority_reason(existing_word: str) -> str:
    return f'现有词条 "{existing_word}" 权重更高，建议取消修改'


# Batch


def batch_duplicate(duplicate_index: int) -> tuple[str, str]:
    """(impact, reason) for a Create repeating an earlier Create of the batch."""
    return (
        f"批次内重复添加相同的词条（与第 {position(duplicate_index)} 个操作重复）",
        "批次内已存在相同的词条",
    )


def deleted_occupant_reason(word: str) -> str:
    return f'删除了占用词 "{word}"'


def renamed_occupant_reason(old_word: str, new_word: str) -> str:
    return f'将 "{old_word}" 修改为 "{new_word}"'


def resolved_in_batch(
    resolver_index: int,
    current_index: int,
    reason: str,
    weight: int | None,
) -> str:
    """Impact for a conflict removed by another batch item.

    An earlier resolver has "already" removed the conflict; a later one
    "will" remove it once its step runs.
    """
    step = f"批次内第 {position(resolver_index)} 个操作中"
    timing = f"已{step}" if resolver_index < current_index else f"将在{step}"
    return f"冲突{timing}解决（{reason}），建议权重: {format_weight(weight)}"


def renamed_occupant_duplicate(
    code: str,
    old_word: str,
    new_word: str,
    word: str,
    resolver_index: int,
    current_index: int,
    weight: int | None,
) -> tuple[str, str]:
    """(impact, reason) for a Create whose occupant is renamed by another item.

    The rename frees the old word but the code stays occupied by the new one,
    so the Create still produces a duplicate code.
    """
    step = f"批次内第 {position(resolver_index)} 个操作中"
    timing = f"已在{step}" if resolver_index < current_index else f"将在{step}"
    impact = (
        f'编码 "{code}" 的占用词 "{old_word}" {timing}改为 "{new_word}"，'
        f'创建 "{word}" 仍将与 "{new_word}" 形成重码（建议权重: {format_weight(weight)}）'
    )
    reason = f'"{old_word}" 改为 "{new_word}" 后，"{word}" 仍将与其形成重码'
    return impact, reason
