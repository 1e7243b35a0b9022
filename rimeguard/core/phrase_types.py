"""Phrase types of the KeyTao Rime dictionary and their default weights."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from rimeguard.utils.constants import Constants


class PhraseType(Enum):
    """Kind of dictionary entry. Each type lives in its own Rime dictionary file."""

    SINGLE = "Single"  # 单字
    PHRASE = "Phrase"  # 词组
    SUPPLEMENT = "Supplement"  # 补充
    SYMBOL = "Symbol"  # 符号
    LINK = "Link"  # 链接
    CSS = "CSS"  # 声笔笔两字词
    CSS_SINGLE = "CSSSingle"  # 声笔笔单字
    ENGLISH = "English"  # 英文


@dataclass(frozen=True)
class PhraseTypeConfig:
    """Display and weighting information for one phrase type."""

    label: str
    default_weight: int
    description: str
    rime_file_name: str


PHRASE_TYPE_CONFIGS: dict[PhraseType, PhraseTypeConfig] = {
    PhraseType.SINGLE: PhraseTypeConfig("单字", 10, "单个汉字（包括常用字和超级字词）", "single"),
    PhraseType.PHRASE: PhraseTypeConfig("词组", 100, "常用词组", "phrase"),
    PhraseType.SUPPLEMENT: PhraseTypeConfig("补充", 100, "补充词条", "supplement"),
    PhraseType.SYMBOL: PhraseTypeConfig("符号", 10, "特殊符号", "symbol"),
    PhraseType.LINK: PhraseTypeConfig("链接", 10000, "网址链接", "link"),
    PhraseType.CSS: PhraseTypeConfig("声笔笔", 100, "声笔笔两字词", "css"),
    PhraseType.CSS_SINGLE: PhraseTypeConfig("声笔笔单字", 10, "声笔笔单字编码", "css-single"),
    PhraseType.ENGLISH: PhraseTypeConfig("英文", 100, "英文单词和短语", "english"),
}


def get_default_weight(
    phrase_type: PhraseType,
    overrides: Mapping[str, int] | None = None,
) -> int:
    """Get the base weight for a phrase type.

    Args:
        phrase_type: The phrase type
        overrides: Optional mapping of type value (e.g. "Phrase") to weight,
            taking precedence over the built-in table

    Returns:
        The default weight, or the fallback weight for an unknown type
    """
    if overrides and phrase_type.value in overrides:
        return overrides[phrase_type.value]
    type_config = PHRASE_TYPE_CONFIGS.get(phrase_type)
    if type_config is None:
        return Constants.FALLBACK_DEFAULT_WEIGHT
    return type_config.default_weight


def get_phrase_type_label(phrase_type: PhraseType) -> str:
    """Get the display label for a phrase type."""
    type_config = PHRASE_TYPE_CONFIGS.get(phrase_type)
    return type_config.label if type_config else phrase_type.value


def is_valid_phrase_type(value: str) -> bool:
    """Check whether a string names a known phrase type."""
    return value in {phrase_type.value for phrase_type in PhraseType}
