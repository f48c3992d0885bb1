"""
扑克牌数据结构.

定义不可变的Card类，以及浅层的卡牌校验和文字描述函数.
校验只检查字段是否存在，不检查字段取值是否合法.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .types import RANK_LABELS, RANK_TEXT, SUIT_TEXT, Suit

CARD_FIELDS = ("id", "value", "rank", "suit")

# 校验函数同时接受Card对象和字典形式的(可能不完整的)卡牌
CardLike = Union["Card", Mapping[str, Any]]


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    Attributes:
        id: 牌组内唯一的编号，按填充顺序从0开始分配
        value: 点数标签，如"10"、"A"
        rank: 点数大小，1("2")到13("A")
        suit: 花色，宽松解析遇到未知花色时为None

    Examples:
        >>> card = Card(23, "A", 13, Suit("S", "black", "♠"))
        >>> str(card)
        'AS'
    """

    id: int
    value: str
    rank: int
    suit: Optional[Suit]

    def __str__(self) -> str:
        suit_value = self.suit.value if self.suit is not None else "?"
        return f"{self.value}{suit_value}"


def rank_of(value: str) -> int:
    """
    根据点数标签计算rank.

    Args:
        value: 点数标签

    Returns:
        int: 标签在目录中的位置+1，未知标签返回0
    """
    try:
        return RANK_LABELS.index(value) + 1
    except ValueError:
        return 0


def _get_field(card: Any, name: str) -> Any:
    if isinstance(card, Mapping):
        return card.get(name)
    return getattr(card, name, None)


def _has_field(card: Any, name: str) -> bool:
    if isinstance(card, Mapping):
        return name in card
    return hasattr(card, name)


def validate(card: CardLike) -> bool:
    """
    检查对象是否具备卡牌的四个字段.

    只做字段存在性检查，字段值为None也视为存在，不验证点数、rank或花色是否真实有效.

    Args:
        card: Card对象或字典

    Returns:
        bool: id、value、rank、suit全部存在时返回True
    """
    if card is None:
        return False
    return all(_has_field(card, name) for name in CARD_FIELDS)


def get_card_text(card: CardLike) -> str:
    """返回点数的英文单词，卡牌无效或点数未知时返回空字符串"""
    if not validate(card):
        return ""
    value = _get_field(card, "value")
    if not isinstance(value, str):
        return ""
    return RANK_TEXT.get(value, "")


def get_suit_text(card: CardLike) -> str:
    """返回花色的英文单词，卡牌无效、缺少花色或花色未知时返回空字符串"""
    if not validate(card):
        return ""
    suit_value = _get_field(_get_field(card, "suit"), "value")
    if not isinstance(suit_value, str):
        return ""
    return SUIT_TEXT.get(suit_value, "")


def get_card_description(card: CardLike) -> str:
    """
    返回卡牌的完整描述.

    Args:
        card: Card对象或字典

    Returns:
        str: 如"King of Hearts"，卡牌无效时返回空字符串
    """
    if not validate(card):
        return ""

    card_text = get_card_text(card)
    suit_text = get_suit_text(card)
    return f"{card_text} of {suit_text}"
