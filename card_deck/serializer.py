"""
牌面字符串序列化器

实现卡牌与紧凑字符串 "{id}#{value}{suit}" 之间的相互转换，如 "23#AS".
点数"10"的牌面部分长度为3，其余为2，花色字母总是牌面部分的最后一个字符.
"""

import logging
from typing import Iterable, List, Optional

from .card import Card, rank_of
from .config import get_default_config
from .exceptions import (
    InvalidIdError, SerializationError, TokenFormatError, UnknownSuitError, UnknownValueError
)
from .types import find_suit

__all__ = ['TOKEN_SEPARATOR', 'format_token', 'parse_token', 'stringify', 'parse']

TOKEN_SEPARATOR = "#"

logger = logging.getLogger(__name__)


def format_token(card: Card) -> str:
    """
    将单张卡牌格式化为字符串

    Args:
        card: 卡牌

    Returns:
        str: 格式为 "{id}#{value}{suit}" 的字符串

    Raises:
        SerializationError: 卡牌缺少花色时，此时生成的字符串无法被正确解析
    """
    if card.suit is None:
        raise SerializationError(f"card {card.id} has no suit and cannot be formatted as a token")
    return f"{card.id}{TOKEN_SEPARATOR}{card.value}{card.suit.value}"


def _parse_id(id_part: str, token: str) -> int:
    if not (id_part.isascii() and id_part.isdigit()):
        raise InvalidIdError(f"invalid card id {id_part!r} in token {token!r}")
    return int(id_part)


def parse_token(token: str, strict: Optional[bool] = None) -> Card:
    """
    解析单个牌面字符串

    Args:
        token: 牌面字符串，如 "23#AS"、"4#10D"
        strict: 是否严格模式，None时使用默认配置中的strict_parse

    Returns:
        Card: 解析出的卡牌。宽松模式下未知花色为None，未知点数的rank为0

    Raises:
        TokenFormatError: 字符串不符合 "{id}#{card}" 格式或含有多个分隔符时
        InvalidIdError: id不是非负十进制整数时
        UnknownSuitError: 严格模式下花色未知时
        UnknownValueError: 严格模式下点数未知时
    """
    if strict is None:
        strict = get_default_config().strict_parse

    if not isinstance(token, str):
        raise TokenFormatError(f"token must be a string, got {type(token).__name__}")

    if token.count(TOKEN_SEPARATOR) != 1:
        raise TokenFormatError(f"card token must contain exactly one {TOKEN_SEPARATOR!r}: {token!r}")

    id_part, _, card_part = token.partition(TOKEN_SEPARATOR)
    if len(card_part) < 2:
        raise TokenFormatError(f"malformed card token: {token!r}")

    card_id = _parse_id(id_part, token)
    value, suit_value = card_part[:-1], card_part[-1]

    rank = rank_of(value)
    if rank == 0:
        if strict:
            raise UnknownValueError(f"unknown card value {value!r} in token {token!r}")
        logger.warning(f"[解析] 未知点数 {value!r}，rank置为0: {token}")

    suit = find_suit(suit_value)
    if suit is None:
        if strict:
            raise UnknownSuitError(f"unknown suit {suit_value!r} in token {token!r}")
        logger.warning(f"[解析] 未知花色 {suit_value!r}，花色置为None: {token}")

    return Card(id=card_id, value=value, rank=rank, suit=suit)


def stringify(cards: Iterable[Card]) -> List[str]:
    """
    将卡牌序列转换为字符串列表

    Examples:
        >>> stringify(deck.get_cards(2))
        ['23#AS', '4#3D']
    """
    return [format_token(card) for card in cards]


def parse(tokens: Iterable[str], strict: Optional[bool] = None) -> List[Card]:
    """
    将字符串列表解析为卡牌列表

    Args:
        tokens: 牌面字符串序列
        strict: 是否严格模式，None时使用默认配置

    Returns:
        List[Card]: 解析出的卡牌，顺序与输入一致
    """
    return [parse_token(token, strict=strict) for token in tokens]
