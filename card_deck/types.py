"""
扑克牌目录数据定义.

定义花色记录、点数标签以及显示文本等只读目录数据.
所有访问函数都返回新的副本，调用方无法修改共享的目录状态.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Optional


class SuitColor(Enum):
    """花色颜色枚举"""
    BLACK = "black"
    RED = "red"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Suit:
    """
    花色记录.

    不可变数据类，卡牌持有花色时不会受到目录变化的影响.

    Attributes:
        value: 花色字母 S/H/D/C
        color: 花色颜色 black/red
        utf: 花色符号
    """

    value: str
    color: str
    utf: str

    def __str__(self) -> str:
        return self.value


# 点数标签，索引+1即为rank
RANK_LABELS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")

RANK_TEXT = MappingProxyType({
    "2": "Two",
    "3": "Three",
    "4": "Four",
    "5": "Five",
    "6": "Six",
    "7": "Seven",
    "8": "Eight",
    "9": "Nine",
    "10": "Ten",
    "J": "Jack",
    "Q": "Queen",
    "K": "King",
    "A": "Ace",
})

# 固定顺序: 黑桃、红桃、方块、梅花
SUITS = (
    Suit(value="S", color=SuitColor.BLACK.value, utf="♠"),
    Suit(value="H", color=SuitColor.RED.value, utf="♥"),
    Suit(value="D", color=SuitColor.RED.value, utf="♦"),
    Suit(value="C", color=SuitColor.BLACK.value, utf="♣"),
)

SUIT_TEXT = MappingProxyType({
    "S": "Spades",
    "H": "Hearts",
    "D": "Diamonds",
    "C": "Clubs",
})

BLANK_CARD_UTF = "★"


def get_rank_labels() -> List[str]:
    """
    获取所有点数标签.

    Returns:
        List[str]: 从"2"到"A"的13个点数标签
    """
    return list(RANK_LABELS)


def get_rank_text() -> Dict[str, str]:
    """
    获取点数标签到英文单词的映射.

    Returns:
        Dict[str, str]: 例如 {"2": "Two", "J": "Jack"}
    """
    return dict(RANK_TEXT)


def get_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按 S, H, D, C 顺序排列的花色列表
    """
    return list(SUITS)


def get_suits_text() -> Dict[str, str]:
    """获取花色字母到英文单词的映射"""
    return dict(SUIT_TEXT)


def get_suit_colors() -> List[SuitColor]:
    """获取按目录顺序排列的花色颜色"""
    return [SuitColor(suit.color) for suit in SUITS]


def get_suit_utf() -> List[str]:
    """获取按目录顺序排列的花色符号"""
    return [suit.utf for suit in SUITS]


def find_suit(value: str) -> Optional[Suit]:
    """
    根据花色字母查找花色.

    Args:
        value: 花色字母，如"S"

    Returns:
        Optional[Suit]: 对应的花色，找不到时返回None
    """
    for suit in SUITS:
        if suit.value == value:
            return suit
    return None
