"""
扑克牌组管理.

定义Deck类，提供标准52张牌的管理功能，包括洗牌、排序、发牌等操作.
发牌从牌组前端取牌，牌组长度只减不增.
"""

import logging
import random
from collections import deque
from typing import Deque, List, Optional, Sequence

from . import card as card_utils
from . import serializer
from . import types
from .card import Card
from .config import DeckConfig

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副扑克牌.

    包含52张标准扑克牌，支持洗牌、排序、发牌等操作.
    使用可选的随机数生成器以支持确定性测试.
    同一个牌组只允许单一持有者在单线程中使用，内部不加锁.

    Attributes:
        _cards: 当前牌组中剩余的牌，前端为顶部
        _rng: 随机数生成器
        _next_id: 下一张牌的编号

    Examples:
        >>> deck = Deck()
        >>> cards = deck.get_cards(2)
        >>> len(deck)
        50
    """

    # 目录数据，保留在类上方便只持有Deck的调用方
    CARDS = types.RANK_LABELS
    CARDS_TEXT = types.RANK_TEXT
    SUITS = types.SUITS
    SUITS_TEXT = types.SUIT_TEXT
    BLANK_CARD_UTF = types.BLANK_CARD_UTF

    stringify = staticmethod(serializer.stringify)
    parse = staticmethod(serializer.parse)
    validate = staticmethod(card_utils.validate)
    get_card_text = staticmethod(card_utils.get_card_text)
    get_suit_text = staticmethod(card_utils.get_suit_text)
    get_card_description = staticmethod(card_utils.get_card_description)

    def __init__(self, pre_shuffle: bool = True, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            pre_shuffle: 是否在创建后立即洗牌，False时保持目录顺序
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
        """
        self._rng = rng or random.Random()
        self._next_id = 0
        self._cards: Deque[Card] = deque()
        self._fill()

        if pre_shuffle:
            self.shuffle()

    @classmethod
    def from_config(cls, config: DeckConfig) -> 'Deck':
        """
        根据配置创建牌组.

        Args:
            config: 牌组配置，seed不为None时使用固定种子

        Returns:
            Deck: 新牌组
        """
        rng = random.Random(config.seed) if config.seed is not None else None
        return cls(pre_shuffle=config.pre_shuffle, rng=rng)

    def _fill(self) -> None:
        """按花色(外层)和点数(内层)的目录顺序填充52张牌."""
        for suit in types.SUITS:
            for index, value in enumerate(types.RANK_LABELS):
                self._cards.append(Card(
                    id=self._next_id,
                    value=value,
                    rank=index + 1,
                    suit=suit,
                ))
                self._next_id += 1
        logger.debug(f"[建牌] 已生成 {len(self._cards)} 张牌")

    def shuffle(self) -> None:
        """
        洗牌.

        使用Fisher-Yates洗牌算法随机打乱剩余牌的顺序，牌数不变.
        """
        cards = list(self._cards)
        self._rng.shuffle(cards)
        self._cards = deque(cards)
        logger.debug(f"[洗牌] 已打乱 {len(self._cards)} 张牌")

    def sort(self, cards: Sequence[Card]) -> List[Card]:
        """
        按rank从大到小排序.

        使用稳定排序，rank相同的牌保持原有相对顺序.
        传入list时原地排序并返回该list，其他序列会复制为新list.

        Args:
            cards: 任意卡牌序列，不一定是本牌组的牌

        Returns:
            List[Card]: 排序后的卡牌
        """
        if not isinstance(cards, list):
            cards = list(cards)
        cards.sort(key=lambda c: c.rank, reverse=True)
        return cards

    def get_cards(self, amount: int) -> List[Card]:
        """
        从牌组前端取出指定数量的牌.

        只有当 amount >= 1 且取牌后剩余的牌严格多于取出的牌时才会发牌，
        否则不修改牌组并返回空列表.

        Args:
            amount: 要发的牌数

        Returns:
            List[Card]: 按牌组顺序发出的牌，条件不满足时为空列表
        """
        remaining = len(self._cards)
        if not (amount >= 1 and amount < remaining - amount):
            logger.debug(f"[发牌] 拒绝发牌: 请求 {amount} 张，剩余 {remaining} 张")
            return []

        removed_cards = [self._cards.popleft() for _ in range(amount)]
        logger.debug(f"[发牌] 发出 {amount} 张，剩余 {len(self._cards)} 张")
        return removed_cards

    @property
    def cards(self) -> List[Card]:
        """返回剩余牌的副本，前端在前."""
        return list(self._cards)

    @property
    def cards_remaining(self) -> int:
        """
        获取剩余牌数.

        Returns:
            int: 牌组中剩余的牌数
        """
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空."""
        return len(self._cards) == 0

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.

        Returns:
            Optional[Card]: 下一张会被发出的牌，如果牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[0]

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
