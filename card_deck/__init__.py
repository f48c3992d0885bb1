#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
标准52张扑克牌组库
提供牌组的创建、洗牌、排序、发牌以及紧凑的牌面字符串序列化

模块结构：
- types: 目录数据（点数标签、花色、显示文本）
- card: 卡牌、浅层校验和文字描述
- deck: 牌组
- serializer: 牌面字符串 "{id}#{value}{suit}"
- config: 牌组配置和日志配置
- exceptions: 异常类型
"""

from .types import (
    Suit, SuitColor,
    RANK_LABELS, RANK_TEXT, SUITS, SUIT_TEXT, BLANK_CARD_UTF,
    get_rank_labels, get_rank_text, get_suits, get_suits_text,
    get_suit_colors, get_suit_utf, find_suit,
)
from .card import (
    Card, rank_of, validate,
    get_card_text, get_suit_text, get_card_description,
)
from .deck import Deck
from .serializer import format_token, parse_token, stringify, parse
from .config import (
    DeckConfig, LoggingConfig, configure_logging,
    get_default_config, set_default_config,
)
from .exceptions import (
    CardDeckError, TokenParseError, TokenFormatError, InvalidIdError,
    UnknownSuitError, UnknownValueError, DeckConfigError, SerializationError,
)

__version__ = "1.0.0"

__all__ = [
    # 目录数据
    'Suit', 'SuitColor',
    'RANK_LABELS', 'RANK_TEXT', 'SUITS', 'SUIT_TEXT', 'BLANK_CARD_UTF',
    'get_rank_labels', 'get_rank_text', 'get_suits', 'get_suits_text',
    'get_suit_colors', 'get_suit_utf', 'find_suit',

    # 卡牌和牌组
    'Card', 'rank_of', 'validate',
    'get_card_text', 'get_suit_text', 'get_card_description',
    'Deck',

    # 序列化
    'format_token', 'parse_token', 'stringify', 'parse',

    # 配置
    'DeckConfig', 'LoggingConfig', 'configure_logging',
    'get_default_config', 'set_default_config',

    # 异常类型
    'CardDeckError', 'TokenParseError', 'TokenFormatError', 'InvalidIdError',
    'UnknownSuitError', 'UnknownValueError', 'DeckConfigError', 'SerializationError',
]
