"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture
- 默认配置隔离
- 测试标记注册

所有测试都会自动加载这些配置。
"""

import random

import pytest

from card_deck import (
    Card, Deck, DeckConfig, find_suit, get_default_config, rank_of, set_default_config
)


@pytest.fixture
def rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def ordered_deck():
    """未洗牌、保持目录顺序的牌组fixture"""
    return Deck(pre_shuffle=False)


@pytest.fixture
def seeded_deck(rng):
    """使用固定种子洗牌的牌组fixture"""
    return Deck(rng=rng)


@pytest.fixture
def make_card():
    """按点数和花色字母构造卡牌的工厂fixture"""
    def _make(card_id: int, value: str, suit_value: str) -> Card:
        return Card(id=card_id, value=value, rank=rank_of(value), suit=find_suit(suit_value))
    return _make


@pytest.fixture
def restore_default_config():
    """测试结束后恢复进程级默认配置"""
    original = get_default_config()
    yield
    set_default_config(original)


@pytest.fixture
def strict_config(restore_default_config):
    """将默认配置切换为严格解析"""
    set_default_config(DeckConfig(strict_parse=True))
    return get_default_config()


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
