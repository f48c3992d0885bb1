"""牌组命令行工具.

提供发牌和描述牌面字符串两个子命令，输出为紧凑的牌面字符串，
方便在会话存储或消息通道中调试牌组数据。
"""

import logging
import sys

import click

from .card import get_card_description
from .config import DeckConfig, LoggingConfig, configure_logging
from .deck import Deck
from .exceptions import CardDeckError, TokenParseError
from .serializer import format_token, parse

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help="日志级别，默认读取 CARD_DECK_LOG_LEVEL")
def main(log_level):
    """标准52张扑克牌组工具."""
    try:
        config = LoggingConfig(log_level=log_level) if log_level else LoggingConfig.from_env()
    except CardDeckError as e:
        raise click.UsageError(str(e))
    configure_logging(config)


@main.command()
@click.argument("count", type=int)
@click.option("--seed", type=int, default=None, help="随机种子，用于可重现的洗牌")
@click.option("--no-shuffle", is_flag=True, help="保持目录顺序，不洗牌")
@click.option("--describe", is_flag=True, help="在每个牌面字符串后输出英文描述")
def deal(count, seed, no_shuffle, describe):
    """从新牌组前端发出COUNT张牌."""
    try:
        env_config = DeckConfig.from_env()
        config = DeckConfig(
            pre_shuffle=env_config.pre_shuffle and not no_shuffle,
            seed=seed if seed is not None else env_config.seed,
            strict_parse=env_config.strict_parse,
        )
    except CardDeckError as e:
        raise click.UsageError(str(e))

    deck = Deck.from_config(config)
    cards = deck.get_cards(count)
    if not cards:
        click.echo(f"错误: 无法发 {count} 张牌，牌组剩余 {len(deck)} 张", err=True)
        sys.exit(1)

    logger.info(f"[发牌] 命令行发出 {len(cards)} 张牌")
    for card in cards:
        line = format_token(card)
        if describe:
            line = f"{line}\t{get_card_description(card)}"
        click.echo(line)


@main.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="遇到未知花色或点数时报错")
def describe(tokens, strict):
    """解析牌面字符串并输出英文描述."""
    try:
        config = DeckConfig.from_env()
    except CardDeckError as e:
        raise click.UsageError(str(e))

    try:
        cards = parse(tokens, strict=strict or config.strict_parse)
    except TokenParseError as e:
        raise click.BadParameter(str(e), param_hint="TOKENS")

    for token, card in zip(tokens, cards):
        click.echo(f"{token}\t{get_card_description(card)}")


if __name__ == "__main__":
    main()
