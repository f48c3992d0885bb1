"""
牌组配置相关类的实现
包含牌组行为配置、日志配置以及从环境变量加载配置
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import DeckConfigError

ENV_PREFIX = "CARD_DECK_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise DeckConfigError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class DeckConfig:
    """
    牌组配置类
    """
    pre_shuffle: bool = True           # 创建牌组时是否洗牌
    seed: Optional[int] = None         # 随机种子，用于可重现的洗牌
    strict_parse: bool = False         # 解析未知花色/点数时是否抛出异常

    def __post_init__(self):
        """验证配置的有效性"""
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, int):
                raise DeckConfigError(f"seed must be an integer, got {self.seed!r}")
            if self.seed < 0:
                raise DeckConfigError(f"seed must be non-negative, got {self.seed}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DeckConfig':
        """
        从环境变量创建配置

        读取 CARD_DECK_PRE_SHUFFLE、CARD_DECK_SEED、CARD_DECK_STRICT_PARSE，
        未设置的项使用默认值

        Args:
            environ: 环境变量映射，默认为os.environ

        Raises:
            DeckConfigError: 环境变量取值无法解析时
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        raw = env.get(f"{ENV_PREFIX}PRE_SHUFFLE")
        if raw is not None:
            kwargs["pre_shuffle"] = _parse_bool(f"{ENV_PREFIX}PRE_SHUFFLE", raw)

        raw = env.get(f"{ENV_PREFIX}SEED")
        if raw is not None and raw.strip():
            try:
                kwargs["seed"] = int(raw)
            except ValueError:
                raise DeckConfigError(f"{ENV_PREFIX}SEED must be an integer, got {raw!r}") from None

        raw = env.get(f"{ENV_PREFIX}STRICT_PARSE")
        if raw is not None:
            kwargs["strict_parse"] = _parse_bool(f"{ENV_PREFIX}STRICT_PARSE", raw)

        return cls(**kwargs)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self):
        if not isinstance(self.log_level, str):
            raise DeckConfigError(f"log level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise DeckConfigError(f"unknown log level: {self.log_level}")

    @property
    def level(self) -> int:
        """返回logging模块使用的数值级别"""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'LoggingConfig':
        """从 CARD_DECK_LOG_LEVEL 环境变量创建日志配置"""
        env = os.environ if environ is None else environ
        return cls(log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO"))


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    配置根日志记录器

    库本身不会在导入时配置日志，由命令行或调用方程序启动时调用一次
    """
    config = config or LoggingConfig()
    logging.basicConfig(level=config.level, format=config.log_format)


_default_config = DeckConfig()


def get_default_config() -> DeckConfig:
    """获取进程级默认牌组配置"""
    return _default_config


def set_default_config(config: DeckConfig) -> None:
    """替换进程级默认牌组配置"""
    global _default_config
    if not isinstance(config, DeckConfig):
        raise DeckConfigError(f"expected DeckConfig, got {type(config).__name__}")
    _default_config = config
