"""
牌组库异常定义
区分牌面解析异常(向上抛)和配置异常
"""


class CardDeckError(Exception):
    """牌组库基础异常类"""
    pass


class TokenParseError(CardDeckError, ValueError):
    """牌面字符串解析异常基类"""
    pass


class TokenFormatError(TokenParseError):
    """牌面字符串格式错误, 不符合 "{id}#{card}" 格式"""
    pass


class InvalidIdError(TokenParseError):
    """牌面字符串中的id不是非负十进制整数"""
    pass


class UnknownSuitError(TokenParseError):
    """未知花色异常(仅严格模式抛出)"""
    pass


class UnknownValueError(TokenParseError):
    """未知点数异常(仅严格模式抛出)"""
    pass


class DeckConfigError(CardDeckError, ValueError):
    """牌组配置错误异常"""
    pass


class SerializationError(CardDeckError, ValueError):
    """卡牌无法序列化为牌面字符串(如缺少花色)"""
    pass
