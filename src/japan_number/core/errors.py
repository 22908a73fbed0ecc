"""
数字変換エラー定義

すべてのエラーは NumeralError を基底とし、kind で種別を判別できる。
呼び出し側は NumeralError だけを捕捉すればよい。
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """エラー種別"""
    EMPTY_INPUT = "EmptyInput"
    UNKNOWN_CHARACTER = "UnknownCharacter"
    MALFORMED_GROUP = "MalformedGroup"
    REPEATED_UNIT = "RepeatedUnit"
    NON_MONOTONIC_UNIT = "NonMonotonicUnit"
    OVERFLOW = "Overflow"


class NumeralError(ValueError):
    """漢数字の解析・生成に失敗した"""

    kind: ErrorKind = ErrorKind.MALFORMED_GROUP

    def __init__(self, message: str, position: Optional[int] = None, text: Optional[str] = None):
        self.position = position
        self.text = text
        self.reason = message
        if position is not None:
            message = f"{message} (position {position})"
        if text is not None:
            message = f"{message}: {text!r}"
        super().__init__(message)


class EmptyInput(NumeralError):
    kind = ErrorKind.EMPTY_INPUT


class UnknownCharacter(NumeralError):
    kind = ErrorKind.UNKNOWN_CHARACTER


class MalformedGroup(NumeralError):
    kind = ErrorKind.MALFORMED_GROUP


class RepeatedUnit(NumeralError):
    kind = ErrorKind.REPEATED_UNIT


class NonMonotonicUnit(NumeralError):
    kind = ErrorKind.NON_MONOTONIC_UNIT


class Overflow(NumeralError):
    kind = ErrorKind.OVERFLOW
