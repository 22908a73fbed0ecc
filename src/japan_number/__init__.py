"""
japan_number: 日本語の数字表記（漢数字）の解析と生成
"""

from .core.errors import (
    EmptyInput,
    ErrorKind,
    MalformedGroup,
    NonMonotonicUnit,
    NumeralError,
    Overflow,
    RepeatedUnit,
    UnknownCharacter,
)
from .core.facade import format, parse, try_parse
from .core.formatter import FormatStyle
from .utils.text import find_numerals, normalize_numerals

__version__ = "0.1.0"

__all__ = [
    # facade
    'parse',
    'format',
    'try_parse',
    'FormatStyle',
    # errors
    'NumeralError',
    'ErrorKind',
    'EmptyInput',
    'UnknownCharacter',
    'MalformedGroup',
    'RepeatedUnit',
    'NonMonotonicUnit',
    'Overflow',
    # text
    'find_numerals',
    'normalize_numerals',
]
