"""
漢数字フォーマッタ

整数を1万進のグループに分け、上位から「数字＋小単位＋大単位」を並べる。
"""
import logging
from enum import Enum
from typing import Dict, List

from ..config import DEFAULT_MINUS_SIGN, MAX_ABS_VALUE
from .errors import Overflow
from .lexicon import (
    DAIJI_DIGITS,
    DAIJI_LARGE_UNITS,
    DAIJI_SMALL_UNITS,
    STANDARD_DIGITS,
    STANDARD_LARGE_UNITS,
    STANDARD_SMALL_UNITS,
)

logger = logging.getLogger(__name__)


class FormatStyle(str, Enum):
    """出力表記"""
    KANJI = "kanji"            # 二百三十四, 一万二千
    DAIJI = "daiji"            # 弐百参拾四, 壱萬弐千
    MIXED = "mixed"            # 1万2345
    POSITIONAL = "positional"  # 二〇二六


def format_number(
    value: int,
    style: FormatStyle = FormatStyle.KANJI,
    minus_sign: str = DEFAULT_MINUS_SIGN,
) -> str:
    """
    整数を漢数字文字列に変換

    Args:
        value: 変換する整数
        style: 出力表記
        minus_sign: 負数の先頭に付ける記号

    Returns:
        漢数字文字列

    Raises:
        Overflow: 極を超える桁数の場合

    Examples:
        >>> format_number(234)
        '二百三十四'
        >>> format_number(12345, FormatStyle.MIXED)
        '1万2345'
    """
    style = FormatStyle(style)
    if abs(value) >= MAX_ABS_VALUE:
        raise Overflow(f"Value has too many digits to format ({len(str(abs(value)))})")

    prefix = minus_sign if value < 0 else ''
    body = _format_abs(abs(value), style)
    logger.debug(f"Formatted {value} ({style.value}) -> {prefix}{body}")
    return prefix + body


def _format_abs(n: int, style: FormatStyle) -> str:
    if style == FormatStyle.POSITIONAL:
        return ''.join(STANDARD_DIGITS[int(c)] for c in str(n))

    if n == 0:
        return '0' if style == FormatStyle.MIXED else STANDARD_DIGITS[0]

    if style == FormatStyle.DAIJI:
        large_units = DAIJI_LARGE_UNITS
    else:
        large_units = STANDARD_LARGE_UNITS

    parts: List[str] = []
    for rank, group in reversed(list(enumerate(split_groups(n)))):
        if group == 0:
            continue
        parts.append(_format_group(group, style))
        if rank > 0:
            parts.append(large_units[rank])
    return ''.join(parts)


def split_groups(n: int) -> List[int]:
    """
    非負整数を1万進のグループに分解（下位から）

    Examples:
        >>> split_groups(123456789)
        [6789, 2345, 1]
    """
    groups: List[int] = []
    while True:
        n, group = divmod(n, 10000)
        groups.append(group)
        if n == 0:
            return groups


def _format_group(group: int, style: FormatStyle) -> str:
    """1〜9999 を1グループ分の表記にする"""
    if style == FormatStyle.MIXED:
        return str(group)

    if style == FormatStyle.DAIJI:
        digits: str = DAIJI_DIGITS
        small_units: Dict[int, str] = DAIJI_SMALL_UNITS
        omit_one = False
    else:
        digits = STANDARD_DIGITS
        small_units = STANDARD_SMALL_UNITS
        omit_one = True

    result = ''
    for rank in (3, 2, 1):
        digit = group // 10 ** rank % 10
        if digit == 0:
            continue
        if not (digit == 1 and omit_one):
            result += digits[digit]
        result += small_units[rank]
    ones = group % 10
    if ones:
        result += digits[ones]
    return result
