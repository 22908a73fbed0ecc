"""
公開エントリポイント

外部（CLI やホスト側のバインディング）が呼ぶのは parse / format だけ。
入力検証を行ってから Parser / Formatter に委譲する。
"""
import logging
from typing import Optional, Union

from ..config import DEFAULT_MINUS_SIGN
from .errors import EmptyInput, NumeralError
from .formatter import FormatStyle, format_number
from .parser import parse_numeral

logger = logging.getLogger(__name__)


def parse(text: str) -> int:
    """
    日本語の数字表記を整数に変換

    Args:
        text: 漢数字・算用数字・大字の混在した数字文字列（前後の空白は無視）

    Returns:
        整数値

    Raises:
        NumeralError: 解析できない場合。kind / position で原因を確認できる
        TypeError: text が文字列でない場合

    Examples:
        >>> parse('一万二千三百四十五')
        12345
        >>> parse('十')
        10
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise EmptyInput("Empty numeral text")

    # エラー位置は呼び出し側の文字列（空白込み）を基準にする
    offset = len(text) - len(text.lstrip())
    try:
        return parse_numeral(stripped)
    except NumeralError as e:
        if e.position is None:
            position = None
        else:
            position = e.position + offset
        raise type(e)(e.reason, position, text) from None


def format(
    value: int,
    style: Union[FormatStyle, str] = FormatStyle.KANJI,
    minus_sign: str = DEFAULT_MINUS_SIGN,
) -> str:
    """
    整数を日本語の数字表記に変換

    Examples:
        >>> format(234)
        '二百三十四'
        >>> format(0)
        '〇'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"format() expects int, got {type(value).__name__}")

    try:
        style = FormatStyle(style)
    except ValueError:
        raise ValueError(f"Unknown format style: {style!r}") from None

    return format_number(value, style, minus_sign)


def try_parse(text: str) -> Optional[int]:
    """parse と同じだが、失敗時は例外ではなく None を返す"""
    try:
        return parse(text)
    except NumeralError as e:
        logger.debug(f"Not a numeral: {e}")
        return None
