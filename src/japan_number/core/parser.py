"""
漢数字パーサ

字句列を左から1回走査して整数を組み立てる。

- 位取り形式: 二百三十四 → 234, 一万二千三百四十五 → 12345
- 算用数字との混在: 3千 → 3000, 1万2345 → 12345, 3千500万 → 35000000
- 単位を含まない数字列: 二〇二六 → 2026, 1,234,567 → 1234567
"""
import logging
from typing import List

from ..config import MAX_ABS_VALUE
from .errors import (
    EmptyInput,
    MalformedGroup,
    NonMonotonicUnit,
    Overflow,
    RepeatedUnit,
)
from .lexicon import tokenize
from .tokens import NumeralToken, ParseState, TokenKind

logger = logging.getLogger(__name__)

# 1つの位取りグループ（万未満）の上限
GROUP_LIMIT = 9999


def parse_numeral(text: str) -> int:
    """
    漢数字文字列を整数に変換

    Args:
        text: 前後の空白を除いた数字文字列

    Returns:
        整数値

    Raises:
        NumeralError: 文法に合わない場合（種別はサブクラスで判別）

    Examples:
        >>> parse_numeral('二百三十四')
        234
        >>> parse_numeral('二千万')
        20000000
    """
    if not text:
        raise EmptyInput("Empty numeral text")

    tokens = tokenize(text)
    return parse_tokens(tokens, text)


def parse_tokens(tokens: List[NumeralToken], text: str = "") -> int:
    """字句列を整数に変換（符号処理と形式の振り分け）"""
    if not tokens:
        raise EmptyInput("Empty numeral text")

    sign = 1
    if tokens[0].kind == TokenKind.SIGN:
        sign = -1
        tokens = tokens[1:]
        if not tokens:
            raise EmptyInput("Sign without digits", len(text), text)

    for token in tokens:
        if token.kind == TokenKind.SIGN:
            raise MalformedGroup(f"Sign {token.char!r} is only allowed at the start", token.position, text)

    has_unit = any(t.kind in (TokenKind.SMALL_UNIT, TokenKind.LARGE_UNIT) for t in tokens)
    if has_unit:
        value = _parse_positional(tokens, text)
    else:
        value = _parse_literal(tokens, text)

    if value >= MAX_ABS_VALUE:
        raise Overflow("Value exceeds the largest representable unit", None, text)

    logger.debug(f"Parsed {text!r} -> {sign * value}")
    return sign * value


def _is_arabic_digit(tokens: List[NumeralToken], index: int) -> bool:
    return 0 <= index < len(tokens) and tokens[index].kind == TokenKind.DIGIT and tokens[index].arabic


def _check_separator(tokens: List[NumeralToken], index: int, text: str) -> None:
    """
    桁区切りは算用数字の3桁ごとにのみ有効（1,234 / 12,345,678）

    直前は1〜3桁（前に区切りがあれば3桁）、直後はちょうど3桁。
    """
    token = tokens[index]
    before = 0
    while _is_arabic_digit(tokens, index - 1 - before):
        before += 1
    after = 0
    while _is_arabic_digit(tokens, index + 1 + after):
        after += 1
    if not (1 <= before <= 3 and after == 3) or (
        index + 4 < len(tokens) and tokens[index + 4].kind == TokenKind.DIGIT
    ):
        raise MalformedGroup(
            f"Separator {token.char!r} must split Arabic digits into groups of three",
            token.position,
            text,
        )


def _parse_literal(tokens: List[NumeralToken], text: str) -> int:
    """単位を含まない数字列（二〇二六, 1,234）をそのまま10進数として読む"""
    value = 0
    for i, token in enumerate(tokens):
        if token.kind == TokenKind.SEPARATOR:
            _check_separator(tokens, i, text)
            continue
        value = value * 10 + token.value
    return value


def _parse_positional(tokens: List[NumeralToken], text: str) -> int:
    """位取り形式（十百千・万億兆…を含む）を読む"""
    state = ParseState()
    arabic_run = True

    for i, token in enumerate(tokens):
        if token.kind == TokenKind.DIGIT:
            if state.digit_count == 0:
                arabic_run = True
            arabic_run = arabic_run and token.arabic
            state.current_digit_group = state.current_digit_group * 10 + token.value
            state.digit_count += 1
            state.group_has_content = True

            if state.current_digit_group > GROUP_LIMIT:
                raise MalformedGroup("Digit group exceeds 9999 before a unit", token.position, text)
            if state.last_small_rank < 4:
                # 小単位の後ろは、その単位より下の桁しか書けない
                if state.digit_count == 1 and token.value == 0:
                    raise MalformedGroup("Zero digit after a unit", token.position, text)
                if not arabic_run and state.digit_count > 1:
                    raise MalformedGroup("Only one kanji digit may follow a unit", token.position, text)
                if state.current_digit_group >= 10 ** state.last_small_rank:
                    raise MalformedGroup("Digits overflow the preceding unit", token.position, text)

        elif token.kind == TokenKind.SEPARATOR:
            _check_separator(tokens, i, text)

        elif token.kind == TokenKind.SMALL_UNIT:
            if token.rank >= state.last_small_rank:
                raise RepeatedUnit(f"Unit {token.char!r} repeated or out of order", token.position, text)
            if state.digit_count == 0:
                multiplier = 1
            else:
                multiplier = state.current_digit_group
                if not 1 <= multiplier <= 9:
                    raise MalformedGroup(
                        f"Unit {token.char!r} needs a single non-zero digit multiplier",
                        token.position,
                        text,
                    )
            state.group_sum += multiplier * token.value
            state.last_small_rank = token.rank
            state.group_has_content = True
            state.reset_digits()

        elif token.kind == TokenKind.LARGE_UNIT:
            if token.rank >= state.last_unit_rank:
                raise NonMonotonicUnit(
                    f"Unit {token.char!r} must be smaller than the preceding large unit",
                    token.position,
                    text,
                )
            if not state.group_has_content:
                # 「万」単独は 1万 とみなす
                multiplier = 1
            else:
                multiplier = state.group_sum + state.current_digit_group
                if multiplier == 0:
                    raise MalformedGroup(f"Zero multiplier before {token.char!r}", token.position, text)
            state.total += multiplier * token.value
            state.last_unit_rank = token.rank
            state.reset_group()

    state.total += state.group_sum + state.current_digit_group
    return state.total
