"""
文中の漢数字を算用数字に置き換えるユーティリティ

- 第百九十九条 → 第199条
- 平成十一年 → 平成11年
- 二〇二六年 → 2026年
"""
import logging
import re
from typing import List, NamedTuple

from ..core.errors import NumeralError
from ..core.lexicon import (
    ARABIC_TO_DIGIT,
    KANJI_TO_DIGIT,
    LARGE_UNIT_RANK,
    SMALL_UNIT_RANK,
)
from ..core.parser import parse_numeral

logger = logging.getLogger(__name__)

# 文中では 京 までを単位として扱う（正・極 などは一般語と衝突する）
_TEXT_LARGE_UNITS = ''.join(c for c, rank in LARGE_UNIT_RANK.items() if rank <= 4)
_DIGIT_CHARS = ''.join(KANJI_TO_DIGIT) + ''.join(ARABIC_TO_DIGIT)
_RUN_CHARS = _DIGIT_CHARS + ''.join(SMALL_UNIT_RANK) + _TEXT_LARGE_UNITS

# 数字の連続（算用数字の桁区切りを含む）
NUMERAL_RUN_PATTERN = re.compile(
    rf'[{re.escape(_RUN_CHARS)}]+(?:[,，][0-9０-９]{{3}}(?![0-9０-９])[{re.escape(_RUN_CHARS)}]*)*'
)

_CONVERTIBLE = re.compile(rf'[{re.escape(_DIGIT_CHARS)}{re.escape("".join(SMALL_UNIT_RANK))}]')
_ARABIC = re.compile(rf'[{re.escape("".join(ARABIC_TO_DIGIT))}]')
_ASCII_DIGITS = re.compile(r'[0-9]+')

# 単独の漢数字（一・十 など）は前後がこれらの場合だけ数とみなす
NUMERAL_PREFIXES = frozenset('第')
NUMERAL_SUFFIXES = frozenset('条項号年月日時秒円人個件歳章節款編枚台週倍')


class NumeralMatch(NamedTuple):
    start: int
    end: int
    text: str
    value: int


def _is_anchored(text: str, start: int, end: int) -> bool:
    """第〇条・〇年 のように前後の文字で数と分かるか"""
    if start > 0 and text[start - 1] in NUMERAL_PREFIXES:
        return True
    return end < len(text) and text[end] in NUMERAL_SUFFIXES


def _looks_numeric(run: str) -> bool:
    """
    文脈なしで数とみなせる並びか

    算用数字を含むもの、または2文字以上で大単位から始まらないもの。
    一般・統一 の「一」や 万一 は該当しない。
    """
    if _ARABIC.search(run):
        return True
    return len(run) >= 2 and run[0] not in LARGE_UNIT_RANK


def find_numerals(text: str) -> List[NumeralMatch]:
    """
    文中の数字表記を検出して値に変換する

    大単位だけの並び（「万」単独など）は数として扱わない。
    一般語の一部になりやすい並び（一般, 十分, 万一）は、
    第〇条・〇年 のような前後の文字がある場合だけ変換する。
    解析に失敗した並びは結果に含めない。

    Examples:
        >>> [m.value for m in find_numerals('第百九十九条及び第二百条')]
        [199, 200]
    """
    matches: List[NumeralMatch] = []
    for m in NUMERAL_RUN_PATTERN.finditer(text):
        run = m.group(0)
        if not _CONVERTIBLE.search(run):
            continue
        if not (_looks_numeric(run) or _is_anchored(text, m.start(), m.end())):
            logger.debug(f"Leaving {run!r} as a word")
            continue
        try:
            value = parse_numeral(run)
        except NumeralError as e:
            logger.warning(f"Skipping unparsable numeral run {run!r}: {e}")
            continue
        matches.append(NumeralMatch(m.start(), m.end(), run, value))
    return matches


def normalize_numerals(text: str) -> str:
    """
    文中の漢数字・全角数字を半角の算用数字に置換

    Args:
        text: 任意の文字列

    Returns:
        置換後の文字列。数として読めない部分はそのまま残す

    Examples:
        >>> normalize_numerals('第百九十九条')
        '第199条'
        >>> normalize_numerals('平成一一年法律第八七号')
        '平成11年法律第87号'
    """
    result = []
    last = 0
    for match in find_numerals(text):
        result.append(text[last:match.start])
        if _ASCII_DIGITS.fullmatch(match.text):
            result.append(match.text)
        else:
            result.append(str(match.value))
        last = match.end
    result.append(text[last:])
    return ''.join(result)
