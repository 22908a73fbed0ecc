"""
漢数字辞書

文字 → 字句ひな形 の静的な対応表。状態を持たない。
"""
import logging
from functools import lru_cache
from typing import Dict, List, Optional

from .errors import UnknownCharacter
from .tokens import NumeralToken, TokenKind, TokenTemplate

logger = logging.getLogger(__name__)

# ==============================================================================
# 対応表
# ==============================================================================

KANJI_TO_DIGIT: Dict[str, int] = {
    '〇': 0, '零': 0,
    '一': 1, '壱': 1, '壹': 1,
    '二': 2, '弐': 2, '貳': 2,
    '三': 3, '参': 3, '參': 3,
    '四': 4, '肆': 4,
    '五': 5, '伍': 5,
    '六': 6, '陸': 6,
    '七': 7, '漆': 7, '柒': 7,
    '八': 8, '捌': 8,
    '九': 9, '玖': 9,
}

# 半角・全角の算用数字
ARABIC_TO_DIGIT: Dict[str, int] = {
    **{str(d): d for d in range(10)},
    **{chr(0xFF10 + d): d for d in range(10)},
}

# 小単位: 文字 → 10 の冪
SMALL_UNIT_RANK: Dict[str, int] = {
    '十': 1, '拾': 1,
    '百': 2, '佰': 2, '陌': 2,
    '千': 3, '阡': 3, '仟': 3,
}

# 大単位: 文字 → 1万 の冪
LARGE_UNIT_RANK: Dict[str, int] = {
    '万': 1, '萬': 1,
    '億': 2,
    '兆': 3,
    '京': 4,
    '垓': 5,
    '𥝱': 6, '秭': 6,
    '穣': 7,
    '溝': 8,
    '澗': 9,
    '正': 10,
    '載': 11,
    '極': 12,
}

SEPARATORS = frozenset({',', '，'})
SIGN_CHARS = frozenset({'-', '−', '－', '▲', '△'})
MINUS_WORD = 'マイナス'

# 出力用（標準表記）
STANDARD_DIGITS = '〇一二三四五六七八九'
STANDARD_SMALL_UNITS = {1: '十', 2: '百', 3: '千'}
STANDARD_LARGE_UNITS = {1: '万', 2: '億', 3: '兆', 4: '京', 5: '垓', 6: '𥝱',
                        7: '穣', 8: '溝', 9: '澗', 10: '正', 11: '載', 12: '極'}

# 出力用（大字）
DAIJI_DIGITS = '〇壱弐参四五六七八九'
DAIJI_SMALL_UNITS = {1: '拾', 2: '百', 3: '千'}
DAIJI_LARGE_UNITS = {**STANDARD_LARGE_UNITS, 1: '萬'}


# ==============================================================================
# 参照
# ==============================================================================

@lru_cache(maxsize=None)
def lookup(char: str) -> Optional[TokenTemplate]:
    """
    1文字を字句ひな形に変換する

    Args:
        char: 1文字

    Returns:
        TokenTemplate。数字として扱えない文字は None

    Examples:
        >>> lookup('三').value
        3
        >>> lookup('億').rank
        2
        >>> lookup('あ') is None
        True
    """
    if char in KANJI_TO_DIGIT:
        return TokenTemplate(TokenKind.DIGIT, KANJI_TO_DIGIT[char])
    if char in ARABIC_TO_DIGIT:
        return TokenTemplate(TokenKind.DIGIT, ARABIC_TO_DIGIT[char], arabic=True)
    if char in SMALL_UNIT_RANK:
        rank = SMALL_UNIT_RANK[char]
        return TokenTemplate(TokenKind.SMALL_UNIT, 10 ** rank, rank)
    if char in LARGE_UNIT_RANK:
        rank = LARGE_UNIT_RANK[char]
        return TokenTemplate(TokenKind.LARGE_UNIT, 10000 ** rank, rank)
    if char in SEPARATORS:
        return TokenTemplate(TokenKind.SEPARATOR)
    if char in SIGN_CHARS:
        return TokenTemplate(TokenKind.SIGN, -1)
    return None


def is_numeral_char(char: str) -> bool:
    """符号と区切りを除く、数を構成する文字か"""
    template = lookup(char)
    return template is not None and template.kind not in (TokenKind.SIGN, TokenKind.SEPARATOR)


def tokenize(text: str) -> List[NumeralToken]:
    """
    文字列を字句列に分解する

    先頭の「マイナス」は符号1字句として扱う。

    Raises:
        UnknownCharacter: 辞書にない文字を含む場合
    """
    tokens: List[NumeralToken] = []
    start = 0
    if text.startswith(MINUS_WORD):
        tokens.append(NumeralToken(TokenKind.SIGN, -1, 0, MINUS_WORD, 0))
        start = len(MINUS_WORD)

    for pos in range(start, len(text)):
        char = text[pos]
        template = lookup(char)
        if template is None:
            raise UnknownCharacter(f"Unknown numeral character {char!r}", pos, text)
        tokens.append(NumeralToken.from_template(template, char, pos))

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens
