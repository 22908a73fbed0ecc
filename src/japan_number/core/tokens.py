"""
トークンとパース状態の型定義
"""
from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """字句の種別"""
    DIGIT = "digit"
    SMALL_UNIT = "small_unit"  # 十百千
    LARGE_UNIT = "large_unit"  # 万億兆…
    SEPARATOR = "separator"    # 1,234 の桁区切り
    SIGN = "sign"              # 先頭の負号


@dataclass(frozen=True)
class TokenTemplate:
    """
    辞書が返す字句のひな形（位置を持たない）

    value: 数字なら 0-9、単位なら倍率
    rank: 小単位は 10 の冪、大単位は 1万 の冪
    arabic: 算用数字（全角含む）かどうか
    """
    kind: TokenKind
    value: int = 0
    rank: int = 0
    arabic: bool = False


@dataclass(frozen=True)
class NumeralToken:
    kind: TokenKind
    value: int
    rank: int
    char: str
    position: int
    arabic: bool = False

    @classmethod
    def from_template(cls, template: TokenTemplate, char: str, position: int) -> "NumeralToken":
        return cls(
            kind=template.kind,
            value=template.value,
            rank=template.rank,
            char=char,
            position=position,
            arabic=template.arabic,
        )


@dataclass
class ParseState:
    """
    パース中の累積状態。Parser だけが更新し、parse 終了で破棄される
    """
    current_digit_group: int = 0
    digit_count: int = 0
    group_sum: int = 0
    last_small_rank: int = 4
    group_has_content: bool = False
    total: int = 0
    last_unit_rank: int = 10 ** 6

    def reset_group(self) -> None:
        self.current_digit_group = 0
        self.digit_count = 0
        self.group_sum = 0
        self.last_small_rank = 4
        self.group_has_content = False

    def reset_digits(self) -> None:
        self.current_digit_group = 0
        self.digit_count = 0
