"""
japan_number ユーティリティモジュール
"""

from .text import (
    NumeralMatch,
    find_numerals,
    normalize_numerals,
)

__all__ = [
    'NumeralMatch',
    'find_numerals',
    'normalize_numerals',
]
