"""
Tests for lexicon.py - 文字 → 字句ひな形 の対応と字句分解
"""
import pytest
from japan_number.core.errors import UnknownCharacter
from japan_number.core.lexicon import is_numeral_char, lookup, tokenize
from japan_number.core.tokens import TokenKind


class TestLookup:
    """lookup の対応表"""

    def test_kanji_digit(self):
        template = lookup('三')
        assert template.kind == TokenKind.DIGIT
        assert template.value == 3
        assert template.arabic is False

    def test_zero_variants(self):
        assert lookup('〇').value == 0
        assert lookup('零').value == 0

    def test_daiji_digits(self):
        assert lookup('壱').value == 1
        assert lookup('弐').value == 2
        assert lookup('参').value == 3

    def test_arabic_digits_half_and_full_width(self):
        assert lookup('7').value == 7
        assert lookup('７').value == 7
        assert lookup('７').arabic is True

    def test_small_units(self):
        assert lookup('十').kind == TokenKind.SMALL_UNIT
        assert lookup('十').value == 10
        assert lookup('拾').value == 10
        assert lookup('百').rank == 2
        assert lookup('千').value == 1000

    def test_large_units(self):
        assert lookup('万').kind == TokenKind.LARGE_UNIT
        assert lookup('万').rank == 1
        assert lookup('萬').rank == 1
        assert lookup('億').value == 10 ** 8
        assert lookup('兆').rank == 3
        assert lookup('極').value == 10 ** 48

    def test_unknown_character(self):
        assert lookup('あ') is None
        assert lookup('円') is None

    def test_lookup_is_pure(self):
        """同じ文字は常に同じ結果"""
        assert lookup('万') == lookup('万')
        assert lookup('九') == lookup('九')

    def test_is_numeral_char(self):
        assert is_numeral_char('五')
        assert is_numeral_char('億')
        assert not is_numeral_char(',')
        assert not is_numeral_char('-')
        assert not is_numeral_char('条')


class TestTokenize:
    """tokenize の位置情報と符号"""

    def test_positions(self):
        tokens = tokenize('二百三')
        assert [t.position for t in tokens] == [0, 1, 2]
        assert [t.kind for t in tokens] == [TokenKind.DIGIT, TokenKind.SMALL_UNIT, TokenKind.DIGIT]

    def test_minus_word_prefix(self):
        tokens = tokenize('マイナス五')
        assert tokens[0].kind == TokenKind.SIGN
        assert tokens[1].value == 5
        assert tokens[1].position == 4

    def test_unknown_character_reports_position(self):
        with pytest.raises(UnknownCharacter) as exc_info:
            tokenize('五x')
        assert exc_info.value.position == 1
