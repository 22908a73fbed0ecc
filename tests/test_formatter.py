"""
Tests for formatter.py - 1万進グループ分解と各表記
"""
import random

import pytest
from japan_number.core.errors import Overflow
from japan_number.core.formatter import FormatStyle, format_number, split_groups
from japan_number.core.parser import parse_numeral


class TestKanjiStyle:
    """標準の漢数字表記"""

    @pytest.mark.parametrize("value, expected", [
        (0, "〇"),
        (7, "七"),
        (10, "十"),
        (110, "百十"),
        (234, "二百三十四"),
        (1000, "千"),
        (1001, "千一"),
        (10000, "一万"),
        (12345, "一万二千三百四十五"),
        (20000000, "二千万"),
        (100010000, "一億一万"),
        (10 ** 12, "一兆"),
    ])
    def test_values(self, value, expected):
        assert format_number(value) == expected

    def test_negative_uses_minus_sign(self):
        assert format_number(-5) == "マイナス五"
        assert format_number(-5, minus_sign="-") == "-五"


class TestOtherStyles:
    """大字・混在・位取りなし"""

    def test_daiji_keeps_one(self):
        assert format_number(10, FormatStyle.DAIJI) == "壱拾"
        assert format_number(12000, FormatStyle.DAIJI) == "壱萬弐千"
        assert format_number(35, FormatStyle.DAIJI) == "参拾五"

    def test_mixed(self):
        assert format_number(12345, FormatStyle.MIXED) == "1万2345"
        assert format_number(35000000, FormatStyle.MIXED) == "3500万"
        assert format_number(100000005, FormatStyle.MIXED) == "1億5"
        assert format_number(0, FormatStyle.MIXED) == "0"

    def test_positional(self):
        assert format_number(2026, FormatStyle.POSITIONAL) == "二〇二六"
        assert format_number(0, FormatStyle.POSITIONAL) == "〇"

    def test_style_accepts_string(self):
        assert format_number(12345, "mixed") == "1万2345"


class TestGroups:
    def test_split_groups(self):
        assert split_groups(123456789) == [6789, 2345, 1]
        assert split_groups(0) == [0]
        assert split_groups(10000) == [0, 1]


class TestOverflow:
    def test_largest_value_formats(self):
        text = format_number(10 ** 52 - 1)
        assert text.startswith("九千九百九十九極")

    def test_too_large(self):
        with pytest.raises(Overflow):
            format_number(10 ** 52)
        with pytest.raises(Overflow):
            format_number(-(10 ** 52))


class TestRoundTrip:
    """parse(format(v)) == v"""

    EDGE_VALUES = [0, 1, 9, 10, 11, 19, 100, 101, 110, 999, 1000, 1010, 9999,
                   10000, 10001, 100000, 1000000, 10000000, 99999999,
                   100000000, 100000001, 10 ** 12, 10 ** 16 - 1, 10 ** 52 - 1]

    @pytest.mark.parametrize("style", list(FormatStyle))
    def test_edge_values(self, style):
        for value in self.EDGE_VALUES:
            assert parse_numeral(format_number(value, style)) == value
            assert parse_numeral(format_number(-value, style)) == -value

    @pytest.mark.parametrize("style", list(FormatStyle))
    def test_sampled_range(self, style):
        rng = random.Random(20261019)
        for _ in range(500):
            value = rng.randrange(0, 10 ** 16)
            assert parse_numeral(format_number(value, style)) == value
