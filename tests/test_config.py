"""
Tests for config.py - 環境変数からの設定読み込み
"""
from japan_number.config import (
    DEFAULT_MINUS_SIGN,
    ENV_DEFAULT_STYLE,
    ENV_LOG_LEVEL,
    ENV_MINUS_SIGN,
    MAX_ABS_VALUE,
    load_settings,
)


def test_defaults(monkeypatch):
    for name in (ENV_LOG_LEVEL, ENV_DEFAULT_STYLE, ENV_MINUS_SIGN):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.default_style == "kanji"
    assert settings.minus_sign == DEFAULT_MINUS_SIGN
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
    monkeypatch.setenv(ENV_DEFAULT_STYLE, "MIXED")
    monkeypatch.setenv(ENV_MINUS_SIGN, "-")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.default_style == "mixed"
    assert settings.minus_sign == "-"


def test_max_value_is_below_next_unit():
    assert MAX_ABS_VALUE == 10 ** 52


def test_no_filesystem_paths():
    """設定は定数と環境変数のみでファイルパスを持たない"""
    from japan_number import config
    assert not hasattr(config, "PROJECT_ROOT")
