import os
from dataclasses import dataclass

from dotenv import load_dotenv

# 大数の上限（極 = 10^48）。1万進の位なので上限は 10^(4*(12+1))
MAX_LARGE_RANK = 12
MAX_ABS_VALUE = 10 ** (4 * (MAX_LARGE_RANK + 1))

# Formatter defaults
DEFAULT_STYLE = "kanji"
DEFAULT_MINUS_SIGN = "マイナス"

# Environment variable names
ENV_LOG_LEVEL = "JAPAN_NUMBER_LOG_LEVEL"
ENV_DEFAULT_STYLE = "JAPAN_NUMBER_DEFAULT_STYLE"
ENV_MINUS_SIGN = "JAPAN_NUMBER_MINUS_SIGN"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    default_style: str = DEFAULT_STYLE
    minus_sign: str = DEFAULT_MINUS_SIGN


def load_settings() -> Settings:
    """
    環境変数（および .env）から設定を読み込む

    Returns:
        Settings。未設定の項目はモジュール定数の既定値
    """
    load_dotenv()
    return Settings(
        log_level=os.getenv(ENV_LOG_LEVEL, "WARNING").upper(),
        default_style=os.getenv(ENV_DEFAULT_STYLE, DEFAULT_STYLE).lower(),
        minus_sign=os.getenv(ENV_MINUS_SIGN, DEFAULT_MINUS_SIGN),
    )
