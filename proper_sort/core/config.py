"""설정 관리 - 환경 변수 로드 및 검증"""
from enum import Enum
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from proper_sort.core.exceptions import ConfigurationException


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class NumericMode(str, Enum):
    """Numeric literal policy used by the tokenizer.

    - integer: signed runs of ASCII digits, 64-bit range
    - decimal: additionally one internal '.' and internal ',' separators
    """

    INTEGER = "integer"
    DECIMAL = "decimal"


class Settings(BaseSettings):
    """라이브러리 설정 (프로세스 전역, import 시 1회 로드)"""

    model_config = SettingsConfigDict(
        env_prefix="PROPER_SORT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # 토크나이저
    # 정렬 도중 모드가 바뀌면 추이성이 깨지므로 런타임에 바꾸지 않습니다.
    numeric_mode: NumericMode = NumericMode.DECIMAL

    # 사이즈 어휘 (None이면 패키지 내장 resources/sizes.yaml)
    size_table_path: Optional[str] = None

    # 로깅
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("size_table_path")
    @classmethod
    def validate_size_table_path(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


def load_settings(**overrides) -> Settings:
    """환경 변수/.env에서 설정 로드

    Raises:
        ConfigurationException: 첫 번째 검증 오류의 필드와 사유
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "settings"
        raise ConfigurationException(field, error["msg"],
                                     {"field": field, "reason": error["msg"], "errors": e.errors()}) from e


settings = load_settings()
