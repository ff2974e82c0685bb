"""로깅 설정

라이브러리이므로 import 시에는 NullHandler만 붙입니다.
콘솔 출력이 필요하면 호스트 앱이 setup_logging()을 직접 호출합니다.
"""
import logging
import os
import sys
from typing import Optional, TextIO

from proper_sort.core.config import settings


LOGGER_NAME = "proper_sort"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _is_production() -> bool:
    return os.getenv("ENVIRONMENT", "development") == "production"


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """패키지 로거에 콘솔 핸들러 연결 (opt-in)

    Args:
        level: 로그 레벨, None이면 settings.log_level
        stream: 출력 스트림, None이면 stdout

    Returns:
        "proper_sort" 로거 (재호출 시 핸들러는 추가하지 않고 레벨만 갱신)
    """
    log_level = (level or settings.log_level).upper()
    # production에서는 최소 INFO
    if _is_production() and log_level == "DEBUG":
        log_level = "INFO"

    logger.setLevel(getattr(logging, log_level))

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, log_level))
            return logger

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(getattr(logging, log_level))

    if _is_production():
        fmt = "%(asctime)s - %(levelname)s - %(message)s"
    else:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    console_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(console_handler)
    return logger


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """로그 메시지에 넣을 문자열 (빈 값 표시, 개행 escape, 길이 제한)"""
    if not value:
        return "[empty]"

    result = value.replace("\n", "\\n").replace("\r", "\\r")

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
