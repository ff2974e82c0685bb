"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class ProperSortException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 토큰 분류 신호
# 분류 단계(size -> number -> split)에서 다음 규칙으로 넘어가라는 의미일 뿐,
# compare/tokenize 호출자에게는 절대 전파되지 않습니다.
class TokenClassificationException(ProperSortException):
    """토큰 분류 실패 신호의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CLASSIFICATION_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CLASSIFICATION_ERROR", details)


class NotANumberError(TokenClassificationException):
    """현재 숫자 모드로 파싱할 수 없는 단어"""
    def __init__(self, word: str, mode: str, details: Optional[dict[str, Any]] = None):
        message = f"Not a number in {mode} mode: {word!r}"
        super().__init__(message, "NOT_A_NUMBER", details or {"word": word, "mode": mode})


class NotASizeError(TokenClassificationException):
    """사이즈 테이블에 없는 단어/구"""
    def __init__(self, word: str, details: Optional[dict[str, Any]] = None):
        message = f"Not a size designator: {word!r}"
        super().__init__(message, "NOT_A_SIZE", details or {"word": word})


# 리소스 관련 예외
class SizeTableException(ProperSortException):
    """사이즈 어휘 리소스 로드/검증 실패"""
    def __init__(self, path: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Size table {path} is invalid: {reason}"
        super().__init__(message, "SIZE_TABLE_ERROR",
                         details or {"path": path, "reason": reason})


# 설정 관련 예외
class ConfigurationException(ProperSortException):
    """유효하지 않은 설정값"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Invalid setting '{field}': {reason}"
        super().__init__(message, "CONFIG_ERROR",
                         details or {"field": field, "reason": reason})
