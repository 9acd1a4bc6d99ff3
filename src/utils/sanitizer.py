"""src.utils.sanitizer
사용자 입력 정제 유틸리티
"""
import re

from src.models.validation import ValidationOutcome

MAX_URL_LENGTH = 500
MAX_API_KEY_LENGTH = 100
MIN_API_KEY_LENGTH = 30
API_KEY_PREFIX = "AIza"

_UNSAFE_URL_CHARS = re.compile(r"[<>'\"]")
_NON_API_KEY_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize_url(url: str) -> str:
    """
    URL에서 위험 문자(< > ' ")를 제거하고 최대 500자로 자릅니다.

    Examples:
        >>> sanitize_url('  <b>youtube.com/c/x</b>  ')
        'byoutube.com/c/x/b'
    """
    return _UNSAFE_URL_CHARS.sub("", url.strip())[:MAX_URL_LENGTH]


def sanitize_api_key(api_key: str) -> str:
    """API 키에 허용된 문자([A-Za-z0-9_-])만 남기고 최대 100자로 자릅니다."""
    return _NON_API_KEY_CHARS.sub("", api_key.strip())[:MAX_API_KEY_LENGTH]


def validate_api_key(api_key: str) -> ValidationOutcome:
    """
    YouTube API 키 형식 검증 (AIza로 시작, 30자 이상)

    형식만 확인하며 실제 유효성은 API 호출 시점에 드러납니다.
    """
    if not api_key:
        return ValidationOutcome(valid=False, errorMessage="API 키가 지정되지 않았습니다", errorCode="EMPTY_INPUT")

    if not api_key.startswith(API_KEY_PREFIX) or len(api_key) < MIN_API_KEY_LENGTH:
        return ValidationOutcome(
            valid=False,
            errorMessage="YouTube API 키 형식이 올바르지 않습니다",
            errorCode="UNRECOGNIZED_FORMAT"
        )

    return ValidationOutcome(valid=True)
