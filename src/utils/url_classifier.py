"""src.utils.url_classifier
URL 분류 유틸리티 - YouTube 채널 링크 검증 및 채널 식별자 추출

검증(validate_channel_url)과 추출(extract_channel_reference)은 같은 패턴 테이블을 사용합니다.
- 검증: scheme/host를 포함한 전체 문자열 일치 (사용자 피드백용)
- 추출: 경로 부분 문자열 검색 (실제 조회용)
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlsplit

from src.core.exceptions import (
    CustomError,
    EmptyInputError,
    NotYouTubeError,
    UnrecognizedFormatError,
)
from src.models.validation import ValidationOutcome


class ChannelReferenceKind(str, Enum):
    """채널 식별자 종류"""
    CHANNEL_ID = "channel_id"            # youtube.com/channel/UC...
    CUSTOM_NAME = "custom_name"          # youtube.com/c/name
    LEGACY_USERNAME = "legacy_username"  # youtube.com/user/name
    HANDLE = "handle"                    # youtube.com/@handle
    VIDEO = "video"                      # youtu.be/VIDEO_ID (영상의 채널로 조회)


@dataclass(frozen=True)
class ChannelReference:
    """URL에서 추출한 채널 식별자"""
    kind: ChannelReferenceKind
    identifier: str


@dataclass(frozen=True)
class _ChannelUrlPattern:
    kind: ChannelReferenceKind
    host: str          # 정규식 (escape 완료)
    path_prefix: str   # 정규식 (escape 완료)
    strict_id: str     # 검증 시 식별자 패턴


_NAME_CHARS = r"[a-zA-Z0-9_-]"

# 순서가 곧 우선순위
_CHANNEL_URL_PATTERNS: tuple[_ChannelUrlPattern, ...] = (
    _ChannelUrlPattern(ChannelReferenceKind.CHANNEL_ID, r"youtube\.com", r"/channel/", _NAME_CHARS + "{24}"),
    _ChannelUrlPattern(ChannelReferenceKind.CUSTOM_NAME, r"youtube\.com", r"/c/", _NAME_CHARS + "+"),
    _ChannelUrlPattern(ChannelReferenceKind.LEGACY_USERNAME, r"youtube\.com", r"/user/", _NAME_CHARS + "+"),
    _ChannelUrlPattern(ChannelReferenceKind.HANDLE, r"youtube\.com", r"/@", _NAME_CHARS + "+"),
    _ChannelUrlPattern(ChannelReferenceKind.VIDEO, r"youtu\.be", r"/", _NAME_CHARS + "{11}"),
)

_VALIDATION_REGEXES = [
    (pattern.kind, re.compile(rf"^https?://(?:www\.)?{pattern.host}{pattern.path_prefix}({pattern.strict_id})(?:\?.*)?$"))
    for pattern in _CHANNEL_URL_PATTERNS
]

_EXTRACTION_REGEXES = [
    (pattern.kind, re.compile(rf"{pattern.host}{pattern.path_prefix}({_NAME_CHARS}+)"))
    for pattern in _CHANNEL_URL_PATTERNS
]


def classify_channel_url(url: str) -> ChannelReference:
    """
    채널 링크를 검증하고 채널 식별자를 반환

    Args:
        url: 사용자가 입력한 링크

    Returns:
        ChannelReference: 채널 식별자

    Raises:
        EmptyInputError: 빈 문자열이거나 문자열이 아닌 경우
        NotYouTubeError: youtube.com / youtu.be 링크가 아닌 경우
        UnrecognizedFormatError: 지원하는 5가지 형식과 일치하지 않는 경우
    """
    if not url or not isinstance(url, str):
        raise EmptyInputError()

    clean_url = url.strip()

    if 'youtube.com' not in clean_url and 'youtu.be' not in clean_url:
        raise NotYouTubeError()

    for kind, regex in _VALIDATION_REGEXES:
        match = regex.match(clean_url)
        if match:
            return ChannelReference(kind=kind, identifier=match.group(1))

    raise UnrecognizedFormatError()


def validate_channel_url(url: str) -> ValidationOutcome:
    """채널 링크 검증 결과를 사용자 피드백용으로 반환 (예외 없음)"""
    try:
        classify_channel_url(url)
    except CustomError as error:
        return ValidationOutcome(valid=False, errorMessage=error.message, errorCode=error.code)
    return ValidationOutcome(valid=True)


def extract_channel_reference(url: str) -> Optional[ChannelReference]:
    """
    링크에서 채널 식별자를 추출 (부분 문자열 검색, 검증 패턴의 상위 집합)

    Returns:
        ChannelReference | None: 첫 번째로 일치한 식별자, 없으면 None
    """
    if not url or not isinstance(url, str):
        return None

    for kind, regex in _EXTRACTION_REGEXES:
        match = regex.search(url)
        if match:
            return ChannelReference(kind=kind, identifier=match.group(1))

    return None


def normalize_url(url: str) -> str:
    """
    링크 정규화: 공백 제거, scheme 보완, 쿼리/프래그먼트 제거

    Examples:
        >>> normalize_url("youtube.com/c/Foo?x=1")
        'https://youtube.com/c/Foo'
        >>> normalize_url("https://www.youtube.com/@bar?si=abc#top")
        'https://www.youtube.com/@bar'
    """
    clean_url = url.strip()
    if not clean_url:
        return ""

    if not urlsplit(clean_url).netloc:
        clean_url = "https://" + clean_url

    parsed = urlsplit(clean_url)
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path}"
