"""src.services.channel_resolver
채널 식별자 → 채널 정보(ChannelRecord) 조회 서비스
"""
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from src.core.exceptions import ChannelNotFoundError, UpstreamError
from src.models.channel_analysis import ChannelRecord
from src.services.youtube_api_client import YouTubeApiClient
from src.utils.url_classifier import ChannelReference, ChannelReferenceKind

logger = logging.getLogger(__name__)


def _round_one_decimal(value: float) -> Decimal:
    # float의 정확한 이진값 기준 반올림 (정확히 .x5인 경우만 올림)
    return Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def format_count(raw: str | int | None) -> str:
    """
    숫자 문자열을 표시용으로 변환 (손실 변환이므로 계산에 사용 금지)

    Examples:
        >>> format_count("1500000")
        '1.5M'
        >>> format_count("2500")
        '2.5K'
        >>> format_count("1250000")
        '1.3M'
        >>> format_count("999")
        '999'
    """
    try:
        number = int(raw)
    except (TypeError, ValueError):
        return "0"

    if number >= 1_000_000:
        return f"{_round_one_decimal(number / 1_000_000)}M"
    if number >= 1_000:
        return f"{_round_one_decimal(number / 1_000)}K"
    return f"{number:,}"


def build_channel_record(item: dict[str, Any]) -> ChannelRecord:
    """channels.list 응답 item 1건을 ChannelRecord로 변환"""
    snippet = item.get("snippet")
    statistics = item.get("statistics")
    if not isinstance(snippet, dict) or not isinstance(statistics, dict):
        raise UpstreamError("채널 데이터가 불완전합니다 (snippet/statistics 누락)")

    # API가 필드를 null로 내려주는 경우가 있어 or로 보정
    thumbnails = snippet.get("thumbnails") or {}
    thumbnail = (thumbnails.get("medium") or {}).get("url") or ""

    return ChannelRecord(
        id=item.get("id") or "",
        title=snippet.get("title") or "",
        description=snippet.get("description") or "",
        subscriberCount=format_count(statistics.get("subscriberCount") or "0"),
        viewCount=format_count(statistics.get("viewCount") or "0"),
        videoCount=str(statistics.get("videoCount") or "0"),
        thumbnailUrl=thumbnail,
        customUrl=snippet.get("customUrl") or None
    )


class ChannelResolver:
    """
    ChannelReference 종류별 조회 전략

    - channel_id: channels.list(id) 1회
    - custom_name / legacy_username: channels.list(forUsername) 1회
    - handle: search.list(type=channel) → channels.list(id)
    - video: videos.list(snippet) → channels.list(id)

    재시도하지 않으며 조회 실패는 그대로 전달합니다.
    """

    def __init__(self, client: YouTubeApiClient):
        self._client = client

    async def resolve_channel(self, reference: ChannelReference) -> ChannelRecord:
        """
        채널 식별자를 채널 정보로 변환

        Raises:
            ChannelNotFoundError: 조회 결과가 0건인 경우
            UpstreamError: YouTube API 오류 또는 응답 이상
        """
        logger.info(f"채널 조회 시작: kind={reference.kind.value}, identifier={reference.identifier}")

        if reference.kind == ChannelReferenceKind.CHANNEL_ID:
            record = await self._resolve_by_id(reference.identifier)
        elif reference.kind in (ChannelReferenceKind.CUSTOM_NAME, ChannelReferenceKind.LEGACY_USERNAME):
            record = await self._resolve_by_username(reference.identifier)
        elif reference.kind == ChannelReferenceKind.HANDLE:
            record = await self._resolve_by_handle(reference.identifier)
        elif reference.kind == ChannelReferenceKind.VIDEO:
            record = await self._resolve_by_video(reference.identifier)
        else:
            raise ValueError(f"지원하지 않는 식별자 종류: {reference.kind}")

        logger.info(f"채널 조회 완료: id={record.id}, title={record.title}")
        return record

    async def _resolve_by_id(self, channel_id: str) -> ChannelRecord:
        data = await self._client.list_channels_by_id([channel_id])
        return self._first_channel(data, channel_id)

    async def _resolve_by_username(self, username: str) -> ChannelRecord:
        data = await self._client.list_channels_by_username(username)
        return self._first_channel(data, username)

    async def _resolve_by_handle(self, handle: str) -> ChannelRecord:
        # handle 전용 조회 대신 검색 결과 첫 번째 채널을 사용 (근사)
        data = await self._client.search_channels(handle)
        items = data["items"]
        if not items:
            logger.warning(f"handle 검색 결과 없음: @{handle}")
            raise ChannelNotFoundError()

        first = items[0]
        channel_id = first.get("snippet", {}).get("channelId") or first.get("id", {}).get("channelId")
        if not channel_id:
            raise UpstreamError("검색 결과에 채널 ID가 없습니다")

        logger.info(f"handle 검색 완료: @{handle} → {channel_id}")
        return await self._resolve_by_id(channel_id)

    async def _resolve_by_video(self, video_id: str) -> ChannelRecord:
        data = await self._client.list_videos_by_id(video_id)
        items = data["items"]
        if not items:
            logger.warning(f"동영상 조회 결과 없음: video_id={video_id}")
            raise ChannelNotFoundError()

        channel_id = items[0].get("snippet", {}).get("channelId")
        if not channel_id:
            raise UpstreamError("동영상 정보에 채널 ID가 없습니다")

        logger.info(f"동영상 업로더 확인: {video_id} → {channel_id}")
        return await self._resolve_by_id(channel_id)

    @staticmethod
    def _first_channel(data: dict[str, Any], lookup_value: str) -> ChannelRecord:
        items = data["items"]
        if not items:
            logger.warning(f"채널 조회 결과 없음: {lookup_value}")
            raise ChannelNotFoundError()
        return build_channel_record(items[0])
