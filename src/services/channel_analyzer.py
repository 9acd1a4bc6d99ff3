"""src.services.channel_analyzer
채널 분석 워크플로우

YouTube 채널 링크에서 수익화 추정 결과를 만드는 파이프라인:
1. 링크에서 채널 식별자 추출
2. 채널 정보 조회 (ChannelResolver)
3. 수익화 신호 추정 (MonetizationHeuristic)
4. 분석 시각 기록
"""
import logging
from datetime import datetime, timezone

import httpx

from src.core.config import Settings
from src.core.exceptions import InvalidReferenceError, NotConfiguredError
from src.models.channel_analysis import AnalysisResult
from src.services.channel_resolver import ChannelResolver
from src.services.monetization_service import MonetizationHeuristic
from src.services.youtube_api_client import DEFAULT_BASE_URL, YouTubeApiClient
from src.utils.common import DEFAULT_HTTP_TIMEOUT
from src.utils.sanitizer import sanitize_api_key
from src.utils.url_classifier import extract_channel_reference

logger = logging.getLogger(__name__)


class ChannelAnalyzer:
    """채널 분석 오케스트레이터 (API 키는 생성 시점에 고정)"""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        self._api_key = api_key or ""
        client = YouTubeApiClient(self._api_key, base_url=base_url, timeout=timeout, transport=transport)
        self._resolver = ChannelResolver(client)
        self._heuristic = MonetizationHeuristic(client)

    def is_configured(self) -> bool:
        """API 키가 설정되어 있는지 여부"""
        return bool(self._api_key)

    async def analyze_channel(self, url: str) -> AnalysisResult:
        """
        채널 링크를 분석하여 채널 정보와 수익화 추정 결과를 반환

        Args:
            url: YouTube 채널 링크

        Returns:
            AnalysisResult: 분석 결과

        Raises:
            NotConfiguredError: API 키가 없는 경우 (네트워크 호출 없음)
            InvalidReferenceError: 링크에서 채널 식별자를 찾지 못한 경우
            ChannelNotFoundError, UpstreamError: 채널 조회 실패 시 그대로 전달
        """
        if not self.is_configured():
            logger.error("YouTube API 키 미설정 상태에서 분석 요청")
            raise NotConfiguredError()

        # Step 1: 채널 식별자 추출
        reference = extract_channel_reference(url)
        if reference is None:
            logger.warning(f"채널 식별자 추출 실패: url={url}")
            raise InvalidReferenceError()
        logger.info(f"[채널 분석] Step 1/3: 식별자 추출 완료 - kind={reference.kind.value}, id={reference.identifier}")

        # Step 2: 채널 정보 조회
        channel = await self._resolver.resolve_channel(reference)
        logger.info(f"[채널 분석] Step 2/3: 채널 조회 완료 - {channel.title} ({channel.id})")

        # Step 3: 수익화 추정 (실패해도 예외 없음)
        monetization = await self._heuristic.infer_monetization(channel.id)
        logger.info(
            f"[채널 분석] Step 3/3: 수익화 추정 완료 - monetized={monetization.isMonetized}, "
            f"status={monetization.lookupStatus.value}"
        )

        return AnalysisResult(
            channel=channel,
            monetization=monetization,
            checkedAt=datetime.now(timezone.utc)
        )


def build_channel_analyzer(
    app_settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None
) -> ChannelAnalyzer:
    """설정 객체로부터 ChannelAnalyzer 생성 (API 키는 허용 문자만 남김)"""
    return ChannelAnalyzer(
        api_key=sanitize_api_key(app_settings.YOUTUBE_API_KEY),
        base_url=app_settings.YOUTUBE_API_BASE_URL,
        timeout=app_settings.YOUTUBE_HTTP_TIMEOUT,
        transport=transport
    )
