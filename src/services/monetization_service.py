"""src.services.monetization_service
공개 메타데이터 기반 수익화 추정 서비스

최근 동영상 → 동영상 상세 → 채널 status 순서로 조회합니다.
이전 단계의 결과(동영상 ID)가 다음 단계의 입력이므로 순차 실행합니다.

조회 중 오류가 발생하면 예외를 전달하지 않고 모든 신호가 false인 결과
(lookupStatus=lookup_failed)를 반환합니다.
"""
import logging
from typing import Any

from src.core.exceptions import CustomError
from src.models.channel_analysis import MonetizationLookupStatus, MonetizationSignals
from src.services.youtube_api_client import YouTubeApiClient

logger = logging.getLogger(__name__)


def has_ads_signal(video_items: list[dict[str, Any]]) -> bool:
    """YouTube 표준 라이선스 + 라이선스 콘텐츠인 동영상이 하나라도 있으면 True"""
    for video in video_items:
        status = video.get("status") or {}
        content_details = video.get("contentDetails") or {}
        if status.get("license") == "youtube" and content_details.get("licensedContent"):
            return True
    return False


def has_membership_signal(channel_items: list[dict[str, Any]]) -> bool:
    """
    madeForKids == false 이면 멤버십/슈퍼챗 가능으로 추정

    아동용 채널은 멤버십과 슈퍼챗이 비활성화되므로 간접 지표로만 사용합니다.
    """
    if not channel_items:
        return False
    status = channel_items[0].get("status") or {}
    return status.get("madeForKids") is False


class MonetizationHeuristic:
    """수익화 신호 추정 (근사치)"""

    def __init__(self, client: YouTubeApiClient):
        self._client = client

    async def infer_monetization(self, channel_id: str) -> MonetizationSignals:
        """
        채널의 수익화 신호 추정 (예외를 발생시키지 않음)

        Args:
            channel_id: 정규 채널 ID

        Returns:
            MonetizationSignals: 추정 결과
        """
        try:
            return await self._infer(channel_id)
        except CustomError as error:
            logger.warning(f"수익화 추정 실패, 기본값 반환: channel_id={channel_id}, error={error.message}")
            return MonetizationSignals.empty(MonetizationLookupStatus.LOOKUP_FAILED)
        except Exception:
            logger.exception(f"수익화 추정 중 예기치 않은 오류 발생: channel_id={channel_id}")
            return MonetizationSignals.empty(MonetizationLookupStatus.LOOKUP_FAILED)

    async def _infer(self, channel_id: str) -> MonetizationSignals:
        # Step 1: 최근 동영상
        videos = await self._client.list_recent_videos(channel_id)
        video_ids = [
            item.get("id", {}).get("videoId")
            for item in videos["items"]
            if item.get("id", {}).get("videoId")
        ]

        if not video_ids:
            logger.info(f"최근 동영상 없음, 수익화 추정 생략: channel_id={channel_id}")
            return MonetizationSignals.empty(MonetizationLookupStatus.NO_VIDEOS)

        # Step 2: 동영상 상세 (contentDetails + status)
        details = await self._client.list_video_details(video_ids)
        ads_likely = has_ads_signal(details["items"])

        # Step 3: 채널 status
        channel_status = await self._client.list_channel_status(channel_id)
        membership_likely = has_membership_signal(channel_status["items"])

        signals = MonetizationSignals(
            adsLikely=ads_likely,
            membershipLikely=membership_likely,
            superChatLikely=membership_likely,
            lookupStatus=MonetizationLookupStatus.COMPLETED
        )
        logger.info(
            f"수익화 추정 완료: channel_id={channel_id}, videos={len(video_ids)}, "
            f"ads={signals.adsLikely}, membership={signals.membershipLikely}, monetized={signals.isMonetized}"
        )
        return signals
