"""src.services.youtube_api_client
YouTube Data API v3 조회 클라이언트

https://developers.google.com/youtube/v3/docs

모든 요청은 GET이며 API 키는 `key` 쿼리 파라미터로 전달합니다.
응답은 `items` 리스트를 가진 JSON 객체여야 합니다.
"""
import logging
from typing import Any

import httpx

from src.core.exceptions import UpstreamError
from src.utils.common import DEFAULT_HTTP_TIMEOUT, http_get_json, mask_sensitive_data

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"
RECENT_VIDEOS_LIMIT = 10


class YouTubeApiClient:
    """
    YouTube Data API v3 읽기 전용 클라이언트

    - channels.list (id / forUsername / status)
    - search.list (채널 검색 / 최근 동영상)
    - videos.list (contentDetails + status / snippet)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"YouTubeApiClient(base_url={self._base_url!r}, api_key={mask_sensitive_data(self._api_key)!r})"

    # ------------------------------------------------------------
    # channels.list
    # ------------------------------------------------------------

    async def list_channels_by_id(self, channel_ids: list[str]) -> dict[str, Any]:
        """채널 ID로 snippet + statistics 조회"""
        return await self._get("channels", {
            "part": "snippet,statistics",
            "id": ",".join(channel_ids),
        })

    async def list_channels_by_username(self, username: str) -> dict[str, Any]:
        """레거시 사용자명(forUsername)으로 snippet + statistics 조회"""
        return await self._get("channels", {
            "part": "snippet,statistics",
            "forUsername": username,
        })

    async def list_channel_status(self, channel_id: str) -> dict[str, Any]:
        """채널 status 블록 조회 (madeForKids 등)"""
        return await self._get("channels", {
            "part": "status",
            "id": channel_id,
        })

    # ------------------------------------------------------------
    # search.list
    # ------------------------------------------------------------

    async def search_channels(self, query: str) -> dict[str, Any]:
        """채널 타입으로 한정한 자유 텍스트 검색"""
        return await self._get("search", {
            "part": "snippet",
            "type": "channel",
            "q": query,
        })

    async def list_recent_videos(self, channel_id: str, max_results: int = RECENT_VIDEOS_LIMIT) -> dict[str, Any]:
        """채널의 최근 동영상 (게시일 내림차순)"""
        return await self._get("search", {
            "part": "snippet",
            "channelId": channel_id,
            "type": "video",
            "order": "date",
            "maxResults": max_results,
        })

    # ------------------------------------------------------------
    # videos.list
    # ------------------------------------------------------------

    async def list_video_details(self, video_ids: list[str]) -> dict[str, Any]:
        """동영상 contentDetails + status 일괄 조회"""
        return await self._get("videos", {
            "part": "contentDetails,status",
            "id": ",".join(video_ids),
        })

    async def list_videos_by_id(self, video_id: str) -> dict[str, Any]:
        """동영상 snippet 조회 (업로드 채널 ID 확인용)"""
        return await self._get("videos", {
            "part": "snippet",
            "id": video_id,
        })

    # ------------------------------------------------------------

    async def _get(self, resource: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._base_url}/{resource}"
        logger.debug(f"YouTube API 요청: {resource} params={params}")

        data = await http_get_json(
            url,
            params={**params, "key": self._api_key},
            timeout=self._timeout,
            transport=self._transport
        )

        if not isinstance(data, dict) or not isinstance(data.get("items", []), list):
            logger.error(f"YouTube API 응답 구조 오류: resource={resource}")
            raise UpstreamError("YouTube API 응답 구조가 올바르지 않습니다")

        # items가 없는 응답(결과 0건)은 빈 리스트로 취급
        data.setdefault("items", [])
        return data
