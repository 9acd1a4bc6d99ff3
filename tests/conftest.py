"""
YouTube Data API를 흉내 내는 httpx.MockTransport 픽스처

실제 네트워크나 환경 변수 없이 실행됩니다.
Run with: pytest -q
"""
from typing import Any

import httpx
import pytest

from src.services.youtube_api_client import YouTubeApiClient

API_KEY = "AIzaSyTestKey0000000000000000000000"
CHANNEL_ID = "UC" + "x" * 22


class FakeYouTubeApi:
    """
    등록된 (resource, params) 규칙으로 응답하는 가짜 YouTube API

    규칙의 params가 요청 쿼리에 모두 포함되면 일치로 판단하며,
    일치하는 규칙이 없으면 500을 반환합니다.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: list[tuple[str, dict[str, str], int, Any]] = []

    def add(self, resource: str, params: dict[str, Any], json: Any = None, status_code: int = 200):
        self._routes.append((resource, {k: str(v) for k, v in params.items()}, status_code, json))
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resource = request.url.path.rsplit("/", 1)[-1]
        query = dict(request.url.params)

        for route_resource, params, status_code, payload in self._routes:
            if route_resource != resource:
                continue
            if all(query.get(key) == value for key, value in params.items()):
                if isinstance(payload, (bytes, str)):
                    return httpx.Response(status_code, content=payload)
                return httpx.Response(status_code, json=payload if payload is not None else {})

        return httpx.Response(500, json={"error": {"message": f"unexpected request: {request.url}"}})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def resources(self) -> list[str]:
        return [request.url.path.rsplit("/", 1)[-1] for request in self.requests]


def channel_item(
    channel_id: str = CHANNEL_ID,
    title: str = "Test Channel",
    subscriber_count: str = "125000000",
    view_count: str = "2500",
    video_count: str = "450",
    custom_url: str | None = "@testchannel",
) -> dict:
    snippet = {
        "title": title,
        "description": "채널 설명",
        "thumbnails": {"medium": {"url": "https://yt3.ggpht.com/medium.jpg"}},
    }
    if custom_url is not None:
        snippet["customUrl"] = custom_url
    return {
        "id": channel_id,
        "snippet": snippet,
        "statistics": {
            "subscriberCount": subscriber_count,
            "viewCount": view_count,
            "videoCount": video_count,
        },
    }


def search_video_item(video_id: str) -> dict:
    return {"id": {"kind": "youtube#video", "videoId": video_id}, "snippet": {"channelId": CHANNEL_ID}}


def video_detail_item(video_id: str, license: str = "youtube", licensed_content: bool = True) -> dict:
    return {
        "id": video_id,
        "contentDetails": {"licensedContent": licensed_content},
        "status": {"license": license},
    }


def channel_status_item(made_for_kids: bool | None) -> dict:
    status = {} if made_for_kids is None else {"madeForKids": made_for_kids}
    return {"id": CHANNEL_ID, "status": status}


@pytest.fixture
def fake_api() -> FakeYouTubeApi:
    return FakeYouTubeApi()


@pytest.fixture
def api_client(fake_api) -> YouTubeApiClient:
    return YouTubeApiClient(API_KEY, transport=fake_api.transport)
