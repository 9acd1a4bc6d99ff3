"""
채널 조회 서비스 테스트 (httpx.MockTransport 사용)
"""
import pytest

from conftest import API_KEY, CHANNEL_ID, channel_item
from src.core.exceptions import ChannelNotFoundError, UpstreamError
from src.services.channel_resolver import ChannelResolver, format_count
from src.utils.url_classifier import ChannelReference, ChannelReferenceKind


@pytest.mark.parametrize("raw, expected", [
    ("1500000", "1.5M"),
    ("125000000", "125.0M"),
    ("1000000", "1.0M"),
    ("2500", "2.5K"),
    ("1250000", "1.3M"),
    ("2250", "2.3K"),
    ("1150000", "1.1M"),  # 1.15는 float로 1.1499...
    ("1000", "1.0K"),
    ("999999", "1000.0K"),
    ("999", "999"),
    ("0", "0"),
    (None, "0"),
    ("not-a-number", "0"),
])
def test_format_count(raw, expected):
    assert format_count(raw) == expected


async def test_resolve_by_channel_id(fake_api, api_client):
    fake_api.add("channels", {"id": CHANNEL_ID, "part": "snippet,statistics"}, json={"items": [channel_item()]})

    record = await ChannelResolver(api_client).resolve_channel(
        ChannelReference(ChannelReferenceKind.CHANNEL_ID, CHANNEL_ID)
    )

    assert record.id == CHANNEL_ID
    assert record.title == "Test Channel"
    assert record.subscriberCount == "125.0M"
    assert record.viewCount == "2.5K"
    assert record.videoCount == "450"
    assert record.thumbnailUrl == "https://yt3.ggpht.com/medium.jpg"
    assert record.customUrl == "@testchannel"
    assert len(fake_api.requests) == 1
    assert fake_api.requests[0].url.params["key"] == API_KEY


async def test_resolve_by_channel_id_not_found(fake_api, api_client):
    fake_api.add("channels", {"id": CHANNEL_ID}, json={"items": []})

    with pytest.raises(ChannelNotFoundError):
        await ChannelResolver(api_client).resolve_channel(
            ChannelReference(ChannelReferenceKind.CHANNEL_ID, CHANNEL_ID)
        )


async def test_missing_items_field_means_not_found(fake_api, api_client):
    fake_api.add("channels", {"forUsername": "ghost"}, json={"kind": "youtube#channelListResponse", "pageInfo": {}})

    with pytest.raises(ChannelNotFoundError):
        await ChannelResolver(api_client).resolve_channel(
            ChannelReference(ChannelReferenceKind.LEGACY_USERNAME, "ghost")
        )


@pytest.mark.parametrize("kind", [ChannelReferenceKind.CUSTOM_NAME, ChannelReferenceKind.LEGACY_USERNAME])
async def test_custom_name_and_legacy_username_use_for_username(fake_api, api_client, kind):
    fake_api.add("channels", {"forUsername": "PewDiePie", "part": "snippet,statistics"},
                 json={"items": [channel_item(custom_url=None)]})

    record = await ChannelResolver(api_client).resolve_channel(ChannelReference(kind, "PewDiePie"))

    assert record.id == CHANNEL_ID
    assert record.customUrl is None
    assert fake_api.resources() == ["channels"]


async def test_resolve_by_handle_searches_then_looks_up_by_id(fake_api, api_client):
    fake_api.add("search", {"type": "channel", "q": "bar"},
                 json={"items": [{"id": {"channelId": CHANNEL_ID}, "snippet": {"channelId": CHANNEL_ID}}]})
    fake_api.add("channels", {"id": CHANNEL_ID}, json={"items": [channel_item()]})

    record = await ChannelResolver(api_client).resolve_channel(
        ChannelReference(ChannelReferenceKind.HANDLE, "bar")
    )

    assert record.id == CHANNEL_ID
    assert fake_api.resources() == ["search", "channels"]


async def test_resolve_by_handle_no_search_results(fake_api, api_client):
    fake_api.add("search", {"q": "nobody"}, json={"items": []})

    with pytest.raises(ChannelNotFoundError):
        await ChannelResolver(api_client).resolve_channel(
            ChannelReference(ChannelReferenceKind.HANDLE, "nobody")
        )
    assert fake_api.resources() == ["search"]


async def test_resolve_by_video_uses_uploader_channel(fake_api, api_client):
    fake_api.add("videos", {"id": "dQw4w9WgXcQ", "part": "snippet"},
                 json={"items": [{"id": "dQw4w9WgXcQ", "snippet": {"channelId": CHANNEL_ID}}]})
    fake_api.add("channels", {"id": CHANNEL_ID}, json={"items": [channel_item()]})

    record = await ChannelResolver(api_client).resolve_channel(
        ChannelReference(ChannelReferenceKind.VIDEO, "dQw4w9WgXcQ")
    )

    assert record.id == CHANNEL_ID
    assert fake_api.resources() == ["videos", "channels"]


async def test_upstream_status_is_carried(fake_api, api_client):
    fake_api.add("channels", {"id": CHANNEL_ID}, json={"error": {"code": 403}}, status_code=403)

    with pytest.raises(UpstreamError) as exc_info:
        await ChannelResolver(api_client).resolve_channel(
            ChannelReference(ChannelReferenceKind.CHANNEL_ID, CHANNEL_ID)
        )

    assert exc_info.value.upstream_status == 403
    assert len(fake_api.requests) == 1  # 재시도 없음


async def test_malformed_body_is_upstream_error(fake_api, api_client):
    fake_api.add("channels", {"id": CHANNEL_ID}, json="<html>not json</html>")

    with pytest.raises(UpstreamError) as exc_info:
        await ChannelResolver(api_client).resolve_channel(
            ChannelReference(ChannelReferenceKind.CHANNEL_ID, CHANNEL_ID)
        )

    assert exc_info.value.upstream_status is None


async def test_incomplete_channel_item_is_upstream_error(fake_api, api_client):
    item = channel_item()
    del item["statistics"]
    fake_api.add("channels", {"id": CHANNEL_ID}, json={"items": [item]})

    with pytest.raises(UpstreamError):
        await ChannelResolver(api_client).resolve_channel(
            ChannelReference(ChannelReferenceKind.CHANNEL_ID, CHANNEL_ID)
        )


async def test_null_snippet_fields_fall_back_to_empty(fake_api, api_client):
    item = channel_item()
    item["snippet"].update({"title": None, "description": None, "thumbnails": None, "customUrl": None})
    fake_api.add("channels", {"id": CHANNEL_ID}, json={"items": [item]})

    record = await ChannelResolver(api_client).resolve_channel(
        ChannelReference(ChannelReferenceKind.CHANNEL_ID, CHANNEL_ID)
    )

    assert record.title == ""
    assert record.description == ""
    assert record.thumbnailUrl == ""
    assert record.customUrl is None
    assert record.subscriberCount == "125.0M"


async def test_null_medium_thumbnail_falls_back_to_empty(fake_api, api_client):
    item = channel_item()
    item["snippet"]["thumbnails"] = {"medium": None, "default": {"url": "https://yt3.ggpht.com/default.jpg"}}
    fake_api.add("channels", {"id": CHANNEL_ID}, json={"items": [item]})

    record = await ChannelResolver(api_client).resolve_channel(
        ChannelReference(ChannelReferenceKind.CHANNEL_ID, CHANNEL_ID)
    )

    assert record.thumbnailUrl == ""
