"""src.utils.common
공통 유틸리티 함수 (Spring의 CommonUtil 스타일)
"""
import logging
from typing import Any

import httpx

from src.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


# ============================================================
# HTTP 클라이언트 유틸리티
# ============================================================

DEFAULT_HTTP_TIMEOUT = 10.0  # 기본 타임아웃 (초)


async def http_get_json(
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None
) -> Any:
    """
    HTTP GET 요청 후 JSON 응답 반환

    Args:
        url: 요청 URL
        params: 쿼리 파라미터
        headers: 요청 헤더
        timeout: 타임아웃 (초, 기본 10초)
        transport: httpx 전송 계층 (테스트에서 MockTransport 주입용)

    Returns:
        Any: 파싱된 JSON 응답

    Raises:
        UpstreamError: 요청 실패, 응답 오류 또는 JSON 파싱 실패 시
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()

    except httpx.TimeoutException:
        logger.error(f"HTTP 요청 타임아웃: url={url}")
        raise UpstreamError(f"요청 시간이 초과되었습니다 ({timeout}초)")

    except httpx.HTTPStatusError as error:
        status_code = error.response.status_code
        logger.error(f"HTTP 응답 오류: status={status_code}, url={url}")
        raise UpstreamError(f"YouTube API 오류: {status_code}", upstream_status=status_code)

    except httpx.RequestError as error:
        logger.error(f"HTTP 연결 실패: url={url}, error={error}")
        raise UpstreamError("API 연결에 실패했습니다")

    except ValueError:
        logger.error(f"JSON 파싱 실패: url={url}")
        raise UpstreamError("API 응답을 해석할 수 없습니다")


def mask_sensitive_data(data: str, show_chars: int = 2) -> str:
    """
    민감 데이터 마스킹 (로그 출력 시 사용)

    Args:
        data: 마스킹할 문자열
        show_chars: 앞뒤로 보여줄 문자 수

    Returns:
        str: 마스킹된 문자열

    Examples:
        >>> mask_sensitive_data("my_secret_key_12345")
        'my***************45'
    """
    if not data or len(data) <= show_chars * 2:
        return "****"

    return data[:show_chars] + "*" * (len(data) - show_chars * 2) + data[-show_chars:]
