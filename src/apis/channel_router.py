"""src.apis.channel_router
YouTube 채널 수익화 확인 API 라우터
"""
import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from src.core.config import settings
from src.core.exceptions import CustomError
from src.models.channel_analysis import AnalysisResult
from src.models.validation import ChannelUrlRequest, ServiceStatusResponse, ValidationOutcome
from src.services.channel_analyzer import ChannelAnalyzer, build_channel_analyzer
from src.utils.sanitizer import sanitize_url
from src.utils.url_classifier import classify_channel_url, normalize_url, validate_channel_url

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/channels", tags=["채널 수익화 API"])


@lru_cache
def get_channel_analyzer() -> ChannelAnalyzer:
    """설정에서 API 키를 읽어 ChannelAnalyzer를 1회 생성"""
    return build_channel_analyzer(settings)


@router.post("/validate", response_model=ValidationOutcome, status_code=200)
async def validate_channel(request: ChannelUrlRequest):
    """
    채널 링크 형식 검증 (네트워크 호출 없음)

    - POST /api/channels/validate
    - Body: {"url": "https://www.youtube.com/@MrBeast"}
    - 항상 200 + ValidationOutcome

    지원 형식
    - youtube.com/channel/<24자 ID>
    - youtube.com/c/<name>
    - youtube.com/user/<name>
    - youtube.com/@<handle>
    - youtu.be/<11자 동영상 ID>
    """
    return validate_channel_url(sanitize_url(request.url))


@router.post("/analyze", response_model=AnalysisResult, status_code=200)
async def analyze_channel(
    request: ChannelUrlRequest,
    analyzer: ChannelAnalyzer = Depends(get_channel_analyzer)
):
    """
    채널 정보 조회 및 수익화 추정

    ------------------------------------------------------------
    처리 순서
    1. 입력 정제 (위험 문자 제거, 500자 제한)
    2. 링크 형식 검증 (실패 시 네트워크 호출 없이 400)
    3. 채널 조회 → 최근 동영상 → 동영상 상세 → 채널 status

    ------------------------------------------------------------
    반환값 (AnalysisResult)
    ```json
    {
      "channel": {"id": "UC...", "title": "...", "subscriberCount": "1.5M", ...},
      "monetization": {"adsLikely": true, "membershipLikely": true, "superChatLikely": true,
                       "isMonetized": true, "estimatedRevenue": null, "lookupStatus": "completed"},
      "checkedAt": "2026-10-19T05:40:00Z"
    }
    ```

    ------------------------------------------------------------
    에러 코드 (detail: {"code", "message"})
    - 400: EMPTY_INPUT, NOT_YOUTUBE, UNRECOGNIZED_FORMAT, INVALID_REFERENCE
    - 404: CHANNEL_NOT_FOUND
    - 502: UPSTREAM_ERROR (YouTube API 오류)
    - 503: NOT_CONFIGURED (API 키 미설정)
    """
    clean_url = sanitize_url(request.url)
    logger.info(f"채널 분석 요청 수신: url={clean_url}")

    try:
        classify_channel_url(clean_url)
        return await analyzer.analyze_channel(normalize_url(clean_url))
    except CustomError as error:
        logger.warning(f"채널 분석 실패: code={error.code}, message={error.message}")
        raise HTTPException(status_code=error.status_code, detail=error.to_detail())


@router.get("/status", response_model=ServiceStatusResponse, status_code=200)
async def service_status(analyzer: ChannelAnalyzer = Depends(get_channel_analyzer)):
    """서비스 상태 및 API 키 설정 여부 확인"""
    return ServiceStatusResponse(status="ok", configured=analyzer.is_configured())
