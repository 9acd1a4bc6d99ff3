"""src.models
API 요청/응답에 사용되는 Pydantic 스키마 정의
"""
from src.models.channel_analysis import (
    AnalysisResult,
    ChannelRecord,
    MonetizationLookupStatus,
    MonetizationSignals,
)
from src.models.validation import ChannelUrlRequest, ServiceStatusResponse, ValidationOutcome

__all__ = [
    # 요청 모델
    "ChannelUrlRequest",
    # 검증 모델
    "ValidationOutcome",
    "ServiceStatusResponse",
    # 분석 결과 모델
    "AnalysisResult",
    "ChannelRecord",
    "MonetizationLookupStatus",
    "MonetizationSignals",
]
