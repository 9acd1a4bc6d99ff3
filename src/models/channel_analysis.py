"""src.models.channel_analysis
채널 분석 결과 스키마

Snippet
{
  "channel": {
    "id": "UCX6OQ3DkcsbYNE6H8uQQuVA",
    "title": "MrBeast",
    "subscriberCount": "125.0M",
    "viewCount": "980.4M",
    "videoCount": "741",
    "thumbnailUrl": "https://yt3.ggpht.com/...",
    "customUrl": "@mrbeast"
  },
  "monetization": {
    "adsLikely": true,
    "membershipLikely": true,
    "superChatLikely": true,
    "isMonetized": true,
    "estimatedRevenue": null,
    "lookupStatus": "completed"
  },
  "checkedAt": "2026-10-19T05:40:00.000000Z"
}
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ChannelRecord(BaseModel):
    """YouTube API 응답 1건으로 만든 채널 정보 (표시용 포맷 포함)"""
    id: str = Field(..., description="정규 채널 ID (UC...)")
    title: str = Field(..., description="채널명")
    description: str = Field(default="", description="채널 설명")
    subscriberCount: str = Field(..., description="구독자 수 (표시용 포맷, 예: 1.5M)")
    viewCount: str = Field(..., description="총 조회수 (표시용 포맷)")
    videoCount: str = Field(..., description="동영상 수 (원본 문자열)")
    thumbnailUrl: str = Field(default="", description="채널 썸네일 URL (없으면 빈 문자열)")
    customUrl: Optional[str] = Field(default=None, description="커스텀 URL (@handle)")

    model_config = {"frozen": True}


class MonetizationLookupStatus(str, Enum):
    """수익화 추정 조회 결과 상태"""
    COMPLETED = "completed"          # 모든 조회 완료
    NO_VIDEOS = "no_videos"          # 최근 동영상 없음 (조회 중단)
    LOOKUP_FAILED = "lookup_failed"  # 조회 실패 (모든 신호 false)


class MonetizationSignals(BaseModel):
    """
    공개 메타데이터 기반 수익화 추정 신호

    실제 수익화 여부가 아닌 근사치입니다.
    """
    adsLikely: bool = Field(default=False, description="광고 수익 가능성")
    membershipLikely: bool = Field(default=False, description="멤버십 가능성")
    superChatLikely: bool = Field(default=False, description="슈퍼챗 가능성")
    isMonetized: bool = Field(default=False, description="세 신호의 OR")
    estimatedRevenue: Optional[str] = Field(default=None, description="예상 수익 (데이터 소스 없음, 항상 null)")
    lookupStatus: MonetizationLookupStatus = Field(
        default=MonetizationLookupStatus.COMPLETED,
        description="조회 결과 상태"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def derive_is_monetized(cls, data):
        # isMonetized는 항상 세 신호로부터 계산
        if isinstance(data, dict):
            data = dict(data)
            data["isMonetized"] = bool(
                data.get("adsLikely") or data.get("membershipLikely") or data.get("superChatLikely")
            )
        return data

    @classmethod
    def empty(cls, status: MonetizationLookupStatus) -> "MonetizationSignals":
        """모든 신호가 false인 결과"""
        return cls(lookupStatus=status)


class AnalysisResult(BaseModel):
    """채널 분석 1회의 최종 결과"""
    channel: ChannelRecord = Field(..., description="채널 정보")
    monetization: MonetizationSignals = Field(..., description="수익화 추정 신호")
    checkedAt: datetime = Field(..., description="분석 시각 (UTC, ISO-8601)")
