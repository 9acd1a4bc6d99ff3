"""src.models.validation
URL 검증 요청/응답 스키마
"""
from typing import Optional

from pydantic import BaseModel, Field


class ChannelUrlRequest(BaseModel):
    """채널 링크 요청 (검증/분석 공통)"""
    url: str = Field(..., description="YouTube 채널 링크", examples=["https://www.youtube.com/@MrBeast"])


class ValidationOutcome(BaseModel):
    """URL 검증 결과"""
    valid: bool = Field(..., description="검증 통과 여부")
    errorMessage: Optional[str] = Field(default=None, description="실패 시 사용자 표시용 메시지")
    errorCode: Optional[str] = Field(default=None, description="실패 시 오류 코드")


class ServiceStatusResponse(BaseModel):
    """서비스 상태"""
    status: str = Field(default="ok", description="서비스 상태")
    configured: bool = Field(..., description="YouTube API 키 설정 여부")
