"""src.core.exceptions
서비스 전역 예외 정의

모든 도메인 예외는 CustomError를 상속하며, 라우터에서 HTTPException으로 변환됩니다.
"""


class CustomError(Exception):
    """서비스 공통 예외 (message를 그대로 사용자에게 노출)"""
    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


# ============================================================
# 입력 검증 오류 (네트워크 호출 전에 발생)
# ============================================================

class EmptyInputError(CustomError):
    code = "EMPTY_INPUT"
    status_code = 400

    def __init__(self, message: str = "YouTube 채널 링크를 입력하세요"):
        super().__init__(message)


class NotYouTubeError(CustomError):
    code = "NOT_YOUTUBE"
    status_code = 400

    def __init__(self, message: str = "YouTube 링크가 아닙니다"):
        super().__init__(message)


class UnrecognizedFormatError(CustomError):
    code = "UNRECOGNIZED_FORMAT"
    status_code = 400

    def __init__(
        self,
        message: str = "지원하지 않는 링크 형식입니다. 지원 형식: youtube.com/c/name, youtube.com/@name, youtube.com/channel/ID"
    ):
        super().__init__(message)


class InvalidReferenceError(CustomError):
    code = "INVALID_REFERENCE"
    status_code = 400

    def __init__(self, message: str = "링크에서 채널 식별자를 찾을 수 없습니다"):
        super().__init__(message)


# ============================================================
# 채널 조회 / 외부 API 오류
# ============================================================

class ChannelNotFoundError(CustomError):
    code = "CHANNEL_NOT_FOUND"
    status_code = 404

    def __init__(self, message: str = "채널을 찾을 수 없습니다"):
        super().__init__(message)


class UpstreamError(CustomError):
    """YouTube API 응답 오류 (status_code가 없으면 연결/파싱 실패)"""
    code = "UPSTREAM_ERROR"
    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status

    def to_detail(self) -> dict:
        detail = super().to_detail()
        detail["upstreamStatus"] = self.upstream_status
        return detail


class NotConfiguredError(CustomError):
    code = "NOT_CONFIGURED"
    status_code = 503

    def __init__(self, message: str = "YouTube API 키가 설정되지 않았습니다"):
        super().__init__(message)
