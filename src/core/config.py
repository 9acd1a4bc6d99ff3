"""src.core.config.py
.env 파일에서 YouTube API 키와 서비스 설정을 할당합니다.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # YouTube Data API v3 (비어 있으면 분석 API가 503을 반환)
    YOUTUBE_API_KEY: str = ""
    YOUTUBE_API_BASE_URL: str = "https://www.googleapis.com/youtube/v3"
    YOUTUBE_HTTP_TIMEOUT: float = 10.0

    ENVIRONMENT: str = "dev"  # dev: 로컬, prod: 서버환경
    LOG_DIR: str = "logs"

    # 브라우저 프론트엔드 허용 Origin (쉼표 구분)
    CORS_ALLOW_ORIGINS: str = "*"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]
settings = Settings()
