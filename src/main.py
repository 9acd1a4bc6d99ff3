"""src.main
FastAPI 애플리케이션 진입점
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.apis.channel_router import get_channel_analyzer, router as channel_router
from src.core.config import settings
from src.core.logging import setup_logging
from src.utils.sanitizer import sanitize_api_key, validate_api_key

setup_logging(log_level="INFO")
logger = logging.getLogger(__name__)


def log_api_key_status() -> None:
    """시작 시 YouTube API 키 상태를 경고로 남김 (키 자체는 기록하지 않음)"""
    if not get_channel_analyzer().is_configured():
        logger.warning("YOUTUBE_API_KEY 미설정: /api/channels/analyze 는 503을 반환합니다")
        return

    key_check = validate_api_key(sanitize_api_key(settings.YOUTUBE_API_KEY))
    if not key_check.valid:
        logger.warning(f"YOUTUBE_API_KEY 형식 경고: {key_check.errorMessage}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """시작 시 API 키 상태 확인, 종료 시 로그만 남김"""
    log_api_key_status()
    logger.info(f"{app.title} v{app.version} 시작")
    yield
    logger.info(f"{app.title} 종료")


async def measure_process_time(request: Request, call_next):
    """처리 시간을 X-Process-Time 헤더와 로그로 남기는 미들웨어"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - started

    response.headers["X-Process-Time"] = f"{elapsed:.4f}"
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.4f}초)")
    return response


app = FastAPI(
    title="YouTube Monetization Checker",
    description="YouTube 채널 링크로 수익화 여부를 추정하는 API입니다. 결과는 공개 메타데이터 기반 근사치입니다.",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs/swagger",
    redoc_url="/docs/redoc"
)

# 브라우저 프론트엔드는 다른 Origin에서 호출
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.middleware("http")(measure_process_time)
app.include_router(channel_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001, loop="asyncio")
