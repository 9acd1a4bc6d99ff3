"""src.core.logging
Python 표준 logging 모듈 설정

- dev: 콘솔 출력만 사용
- prod: 콘솔 + 일 단위 로테이션 파일 (전체 / ERROR 전용)
"""
import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from src.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_PREFIX = 'monetization-checker'
LOG_RETENTION_DAYS = 30

# 요청 URL(쿼리스트링의 API 키 포함)을 INFO로 남기는 외부 로거
QUIET_LOGGERS = ("httpx", "httpcore")


def _daily_file_handler(path: Path, formatter: logging.Formatter, level: int = logging.NOTSET) -> logging.Handler:
    """자정마다 교체되는 파일 핸들러"""
    handler = TimedRotatingFileHandler(
        filename=str(path),
        when='midnight',
        backupCount=LOG_RETENTION_DAYS,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_level: str = "INFO") -> None:
    """
    루트 로거 초기화 (여러 번 호출해도 핸들러가 중복되지 않음)

    Args:
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setFormatter(formatter)

    is_prod = settings.ENVIRONMENT.lower() == 'prod'
    if is_prod:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_daily_file_handler(log_dir / f'{LOG_FILE_PREFIX}.log', formatter))
        handlers.append(_daily_file_handler(log_dir / f'{LOG_FILE_PREFIX}.error.log', formatter, logging.ERROR))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    destination = f"파일 로그: {settings.LOG_DIR}" if is_prod else "파일 로그 비활성화"
    logging.info(f"로깅 초기화 (환경: {settings.ENVIRONMENT}, {destination})")
