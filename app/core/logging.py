"""Logging configuration."""

import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application logging.

    로깅 설정:
    - Console 출력: 모든 로그를 표준 출력으로 전송
    - 파일 출력: settings.log_file이 지정된 경우에만 추가
    - 로그 레벨: settings.log_level에서 설정

    Request bodies are never logged, so caller keys and prompts stay out
    of every handler.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
    )

    # httpx logs full request URLs at INFO, and the Gemini URL carries the key
    logging.getLogger("httpx").setLevel(logging.WARNING)
