import json
import logging
import os
import sys


LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_FORMAT_ENV = "LOG_FORMAT"
SERVICE_NAME_ENV = "SERVICE_NAME"

TEXT_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

# extra 로 넘어오면 JSON 로그에 그대로 옮겨 담는 필드 목록
EXTRA_LOG_KEYS = (
    "request_id",
    "span_id",
    "method",
    "path",
    "query_params",
    "status",
    "body",
    "duration",
    "user_id",
    "bookmark_id",
    "author_id",
    "count",
)


def setup_logger(
    name: str = "fritter-bookmarks",
    level: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """애플리케이션 전역 로거를 설정하고 반환한다.

    Args:
        name: 로거 이름 (SERVICE_NAME 환경변수가 있으면 그 값을 우선 사용)
        level: 로그 레벨 (기본값: None -> 환경변수 LOG_LEVEL 또는 INFO 사용)
        log_format: "json" 또는 "text" (기본값: None -> 환경변수 LOG_FORMAT 또는 json)

    Returns:
        설정된 logging.Logger 인스턴스
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if log_format is None:
        log_format = os.getenv(LOG_FORMAT_ENV, "json")

    log_level = getattr(logging, level.upper(), logging.INFO)

    service_name = os.getenv(SERVICE_NAME_ENV, name)
    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)

    # 이미 핸들러가 있다면 제거 (중복 출력 방지)
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(log_format))

    logger.addHandler(handler)

    # 루트 로거에도 동일한 핸들러를 붙여 모듈 로거(getLogger(__name__))의 로그도 출력한다.
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거를 가져온다."""
    return logging.getLogger(name)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.strip().lower() == "text":
        # 로컬 개발용 사람이 읽기 쉬운 포맷
        # 예: 2025-12-01 23:15:05 [INFO] [bookmark_service.app.services.bookmarks_service] bookmark created
        return logging.Formatter(fmt=TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return JsonFormatter()


class JsonFormatter(logging.Formatter):
    """구조화 로그 수집을 위한 간단한 JSON 포맷터.

    - datetime, level, logger, message 필드를 기본으로 포함한다.
    - EXTRA_LOG_KEYS 에 해당하는 extra 값이 있으면 함께 기록한다.
    - 예외 정보가 있으면 exc_info 필드에 문자열로 추가한다.
    """

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        log_record: dict[str, object] = {
            "datetime": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in EXTRA_LOG_KEYS:
            if hasattr(record, key):
                log_record[key] = getattr(record, key)

        service_name = getattr(record, "service_name", None) or os.getenv(
            SERVICE_NAME_ENV
        )
        if service_name:
            log_record["service_name"] = service_name

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False, default=str)
