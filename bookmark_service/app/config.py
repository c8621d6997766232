from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


CONTENT_MAX_LENGTH_ENV = "BOOKMARK_CONTENT_MAX_LENGTH"
DISPLAY_TIMEZONE_ENV = "BOOKMARK_DISPLAY_TIMEZONE"
SERVICE_PORT_ENV = "BOOKMARK_SERVICE_PORT"

DEFAULT_CONTENT_MAX_LENGTH = 140
DEFAULT_DISPLAY_TIMEZONE = "UTC"
DEFAULT_SERVICE_PORT = 8002


@dataclass(frozen=True, slots=True)
class BookmarkServiceConfig:
    """bookmark-service 설정 루트.

    - Mongo 연결 정보는 common.mongo.config 가 따로 관리한다.
    """

    content_max_length: int
    display_timezone: tzinfo
    port: int


def _read_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer (got {raw!r})") from exc
    if value <= 0:
        raise RuntimeError(f"{name} must be positive (got {value})")
    return value


def _read_timezone(name: str, default: str) -> tzinfo:
    raw = os.getenv(name, "").strip() or default
    if raw.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise RuntimeError(f"{name} is not a known IANA timezone (got {raw!r})") from exc


def load_config() -> BookmarkServiceConfig:
    """환경 변수에서 설정을 읽는다. 잘못된 값이면 RuntimeError 로 즉시 실패한다."""

    return BookmarkServiceConfig(
        content_max_length=_read_positive_int(
            CONTENT_MAX_LENGTH_ENV, DEFAULT_CONTENT_MAX_LENGTH
        ),
        display_timezone=_read_timezone(DISPLAY_TIMEZONE_ENV, DEFAULT_DISPLAY_TIMEZONE),
        port=_read_positive_int(SERVICE_PORT_ENV, DEFAULT_SERVICE_PORT),
    )


@lru_cache(maxsize=1)
def get_config() -> BookmarkServiceConfig:
    """FastAPI DI 및 엔트리포인트에서 사용하는 캐시된 설정."""

    return load_config()
