from __future__ import annotations

from datetime import datetime, timezone, tzinfo


_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def ordinal_suffix(day: int) -> str:
    """1 -> "st", 2 -> "nd", 11 -> "th" 처럼 영어 서수 접미사를 반환한다."""

    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_display_datetime(value: datetime, tz: tzinfo = timezone.utc) -> str:
    """화면 표시용 날짜 문자열을 만든다.

    예: ``April 5th 2023, 3:45:00 pm``

    - strftime 의 %B/%p 는 로케일에 따라 달라지므로 월 이름과 am/pm 은 직접 만든다.
    - tzinfo 가 없는 값은 UTC 로 간주한 뒤 tz 로 변환한다.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(tz)

    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return (
        f"{_MONTH_NAMES[local.month - 1]} {local.day}{ordinal_suffix(local.day)} "
        f"{local.year}, {hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )
