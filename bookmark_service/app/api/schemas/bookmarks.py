from __future__ import annotations

from datetime import timezone, tzinfo
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from common.types.datetime import format_display_datetime
from ...models.bookmark import PopulatedBookmark


class BookmarkContentRequest(BaseModel):
    # 누락/빈 값/문자열이 아닌 값은 422 가 아니라 400 이어야 하므로 검증은 의존성에서 한다.
    content: Any = None


class BookmarkResponse(BaseModel):
    """프론트엔드로 내려가는 북마크 응답.

    필드를 추가하면 from_domain 도 함께 수정해야 한다.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    author: str
    date_created: str = Field(alias="dateCreated")
    content: str
    date_modified: str = Field(alias="dateModified")

    @classmethod
    def from_domain(
        cls, bookmark: PopulatedBookmark, tz: tzinfo = timezone.utc
    ) -> "BookmarkResponse":
        return cls(
            id=bookmark.id,
            author=bookmark.author.username,
            date_created=format_display_datetime(bookmark.date_created, tz),
            content=bookmark.content,
            date_modified=format_display_datetime(bookmark.date_modified, tz),
        )


class BookmarkMutationResponse(BaseModel):
    message: str
    bookmark: BookmarkResponse


class MessageResponse(BaseModel):
    message: str
