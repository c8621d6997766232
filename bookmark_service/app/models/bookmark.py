from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from common.models.user import User


class Bookmark(BaseModel):
    """유저가 저장한 텍스트 북마크 도메인 모델 (author 는 id 로만 참조)."""

    id: str | None = None
    author_id: str
    content: str
    date_created: datetime
    date_modified: datetime


class PopulatedBookmark(BaseModel):
    """author_id 를 실제 User 로 치환한 북마크.

    응답 포맷터가 author 의 username 을 필요로 하므로 조회 결과는 항상 이 형태로 반환한다.
    """

    id: str
    author: User
    content: str
    date_created: datetime
    date_modified: datetime

    @classmethod
    def from_bookmark(cls, bookmark: Bookmark, author: User) -> "PopulatedBookmark":
        if bookmark.id is None:
            raise ValueError("bookmark must be persisted before it is populated")
        return cls(
            id=bookmark.id,
            author=author,
            content=bookmark.content,
            date_created=bookmark.date_created,
            date_modified=bookmark.date_modified,
        )
