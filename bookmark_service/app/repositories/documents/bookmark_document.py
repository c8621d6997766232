from __future__ import annotations

from common.mongo.types import BaseDocument, PyObjectId, from_object_id
from ...models.bookmark import Bookmark


class BookmarkDocument(BaseDocument):
    """MongoDB bookmarks 컬렉션 도큐먼트 모델."""

    author_id: PyObjectId
    content: str

    @classmethod
    def from_domain(cls, bookmark: Bookmark) -> "BookmarkDocument":
        data = {
            "_id": bookmark.id,
            "author_id": bookmark.author_id,
            "content": bookmark.content,
            "date_created": bookmark.date_created,
            "date_modified": bookmark.date_modified,
        }
        if data["_id"] is None:
            # insert 시에는 Mongo 가 ObjectId 를 생성하도록 비워 둔다.
            del data["_id"]
        return cls.model_validate(data)

    def to_domain(self) -> Bookmark:
        return Bookmark(
            id=from_object_id(self.id),
            author_id=str(self.author_id),
            content=self.content,
            date_created=self.date_created,
            date_modified=self.date_modified,
        )
