from __future__ import annotations

from datetime import datetime, timezone

from pymongo import ReturnDocument
from pymongo.database import Database

from common.mongo.types import is_valid_object_id, to_object_id

from .documents.bookmark_document import BookmarkDocument
from .interfaces import BookmarkRepositoryInterface
from ..models.bookmark import Bookmark


# 최근 수정된 북마크가 먼저 오도록 정렬한다. 같은 시각이면 나중에 생성된 _id 가 먼저 온다.
RECENT_FIRST_SORT = [("date_modified", -1), ("_id", -1)]


class BookmarkRepository(BookmarkRepositoryInterface):
    """bookmarks 컬렉션에 대한 MongoDB 접근 레이어."""

    def __init__(self, database: Database) -> None:
        self._db = database
        self._col = database["bookmarks"]

    @staticmethod
    def _from_document(doc: dict) -> Bookmark:
        return BookmarkDocument.model_validate(doc).to_domain()

    def insert(self, bookmark: Bookmark) -> Bookmark:
        payload = BookmarkDocument.from_domain(bookmark).to_mongo_record()
        result = self._col.insert_one(payload)
        payload["_id"] = result.inserted_id
        return self._from_document(payload)

    def find_by_id(self, bookmark_id: str) -> Bookmark | None:
        if not is_valid_object_id(bookmark_id):
            return None
        doc = self._col.find_one({"_id": to_object_id(bookmark_id)})
        if not doc:
            return None
        return self._from_document(doc)

    def list_all(self) -> list[Bookmark]:
        cursor = self._col.find({}).sort(RECENT_FIRST_SORT)
        return [self._from_document(raw) for raw in cursor]

    def list_by_author(self, author_id: str) -> list[Bookmark]:
        cursor = self._col.find({"author_id": to_object_id(author_id)}).sort(
            RECENT_FIRST_SORT
        )
        return [self._from_document(raw) for raw in cursor]

    def update_content(self, bookmark_id: str, content: str) -> Bookmark:
        now = datetime.now(timezone.utc)
        result = self._col.find_one_and_update(
            {"_id": to_object_id(bookmark_id)},
            {"$set": {"content": content, "date_modified": now}},
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            raise RuntimeError(
                f"bookmark not found for update (bookmark_id={bookmark_id})"
            )
        return self._from_document(result)

    def delete_by_id(self, bookmark_id: str) -> bool:
        if not is_valid_object_id(bookmark_id):
            return False
        result = self._col.delete_one({"_id": to_object_id(bookmark_id)})
        return result.deleted_count > 0

    def delete_all_by_author(self, author_id: str) -> int:
        result = self._col.delete_many({"author_id": to_object_id(author_id)})
        return result.deleted_count
