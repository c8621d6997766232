from __future__ import annotations

from pymongo.database import Database

from common.models.user import User
from common.mongo.types import is_valid_object_id, to_object_id

from .documents.user_document import UserDocument
from .interfaces import UserRepositoryInterface


class UserRepository(UserRepositoryInterface):
    """users 컬렉션에 대한 MongoDB 접근 레이어 (북마크 서비스에서 필요한 조회/삭제만)."""

    def __init__(self, database: Database) -> None:
        self._db = database
        self._col = database["users"]

    @staticmethod
    def _from_document(doc: dict) -> User:
        document = UserDocument.model_validate(doc)
        return document.to_domain()

    def find_by_id(self, user_id: str) -> User | None:
        if not is_valid_object_id(user_id):
            return None
        doc = self._col.find_one({"_id": to_object_id(user_id)})
        if not doc:
            return None
        return self._from_document(doc)

    def find_by_ids(self, user_ids: list[str]) -> dict[str, User]:
        object_ids = [to_object_id(v) for v in set(user_ids) if is_valid_object_id(v)]
        if not object_ids:
            return {}

        users: dict[str, User] = {}
        for raw in self._col.find({"_id": {"$in": object_ids}}):
            user = self._from_document(raw)
            users[user.id] = user
        return users

    def find_by_username(self, username: str) -> User | None:
        doc = self._col.find_one({"username": username})
        if not doc:
            return None
        return self._from_document(doc)

    def delete_by_id(self, user_id: str) -> bool:
        """_id 기준으로 유저 도큐먼트를 삭제한다.

        - 삭제된 도큐먼트가 있으면 True, 없으면 False 를 반환한다.
        """

        if not is_valid_object_id(user_id):
            return False
        result = self._col.delete_one({"_id": to_object_id(user_id)})
        return result.deleted_count > 0
