from __future__ import annotations

from common.models.user import User
from common.mongo.types import BaseDocument, from_object_id


class UserDocument(BaseDocument):
    """MongoDB users 컬렉션 도큐먼트 모델.

    users 컬렉션에는 비밀번호 등 다른 필드도 있지만, 북마크 서비스는 username 만 읽는다.
    """

    username: str

    def to_domain(self) -> User:
        user_id = from_object_id(self.id)
        assert user_id is not None  # 저장된 도큐먼트에는 항상 _id 가 있다.
        return User(
            id=user_id,
            username=self.username,
            date_created=self.date_created,
            date_modified=self.date_modified,
        )
