from __future__ import annotations

from typing import Protocol

from common.models.user import User
from ..models.bookmark import Bookmark


class UserRepositoryInterface(Protocol):
    """북마크 서비스가 users 컬렉션에 요구하는 최소한의 계약.

    Service 레이어는 이 인터페이스에만 의존하고, 구체 구현(Mongo 등)은 몰라도 된다.
    """

    def find_by_id(self, user_id: str) -> User | None:  # pragma: no cover - Protocol
        ...

    def find_by_ids(
        self, user_ids: list[str]
    ) -> dict[str, User]:  # pragma: no cover - Protocol
        """존재하는 유저만 {user_id: User} 로 반환한다."""
        ...

    def find_by_username(
        self, username: str
    ) -> User | None:  # pragma: no cover - Protocol
        ...

    def delete_by_id(self, user_id: str) -> bool:  # pragma: no cover - Protocol
        ...


class BookmarkRepositoryInterface(Protocol):
    """BookmarkRepository가 따라야 할 최소한의 계약.

    - 모든 메서드는 단일 쿼리로 동작하며, 입력 검증(존재/권한/내용)은 호출자가 마친 상태라고 가정한다.
    - 반환되는 Bookmark 는 author_id 만 가지고 있다. author 치환은 Service 가 담당한다.
    """

    def insert(self, bookmark: Bookmark) -> Bookmark:  # pragma: no cover - Protocol
        ...

    def find_by_id(
        self, bookmark_id: str
    ) -> Bookmark | None:  # pragma: no cover - Protocol
        ...

    def list_all(self) -> list[Bookmark]:  # pragma: no cover - Protocol
        """date_modified 내림차순으로 모든 북마크를 반환한다."""
        ...

    def list_by_author(
        self, author_id: str
    ) -> list[Bookmark]:  # pragma: no cover - Protocol
        ...

    def update_content(
        self, bookmark_id: str, content: str
    ) -> Bookmark:  # pragma: no cover - Protocol
        ...

    def delete_by_id(self, bookmark_id: str) -> bool:  # pragma: no cover - Protocol
        ...

    def delete_all_by_author(
        self, author_id: str
    ) -> int:  # pragma: no cover - Protocol
        """주어진 author 의 모든 북마크를 삭제하고 삭제된 개수를 반환한다."""
        ...
