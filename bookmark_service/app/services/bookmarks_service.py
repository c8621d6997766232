from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Depends
from pymongo.database import Database

from common.models.user import User
from common.mongo.client import get_database

from ..exceptions import AuthorNotFoundError
from ..models.bookmark import Bookmark, PopulatedBookmark
from ..repositories.bookmark_repository import BookmarkRepository
from ..repositories.interfaces import (
    BookmarkRepositoryInterface,
    UserRepositoryInterface,
)
from ..repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)


class BookmarksService:
    """북마크 CRUD 비즈니스 로직.

    - Repository 인터페이스에만 의존하고, Mongo 세부 구현은 알지 않는다.
    - 존재 여부/작성자 권한/내용 검증은 API 레이어의 의존성에서 끝난 상태라고 가정한다.
    - 조회 결과는 항상 author 를 User 로 치환한 PopulatedBookmark 로 반환한다.
    """

    def __init__(
        self,
        bookmark_repo: BookmarkRepositoryInterface,
        user_repo: UserRepositoryInterface,
    ) -> None:
        self._bookmark_repo = bookmark_repo
        self._user_repo = user_repo

    def add_one(
        self, author_id: str, content: str, author: User | None = None
    ) -> PopulatedBookmark:
        """새 북마크를 저장한다. date_created 와 date_modified 는 같은 시각으로 시작한다.

        author 를 넘기면 저장 후 author 재조회를 생략한다.
        """

        if author is not None and author.id != author_id:
            raise ValueError(
                f"author does not match author_id (author_id={author_id})"
            )

        now = datetime.now(timezone.utc)
        created = self._bookmark_repo.insert(
            Bookmark(
                author_id=author_id,
                content=content,
                date_created=now,
                date_modified=now,
            )
        )
        logger.info(
            "bookmark created",
            extra={"bookmark_id": created.id, "author_id": author_id},
        )
        if author is not None:
            return PopulatedBookmark.from_bookmark(created, author)
        return self._populate_one(created)

    def find_one(self, bookmark_id: str) -> PopulatedBookmark | None:
        bookmark = self._bookmark_repo.find_by_id(bookmark_id)
        if bookmark is None:
            return None
        return self._populate_one(bookmark)

    def find_all(self) -> list[PopulatedBookmark]:
        """모든 북마크를 최근 수정 순으로 반환한다."""

        return self._populate_many(self._bookmark_repo.list_all())

    def find_all_by_username(self, username: str) -> list[PopulatedBookmark]:
        """username 의 유저가 작성한 북마크 목록을 반환한다.

        유저가 없으면 AuthorNotFoundError 를 발생시킨다.
        """

        author = self._user_repo.find_by_username(username)
        if author is None:
            raise AuthorNotFoundError(username=username)

        bookmarks = self._bookmark_repo.list_by_author(author.id)
        return [PopulatedBookmark.from_bookmark(b, author) for b in bookmarks]

    def update_one(self, bookmark_id: str, content: str) -> PopulatedBookmark:
        """content 를 교체하고 date_modified 를 현재 시각으로 갱신한다."""

        updated = self._bookmark_repo.update_content(bookmark_id, content)
        logger.info("bookmark updated", extra={"bookmark_id": bookmark_id})
        return self._populate_one(updated)

    def delete_one(self, bookmark_id: str) -> bool:
        """삭제된 경우 True, 존재하지 않았으면 False 를 반환한다."""

        deleted = self._bookmark_repo.delete_by_id(bookmark_id)
        if deleted:
            logger.info("bookmark deleted", extra={"bookmark_id": bookmark_id})
        return deleted

    def delete_many(self, author_id: str) -> int:
        """author 의 모든 북마크를 삭제한다 (회원 탈퇴 시 cascade 용)."""

        count = self._bookmark_repo.delete_all_by_author(author_id)
        logger.info(
            "bookmarks deleted by author",
            extra={"author_id": author_id, "count": count},
        )
        return count

    def _populate_one(self, bookmark: Bookmark) -> PopulatedBookmark:
        author = self._user_repo.find_by_id(bookmark.author_id)
        if author is None:
            raise AuthorNotFoundError(author_id=bookmark.author_id)
        return PopulatedBookmark.from_bookmark(bookmark, author)

    def _populate_many(self, bookmarks: list[Bookmark]) -> list[PopulatedBookmark]:
        # author 를 한 번의 $in 쿼리로 모아서 조회한다.
        authors = self._user_repo.find_by_ids([b.author_id for b in bookmarks])

        populated: list[PopulatedBookmark] = []
        for bookmark in bookmarks:
            author = authors.get(bookmark.author_id)
            if author is None:
                raise AuthorNotFoundError(author_id=bookmark.author_id)
            populated.append(PopulatedBookmark.from_bookmark(bookmark, author))
        return populated


def get_bookmark_repository(
    db: Database = Depends(get_database),
) -> BookmarkRepositoryInterface:
    """FastAPI DI용 BookmarkRepository 팩토리."""

    return BookmarkRepository(db)


def get_user_repository(
    db: Database = Depends(get_database),
) -> UserRepositoryInterface:
    """FastAPI DI용 UserRepository 팩토리."""

    return UserRepository(db)


def get_bookmarks_service(
    bookmark_repo: BookmarkRepositoryInterface = Depends(get_bookmark_repository),
    user_repo: UserRepositoryInterface = Depends(get_user_repository),
) -> BookmarksService:
    """FastAPI DI용 BookmarksService 팩토리."""

    return BookmarksService(bookmark_repo=bookmark_repo, user_repo=user_repo)
