from __future__ import annotations

import logging

from fastapi import Depends

from common.models.user import User

from ..repositories.interfaces import UserRepositoryInterface
from .bookmarks_service import BookmarksService, get_bookmarks_service, get_user_repository


logger = logging.getLogger(__name__)


class UsersService:
    """유저 조회 및 탈퇴 처리 비즈니스 로직.

    - 유저 도큐먼트 자체는 user 모듈이 관리하고, 여기서는 조회와 탈퇴 시 정리만 한다.
    """

    def __init__(
        self,
        user_repo: UserRepositoryInterface,
        bookmarks_service: BookmarksService,
    ) -> None:
        self._user_repo = user_repo
        self._bookmarks_service = bookmarks_service

    def find_by_id(self, user_id: str) -> User | None:
        return self._user_repo.find_by_id(user_id)

    def find_by_username(self, username: str) -> User | None:
        return self._user_repo.find_by_username(username)

    def delete_user(self, user_id: str) -> bool:
        """유저와 해당 유저의 모든 북마크를 삭제한다.

        - user 가 존재하지 않으면 False 를 반환한다.
        - 존재하는 경우 북마크를 먼저 삭제하고, 이후 유저 도큐먼트를 삭제한다.
        """

        user = self._user_repo.find_by_id(user_id)
        if user is None:
            return False

        # 북마크가 없어도 delete_many 결과가 0 이므로 별도 체크는 하지 않는다.
        self._bookmarks_service.delete_many(user.id)
        deleted = self._user_repo.delete_by_id(user.id)
        if deleted:
            logger.info("user deleted", extra={"user_id": user.id})
        return deleted


def get_users_service(
    user_repo: UserRepositoryInterface = Depends(get_user_repository),
    bookmarks_service: BookmarksService = Depends(get_bookmarks_service),
) -> UsersService:
    """FastAPI DI용 UsersService 팩토리."""

    return UsersService(user_repo=user_repo, bookmarks_service=bookmarks_service)
