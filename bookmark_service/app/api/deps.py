"""라우터 앞단에서 동작하는 요청 검증 의존성.

Service 레이어는 검증을 하지 않으므로 존재 여부, 로그인, 작성자 권한, 내용 길이는
모두 여기서 확인한다. 라우트에 선언된 순서대로 실행된다.
"""

from __future__ import annotations

from fastapi import Body, Depends, Header, HTTPException, Path, Query

from common.models.user import User

from ..config import BookmarkServiceConfig, get_config
from ..models.bookmark import PopulatedBookmark
from ..services.bookmarks_service import BookmarksService, get_bookmarks_service
from ..services.users_service import UsersService, get_users_service
from .schemas.bookmarks import BookmarkContentRequest


NOT_LOGGED_IN_DETAIL = "You must be logged in to complete this action."


def get_session_user(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    service: UsersService = Depends(get_users_service),
) -> User:
    """게이트웨이가 세션에서 꺼내 전달한 로그인 유저를 조회해 반환한다.

    탈퇴 후에도 게이트웨이 세션이 같은 id 를 넘길 수 있으므로, 헤더가 비었거나
    ObjectId 가 아니거나 유저가 없으면 모두 로그인하지 않은 것으로 보고 403 을 반환한다.
    """

    user_id = (x_user_id or "").strip()
    user = service.find_by_id(user_id) if user_id else None
    if user is None:
        raise HTTPException(status_code=403, detail=NOT_LOGGED_IN_DETAIL)
    return user


def ensure_bookmark_exists(
    bookmark_id: str = Path(..., description="북마크 id"),
    service: BookmarksService = Depends(get_bookmarks_service),
) -> PopulatedBookmark:
    bookmark = service.find_one(bookmark_id)
    if bookmark is None:
        raise HTTPException(
            status_code=404,
            detail=f"Bookmark with bookmark ID {bookmark_id} does not exist.",
        )
    return bookmark


def ensure_bookmark_modifier(
    user: User = Depends(get_session_user),
    bookmark: PopulatedBookmark = Depends(ensure_bookmark_exists),
) -> PopulatedBookmark:
    """로그인 유저가 북마크 작성자인지 확인한다."""

    if bookmark.author.id != user.id:
        raise HTTPException(
            status_code=403,
            detail="Cannot modify other users' bookmarks.",
        )
    return bookmark


def get_valid_content(
    body: BookmarkContentRequest | None = Body(default=None),
    config: BookmarkServiceConfig = Depends(get_config),
) -> str:
    """바디 누락/문자열이 아닌 값/빈 내용은 400, 최대 길이 초과는 413 으로 거절한다."""

    content = body.content if body is not None else None
    if not isinstance(content, str) or not content.strip():
        raise HTTPException(
            status_code=400,
            detail="Bookmark content must be at least one character long.",
        )
    if len(content) > config.content_max_length:
        raise HTTPException(
            status_code=413,
            detail=(
                "Bookmark content must be no more than "
                f"{config.content_max_length} characters."
            ),
        )
    return content


def ensure_author_exists(
    author: str | None = Query(default=None, description="작성자 username"),
    service: UsersService = Depends(get_users_service),
) -> str | None:
    """author 쿼리가 주어진 경우에만 해당 유저가 존재하는지 확인한다."""

    if author is None:
        return None
    if not author.strip():
        raise HTTPException(
            status_code=400,
            detail="Provided author username must be nonempty.",
        )
    if service.find_by_username(author) is None:
        raise HTTPException(
            status_code=404,
            detail=f"A user with username {author} does not exist.",
        )
    return author
