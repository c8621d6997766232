from __future__ import annotations

from fastapi import APIRouter, Depends

from common.models.user import User

from ..deps import (
    ensure_author_exists,
    ensure_bookmark_modifier,
    get_session_user,
    get_valid_content,
)
from ..schemas.bookmarks import (
    BookmarkMutationResponse,
    BookmarkResponse,
    MessageResponse,
)
from ...config import BookmarkServiceConfig, get_config
from ...models.bookmark import PopulatedBookmark
from ...services.bookmarks_service import BookmarksService, get_bookmarks_service


router = APIRouter()


@router.get(
    "",
    response_model=list[BookmarkResponse],
    summary="북마크 목록 조회 (author 지정 시 작성자별)",
)
async def list_bookmarks(
    author: str | None = Depends(ensure_author_exists),
    service: BookmarksService = Depends(get_bookmarks_service),
    config: BookmarkServiceConfig = Depends(get_config),
) -> list[BookmarkResponse]:
    if author is None:
        bookmarks = service.find_all()
    else:
        bookmarks = service.find_all_by_username(author)
    return [
        BookmarkResponse.from_domain(b, config.display_timezone) for b in bookmarks
    ]


@router.post(
    "",
    status_code=201,
    response_model=BookmarkMutationResponse,
    summary="북마크 생성",
)
async def create_bookmark(
    user: User = Depends(get_session_user),
    content: str = Depends(get_valid_content),
    service: BookmarksService = Depends(get_bookmarks_service),
    config: BookmarkServiceConfig = Depends(get_config),
) -> BookmarkMutationResponse:
    bookmark = service.add_one(author_id=user.id, content=content, author=user)
    return BookmarkMutationResponse(
        message="Your bookmark was created successfully.",
        bookmark=BookmarkResponse.from_domain(bookmark, config.display_timezone),
    )


@router.put(
    "/{bookmark_id}",
    response_model=BookmarkMutationResponse,
    summary="북마크 수정 (작성자 전용)",
)
async def update_bookmark(
    bookmark: PopulatedBookmark = Depends(ensure_bookmark_modifier),
    content: str = Depends(get_valid_content),
    service: BookmarksService = Depends(get_bookmarks_service),
    config: BookmarkServiceConfig = Depends(get_config),
) -> BookmarkMutationResponse:
    updated = service.update_one(bookmark.id, content)
    return BookmarkMutationResponse(
        message="Your bookmark was updated successfully.",
        bookmark=BookmarkResponse.from_domain(updated, config.display_timezone),
    )


@router.delete(
    "/{bookmark_id}",
    response_model=MessageResponse,
    summary="북마크 삭제 (작성자 전용)",
)
async def delete_bookmark(
    bookmark: PopulatedBookmark = Depends(ensure_bookmark_modifier),
    service: BookmarksService = Depends(get_bookmarks_service),
) -> MessageResponse:
    service.delete_one(bookmark.id)
    return MessageResponse(message="Your bookmark was deleted successfully.")
