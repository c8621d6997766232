from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from common.models.user import User

from ..deps import get_session_user
from ..schemas.bookmarks import MessageResponse
from ...services.users_service import UsersService, get_users_service

router = APIRouter()


@router.delete(
    "",
    response_model=MessageResponse,
    summary="로그인 유저 탈퇴 (북마크 일괄 삭제 포함)",
)
async def delete_session_user(
    user: User = Depends(get_session_user),
    service: UsersService = Depends(get_users_service),
) -> MessageResponse:
    deleted = service.delete_user(user.id)
    if not deleted:
        raise HTTPException(status_code=404, detail="user not found")
    return MessageResponse(message="Your account has been deleted successfully.")
