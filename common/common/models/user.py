from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class User(BaseModel):
    """유저 도메인 모델.

    - Mongo users 컬렉션과 1:1로 매핑되는 공용 모델이다.
    - 유저 생성/수정은 user 모듈이 담당하고, 북마크 서비스는 조회와 탈퇴 시 삭제만 한다.
    """

    id: str
    username: str
    date_created: datetime
    date_modified: datetime
