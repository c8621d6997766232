from __future__ import annotations


class AuthorNotFoundError(LookupError):
    """username 또는 author_id 에 해당하는 유저가 없을 때 발생한다."""

    def __init__(self, *, username: str | None = None, author_id: str | None = None) -> None:
        self.username = username
        self.author_id = author_id
        if username is not None:
            message = f"author not found (username={username})"
        else:
            message = f"author not found (author_id={author_id})"
        super().__init__(message)
