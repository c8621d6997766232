from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from common.models.user import User
from bookmark_service.app.exceptions import AuthorNotFoundError
from bookmark_service.app.models.bookmark import Bookmark, PopulatedBookmark
from bookmark_service.app.services.bookmarks_service import BookmarksService
from bookmark_service.app.services.users_service import UsersService


def _build_user(username: str) -> User:
    now = datetime.now(timezone.utc)
    return User(
        id=str(ObjectId()),
        username=username,
        date_created=now,
        date_modified=now,
    )


class FakeBookmarkRepository:
    def __init__(self) -> None:
        self.items: dict[str, Bookmark] = {}
        self.delete_all_calls: list[str] = []

    def insert(self, bookmark: Bookmark) -> Bookmark:
        stored = bookmark.model_copy(update={"id": str(ObjectId())})
        self.items[stored.id] = stored
        return stored

    def find_by_id(self, bookmark_id: str) -> Bookmark | None:
        return self.items.get(bookmark_id)

    def list_all(self) -> list[Bookmark]:
        return sorted(
            self.items.values(), key=lambda b: b.date_modified, reverse=True
        )

    def list_by_author(self, author_id: str) -> list[Bookmark]:
        return [b for b in self.list_all() if b.author_id == author_id]

    def update_content(self, bookmark_id: str, content: str) -> Bookmark:
        current = self.items[bookmark_id]
        updated = current.model_copy(
            update={"content": content, "date_modified": datetime.now(timezone.utc)}
        )
        self.items[bookmark_id] = updated
        return updated

    def delete_by_id(self, bookmark_id: str) -> bool:
        return self.items.pop(bookmark_id, None) is not None

    def delete_all_by_author(self, author_id: str) -> int:
        self.delete_all_calls.append(author_id)
        targets = [k for k, b in self.items.items() if b.author_id == author_id]
        for key in targets:
            del self.items[key]
        return len(targets)


class FakeUserRepository:
    def __init__(self, users: list[User]) -> None:
        self.users: dict[str, User] = {u.id: u for u in users}
        self.find_by_ids_calls: list[list[str]] = []

    def find_by_id(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    def find_by_ids(self, user_ids: list[str]) -> dict[str, User]:
        self.find_by_ids_calls.append(list(user_ids))
        return {uid: self.users[uid] for uid in user_ids if uid in self.users}

    def find_by_username(self, username: str) -> User | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def delete_by_id(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None


@dataclass
class BookmarksServiceFixture:
    service: BookmarksService
    bookmark_repo: FakeBookmarkRepository
    user_repo: FakeUserRepository
    alice: User
    bob: User


@pytest.fixture
def fixture() -> BookmarksServiceFixture:
    alice = _build_user("alice")
    bob = _build_user("bob")
    bookmark_repo = FakeBookmarkRepository()
    user_repo = FakeUserRepository([alice, bob])
    service = BookmarksService(bookmark_repo=bookmark_repo, user_repo=user_repo)
    return BookmarksServiceFixture(
        service=service,
        bookmark_repo=bookmark_repo,
        user_repo=user_repo,
        alice=alice,
        bob=bob,
    )


def _seed(repo: FakeBookmarkRepository, author: User, content: str, minutes_ago: int) -> Bookmark:
    at = datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)
    return repo.insert(
        Bookmark(
            author_id=author.id,
            content=content,
            date_created=at,
            date_modified=at,
        )
    )


def test_add_one_sets_equal_dates_and_resolves_author(
    fixture: BookmarksServiceFixture,
) -> None:
    created = fixture.service.add_one(fixture.alice.id, "hello")

    assert created.content == "hello"
    assert created.date_created == created.date_modified
    assert created.author == fixture.alice
    assert created.id in fixture.bookmark_repo.items


def test_add_one_with_resolved_author_skips_author_lookup(
    fixture: BookmarksServiceFixture,
) -> None:
    carol = _build_user("carol")

    created = fixture.service.add_one(carol.id, "hello", author=carol)

    assert created.author == carol
    assert fixture.bookmark_repo.items[created.id].author_id == carol.id


def test_add_one_rejects_mismatched_author(fixture: BookmarksServiceFixture) -> None:
    with pytest.raises(ValueError):
        fixture.service.add_one(fixture.alice.id, "hello", author=fixture.bob)

    assert fixture.bookmark_repo.items == {}


def test_populated_bookmark_requires_persisted_bookmark(
    fixture: BookmarksServiceFixture,
) -> None:
    now = datetime.now(timezone.utc)
    unsaved = Bookmark(
        author_id=fixture.alice.id, content="draft", date_created=now, date_modified=now
    )

    with pytest.raises(ValueError):
        PopulatedBookmark.from_bookmark(unsaved, fixture.alice)


def test_find_one_returns_none_for_unknown_id(
    fixture: BookmarksServiceFixture,
) -> None:
    assert fixture.service.find_one(str(ObjectId())) is None


def test_find_all_is_recent_first_and_populates_in_one_lookup(
    fixture: BookmarksServiceFixture,
) -> None:
    _seed(fixture.bookmark_repo, fixture.alice, "old", minutes_ago=30)
    _seed(fixture.bookmark_repo, fixture.bob, "new", minutes_ago=1)
    _seed(fixture.bookmark_repo, fixture.alice, "middle", minutes_ago=10)

    result = fixture.service.find_all()

    assert [b.content for b in result] == ["new", "middle", "old"]
    assert [b.author.username for b in result] == ["bob", "alice", "alice"]
    assert len(fixture.user_repo.find_by_ids_calls) == 1
    for prev, cur in zip(result, result[1:]):
        assert prev.date_modified >= cur.date_modified


def test_find_all_by_username_returns_only_that_author(
    fixture: BookmarksServiceFixture,
) -> None:
    _seed(fixture.bookmark_repo, fixture.alice, "a1", minutes_ago=5)
    _seed(fixture.bookmark_repo, fixture.bob, "b1", minutes_ago=4)

    result = fixture.service.find_all_by_username("alice")

    assert [b.content for b in result] == ["a1"]
    assert result[0].author.username == "alice"


def test_find_all_by_username_raises_for_unknown_user(
    fixture: BookmarksServiceFixture,
) -> None:
    with pytest.raises(AuthorNotFoundError):
        fixture.service.find_all_by_username("nobody")


def test_update_one_changes_content_and_date_modified_only(
    fixture: BookmarksServiceFixture,
) -> None:
    original = _seed(fixture.bookmark_repo, fixture.alice, "before", minutes_ago=5)

    updated = fixture.service.update_one(original.id, "after")

    assert updated.id == original.id
    assert updated.content == "after"
    assert updated.date_created == original.date_created
    assert updated.date_modified >= original.date_modified


def test_delete_one_reports_whether_removed(
    fixture: BookmarksServiceFixture,
) -> None:
    bookmark = _seed(fixture.bookmark_repo, fixture.alice, "bye", minutes_ago=1)

    assert fixture.service.delete_one(bookmark.id) is True
    assert fixture.service.find_one(bookmark.id) is None
    assert fixture.service.delete_one(bookmark.id) is False


def test_delete_many_removes_only_given_author(
    fixture: BookmarksServiceFixture,
) -> None:
    _seed(fixture.bookmark_repo, fixture.alice, "a1", minutes_ago=3)
    _seed(fixture.bookmark_repo, fixture.alice, "a2", minutes_ago=2)
    _seed(fixture.bookmark_repo, fixture.bob, "b1", minutes_ago=1)

    deleted = fixture.service.delete_many(fixture.alice.id)

    assert deleted == 2
    remaining = fixture.service.find_all()
    assert [b.author.username for b in remaining] == ["bob"]


def test_find_one_raises_when_author_is_missing(
    fixture: BookmarksServiceFixture,
) -> None:
    ghost = _build_user("ghost")
    bookmark = _seed(fixture.bookmark_repo, ghost, "orphan", minutes_ago=1)

    with pytest.raises(AuthorNotFoundError):
        fixture.service.find_one(bookmark.id)


def test_delete_user_cascades_bookmarks(fixture: BookmarksServiceFixture) -> None:
    users_service = UsersService(
        user_repo=fixture.user_repo, bookmarks_service=fixture.service
    )
    _seed(fixture.bookmark_repo, fixture.alice, "a1", minutes_ago=2)
    _seed(fixture.bookmark_repo, fixture.bob, "b1", minutes_ago=1)

    assert users_service.delete_user(fixture.alice.id) is True

    assert fixture.bookmark_repo.delete_all_calls == [fixture.alice.id]
    assert fixture.user_repo.find_by_id(fixture.alice.id) is None
    assert [b.content for b in fixture.bookmark_repo.items.values()] == ["b1"]


def test_delete_user_returns_false_for_unknown_user(
    fixture: BookmarksServiceFixture,
) -> None:
    users_service = UsersService(
        user_repo=fixture.user_repo, bookmarks_service=fixture.service
    )

    assert users_service.delete_user(str(ObjectId())) is False
    assert fixture.bookmark_repo.delete_all_calls == []
