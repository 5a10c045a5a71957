from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from boardapp.application.use_cases.boards.board_service import BoardService
from boardapp.domain.boards import Board, BoardNotFoundError, BoardRepository, BoardStatus
from boardapp.domain.users import User


class InMemoryBoardRepository(BoardRepository):
    def __init__(self) -> None:
        self._rows: dict[int, Board] = {}
        self._seq = 1

    def list_for_user(self, user_id: int) -> Sequence[Board]:
        return [b for b in self._rows.values() if b.user_id == user_id]

    def list_all(self) -> Sequence[Board]:
        return list(self._rows.values())

    def find_by_id(self, board_id: int) -> Board | None:
        return self._rows.get(board_id)

    def add(self, board: Board) -> Board:
        stored = replace(board, id=self._seq)
        self._rows[stored.id] = stored
        self._seq += 1
        return stored

    def delete(self, board_id: int) -> int:
        return 1 if self._rows.pop(board_id, None) else 0

    def update_status(self, board_id: int, status: BoardStatus) -> Board | None:
        board = self._rows.get(board_id)
        if board is None:
            return None
        self._rows[board_id] = board.with_status(status)
        return self._rows[board_id]


def _user(user_id: int, username: str) -> User:
    return User(id=user_id, username=username, password_hash="h", created_at=datetime.now(UTC))


@pytest.fixture()
def repo() -> InMemoryBoardRepository:
    return InMemoryBoardRepository()


@pytest.fixture()
def service(repo: InMemoryBoardRepository) -> BoardService:
    return BoardService(boards=repo)


@pytest.fixture()
def alice() -> User:
    return _user(1, "alice")


@pytest.fixture()
def bob() -> User:
    return _user(2, "bob")


def test_create_defaults_to_public_and_stamps_owner(service: BoardService, alice: User) -> None:
    board = service.create(alice, "t1", "d1")

    assert board.id == 1
    assert board.status is BoardStatus.PUBLIC
    assert board.user_id == alice.id


def test_list_mine_is_scoped_to_caller(service: BoardService, alice: User, bob: User) -> None:
    mine = service.create(alice, "t1", "d1")
    theirs = service.create(bob, "t2", "d2")

    assert service.list_mine(alice) == [mine]
    assert service.list_mine(bob) == [theirs]


def test_list_all_ignores_owner(service: BoardService, alice: User, bob: User) -> None:
    service.create(alice, "t1", "d1")
    service.create(bob, "t2", "d2")

    assert {b.user_id for b in service.list_all()} == {alice.id, bob.id}


def test_get_by_id_missing_raises(service: BoardService) -> None:
    with pytest.raises(BoardNotFoundError) as exc_info:
        service.get_by_id(42)

    assert exc_info.value.status == 404
    assert exc_info.value.to_dict() == {"error": "board_not_found", "context": {"board_id": 42}}


def test_delete_twice_reports_not_found(service: BoardService, alice: User) -> None:
    board = service.create(alice, "t1", "d1")

    service.delete(alice, board.id)
    with pytest.raises(BoardNotFoundError):
        service.delete(alice, board.id)


def test_update_status_persists(service: BoardService, alice: User) -> None:
    board = service.create(alice, "t1", "d1")

    updated = service.update_status(board.id, BoardStatus.PRIVATE)

    assert updated.status is BoardStatus.PRIVATE
    assert service.get_by_id(board.id).status is BoardStatus.PRIVATE


def test_update_status_missing_raises(service: BoardService) -> None:
    with pytest.raises(BoardNotFoundError):
        service.update_status(7, BoardStatus.PUBLIC)


def test_get_and_delete_do_not_check_owner(service: BoardService, alice: User, bob: User) -> None:
    # Only list_mine is owner scoped; lookups and deletes address boards by id.
    board = service.create(alice, "t1", "d1")

    assert service.get_by_id(board.id).user_id == alice.id
    service.delete(bob, board.id)

    assert service.list_mine(alice) == []


def test_board_rejects_blank_title() -> None:
    with pytest.raises(ValueError):
        Board(id=1, title="  ", description="d", status=BoardStatus.PUBLIC, user_id=1)


def test_board_coerces_status_value() -> None:
    board = Board(id=1, title="t", description="d", status="PRIVATE", user_id=1)  # type: ignore[arg-type]

    assert board.status is BoardStatus.PRIVATE
    assert board.with_status(BoardStatus.PUBLIC).status is BoardStatus.PUBLIC
