# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from boardapp.domain.boards import Board, BoardNotFoundError, BoardRepository, BoardStatus
from boardapp.domain.users import User
from boardapp.shared.logging import logger


class BoardService:
    """CRUD over boards.

    Only ``list_mine`` and ``create`` use the caller. Lookups, deletes and
    status updates address a board purely by id and never check the owner.
    """

    def __init__(self, *, boards: BoardRepository) -> None:
        self._boards = boards

    def list_mine(self, caller: User) -> Sequence[Board]:
        items = self._boards.list_for_user(caller.id)
        logger.debug(f"boards.list_mine: user_id={caller.id} n={len(items)}")
        return items

    def list_all(self) -> Sequence[Board]:
        return self._boards.list_all()

    def get_by_id(self, board_id: int) -> Board:
        board = self._boards.find_by_id(board_id)
        if board is None:
            raise BoardNotFoundError(board_id)
        return board

    def create(self, caller: User, title: str, description: str) -> Board:
        board = Board(
            id=0,
            title=title,
            description=description,
            status=BoardStatus.PUBLIC,
            user_id=caller.id,
            created_at=datetime.now(UTC),
        )
        persisted = self._boards.add(board)
        logger.info(f"boards.create: ok (user_id={caller.id}, board_id={persisted.id})")
        return persisted

    def delete(self, caller: User, board_id: int) -> None:
        affected = self._boards.delete(board_id)
        if affected == 0:
            raise BoardNotFoundError(board_id)
        logger.info(f"boards.delete: ok (user_id={caller.id}, board_id={board_id})")

    def update_status(self, board_id: int, status: BoardStatus) -> Board:
        board = self._boards.update_status(board_id, status)
        if board is None:
            raise BoardNotFoundError(board_id)
        logger.info(f"boards.update_status: ok (board_id={board_id}, status={status.value})")
        return board
