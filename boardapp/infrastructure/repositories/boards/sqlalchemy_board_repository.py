# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import delete
from sqlalchemy.orm import Session

from boardapp.domain.boards.entities import Board as DomainBoard
from boardapp.domain.boards.entities import BoardStatus
from boardapp.domain.boards.repositories import BoardRepository
from boardapp.infrastructure.db.models import Board
from boardapp.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Board) -> DomainBoard:
    return DomainBoard(
        id=row.id,
        title=row.title,
        description=row.description,
        status=row.status,
        user_id=row.user_id,
        created_at=row.created_at,
    )


class SqlAlchemyBoardRepository(BoardRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_for_user(self, user_id: int) -> Sequence[DomainBoard]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Board)
                .filter(Board.user_id == user_id)
                .order_by(Board.id.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def list_all(self) -> Sequence[DomainBoard]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(Board).order_by(Board.id.asc()).all()
            return [_to_domain(row) for row in rows]

    def find_by_id(self, board_id: int) -> DomainBoard | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Board, board_id)
            return _to_domain(row) if row else None

    def add(self, board: DomainBoard) -> DomainBoard:
        with unit_of_work_scope(self._session_factory) as session:
            row = Board(
                title=board.title,
                description=board.description,
                status=board.status,
                user_id=board.user_id,
            )
            if board.created_at is not None:
                row.created_at = board.created_at
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def delete(self, board_id: int) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(delete(Board).where(Board.id == board_id))
            return int(result.rowcount or 0)

    def update_status(self, board_id: int, status: BoardStatus) -> DomainBoard | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Board, board_id)
            if row is None:
                return None
            row.status = status
            session.flush()
            return _to_domain(row)
