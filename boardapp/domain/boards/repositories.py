# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Board, BoardStatus


class BoardRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[Board]: ...
    def list_all(self) -> Sequence[Board]: ...
    def find_by_id(self, board_id: int) -> Board | None: ...
    def add(self, board: Board) -> Board: ...
    def delete(self, board_id: int) -> int: ...
    def update_status(self, board_id: int, status: BoardStatus) -> Board | None: ...
