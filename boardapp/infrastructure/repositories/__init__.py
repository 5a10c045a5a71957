# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .boards.sqlalchemy_board_repository import SqlAlchemyBoardRepository
from .users.sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyBoardRepository", "SqlAlchemyUserRepository"]
