# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Board, BoardStatus
from .exceptions import BoardNotFoundError, InvalidBoardStatusError
from .repositories import BoardRepository

__all__ = [
    "Board",
    "BoardNotFoundError",
    "BoardRepository",
    "BoardStatus",
    "InvalidBoardStatusError",
]
