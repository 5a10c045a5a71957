# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from boardapp.shared.errors.base import AppError

from .entities import BoardStatus


class BoardNotFoundError(AppError):
    def __init__(self, board_id: int) -> None:
        super().__init__(
            code="board_not_found",
            status=HTTPStatus.NOT_FOUND,
            context={"board_id": board_id},
        )


class InvalidBoardStatusError(AppError):
    def __init__(self, value: object) -> None:
        super().__init__(
            code="invalid_board_status",
            status=HTTPStatus.BAD_REQUEST,
            context={
                "status": str(value),
                "allowed": [status.value for status in BoardStatus],
            },
        )
