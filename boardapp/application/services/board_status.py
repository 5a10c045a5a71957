# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from boardapp.domain.boards import BoardStatus, InvalidBoardStatusError

STATUS_OPTIONS = frozenset(status.value for status in BoardStatus)


def parse_board_status(value: object) -> BoardStatus:
    """Normalise a client supplied status, rejecting anything outside the enum."""

    if not isinstance(value, str):
        raise InvalidBoardStatusError(value)
    normalized = value.upper()
    if normalized not in STATUS_OPTIONS:
        raise InvalidBoardStatusError(normalized)
    return BoardStatus(normalized)


__all__ = ["STATUS_OPTIONS", "parse_board_status"]
