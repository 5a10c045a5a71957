# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Board entities owned by a single user."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from boardapp.domain.exceptions import InvariantViolation


class BoardStatus(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


@dataclass(slots=True, frozen=True)
class Board:
    """A post on the board; visibility is controlled by ``status``."""

    id: int
    title: str
    description: str
    status: BoardStatus
    user_id: int
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        for fld in ("title", "description"):
            if not (getattr(self, fld) or "").strip():
                raise InvariantViolation(f"{fld} must not be empty", field=fld)
        object.__setattr__(self, "status", BoardStatus(self.status))

    def with_status(self, status: BoardStatus) -> Board:
        return replace(self, status=status)
