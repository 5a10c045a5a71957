from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from boardapp.domain.boards import Board


class CreateBoardRequestDTO(BaseModel):
    title: str = Field(min_length=1, max_length=256)
    description: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class UpdateBoardStatusRequestDTO(BaseModel):
    # Checked by parse_board_status; non-strings and unknown values are a 400.
    status: Any


class BoardDTO(BaseModel):
    id: int
    title: str
    description: str
    status: str
    user_id: int

    @classmethod
    def from_entity(cls, board: Board) -> BoardDTO:
        return cls(
            id=board.id,
            title=board.title,
            description=board.description,
            status=board.status.value,
            user_id=board.user_id,
        )
