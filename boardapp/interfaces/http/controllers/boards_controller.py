# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from boardapp.application.services.board_status import parse_board_status
from boardapp.application.use_cases.boards.board_service import BoardService
from boardapp.application.use_cases.users.verify_token import VerifyTokenUseCase
from boardapp.domain.users.entities import User
from boardapp.interfaces.http.auth import auth_required
from boardapp.interfaces.http.dto.boards import (
    BoardDTO,
    CreateBoardRequestDTO,
    UpdateBoardStatusRequestDTO,
)
from boardapp.shared.errors.validation import raise_validation_error
from boardapp.shared.logging import logger

# Largest id the database integer column can hold; larger ids never match a route.
_BOARD_ID = "<int(max=9223372036854775807):board_id>"


def _serialize(boards) -> list[dict]:
    return [BoardDTO.from_entity(board).model_dump() for board in boards]


class BoardsController:
    def __init__(
        self,
        *,
        board_service: BoardService,
        verify_token: VerifyTokenUseCase,
    ) -> None:
        self._boards = board_service
        self._verify_token = verify_token

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("boards", __name__, url_prefix="/api/boards")
        bp.add_url_rule("", view_func=self.list_mine, methods=["GET"])
        bp.add_url_rule("/all", view_func=self.list_all, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule(f"/{_BOARD_ID}", view_func=self.get_by_id, methods=["GET"])
        bp.add_url_rule(f"/{_BOARD_ID}", view_func=self.delete, methods=["DELETE"])
        bp.add_url_rule(
            f"/{_BOARD_ID}/status",
            view_func=self.update_status,
            methods=["PATCH"],
        )
        return bp

    @auth_required
    def list_mine(self, caller: User) -> Response:
        t0 = perf_counter()
        items = self._boards.list_mine(caller)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"boards.list: ok (user_id={caller.id}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify(_serialize(items))

    @auth_required
    def list_all(self, caller: User) -> Response:
        items = self._boards.list_all()
        logger.info(f"boards.list_all: ok (user_id={caller.id}, n={len(items)})")
        return jsonify(_serialize(items))

    @auth_required
    def create(self, caller: User) -> tuple[Response, int]:
        try:
            dto = CreateBoardRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        board = self._boards.create(caller, dto.title, dto.description)
        return jsonify(BoardDTO.from_entity(board).model_dump()), 201

    @auth_required
    def get_by_id(self, board_id: int, caller: User) -> Response:
        board = self._boards.get_by_id(board_id)
        logger.debug(f"boards.get: ok (user_id={caller.id}, board_id={board_id})")
        return jsonify(BoardDTO.from_entity(board).model_dump())

    @auth_required
    def delete(self, board_id: int, caller: User) -> Response:
        self._boards.delete(caller, board_id)
        return jsonify({"ok": True})

    @auth_required
    def update_status(self, board_id: int, caller: User) -> Response:
        try:
            dto = UpdateBoardStatusRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        status = parse_board_status(dto.status)
        board = self._boards.update_status(board_id, status)
        logger.debug(f"boards.update_status: by user_id={caller.id}")
        return jsonify(BoardDTO.from_entity(board).model_dump())
