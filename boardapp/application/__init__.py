# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import JwtTokenService, WerkzeugPasswordHasher, parse_board_status
from .use_cases.boards import BoardService
from .use_cases.users import (
    LoginUserUseCase,
    RegisterUserUseCase,
    VerifyTokenUseCase,
    extract_bearer_token,
)

__all__ = [
    "BoardService",
    "JwtTokenService",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "VerifyTokenUseCase",
    "WerkzeugPasswordHasher",
    "extract_bearer_token",
    "parse_board_status",
]
