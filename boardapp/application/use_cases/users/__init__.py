# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase
from .verify_token import VerifyTokenUseCase, extract_bearer_token

__all__ = [
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "VerifyTokenUseCase",
    "extract_bearer_token",
]
