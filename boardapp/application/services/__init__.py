# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .board_status import parse_board_status
from .jwt_tokens import JwtTokenService
from .password_hashing import WerkzeugPasswordHasher

__all__ = ["JwtTokenService", "WerkzeugPasswordHasher", "parse_board_status"]
