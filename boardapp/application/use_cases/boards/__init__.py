# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .board_service import BoardService

__all__ = ["BoardService"]
