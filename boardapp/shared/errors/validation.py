# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc if part is not None) or "body"


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Collapse pydantic errors into ``{fields, errors}`` for the 422 payload."""
    details: list[dict[str, str]] = []
    for error in exc.errors(include_url=False, include_input=False):
        details.append(
            {
                "field": _field_path(error.get("loc", ())),
                "type": error.get("type", "value_error"),
                "message": error.get("msg", ""),
            }
        )

    return {
        "fields": sorted({detail["field"] for detail in details}),
        "errors": details,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
