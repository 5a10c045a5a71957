from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9]+$")


class CredentialsRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=3, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not _USERNAME_RE.match(value):
            raise PydanticCustomError(
                "username_invalid_chars",
                "Username must contain only ASCII letters and digits",
                {"pattern": _USERNAME_RE.pattern},
            )
        return value


class RegisterRequestDTO(CredentialsRequestDTO):
    pass


class LoginRequestDTO(BaseModel):
    # Unknown or policy-violating usernames fall through to invalid_credentials.
    username: str = Field(min_length=1, max_length=256)
    password: str = Field(min_length=1, max_length=256)


class UserSummaryDTO(BaseModel):
    id: int
    username: str


class AccessTokenDTO(BaseModel):
    access_token: str = Field(serialization_alias="accessToken")

    model_config = ConfigDict(populate_by_name=True)
