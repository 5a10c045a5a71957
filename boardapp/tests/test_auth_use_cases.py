from __future__ import annotations

from datetime import UTC, datetime

import pytest

from boardapp.application.services.jwt_tokens import JwtTokenService
from boardapp.application.use_cases.users.login_user import LoginUserUseCase
from boardapp.application.use_cases.users.register_user import RegisterUserUseCase
from boardapp.application.use_cases.users.verify_token import (
    VerifyTokenUseCase,
    extract_bearer_token,
)
from boardapp.domain.users.entities import User
from boardapp.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from boardapp.domain.users.repositories import PasswordHasher, UserRepository
from boardapp.shared.errors import UnauthorizedError

SECRET = "unit-test-secret-key-that-is-long-enough"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, user: User) -> User:
        new_user = User(
            id=self._seq,
            username=user.username,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.username] = new_user
        return new_user

    def remove(self, username: str) -> None:
        self._users.pop(username, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET, expires_in=3600)


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository, tokens: JwtTokenService) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


@pytest.fixture()
def verify(users: InMemoryUserRepository, tokens: JwtTokenService) -> VerifyTokenUseCase:
    return VerifyTokenUseCase(users=users, tokens=tokens)


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user = register.execute("alice", "pw1")

    assert user.id == 1
    assert user.username == "alice"
    stored = users.find_by_username("alice")
    assert stored is not None
    assert stored.password_hash == "hashed:pw1"
    assert stored.password_hash != "pw1"


def test_register_user_duplicate_raises(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    register.execute("alice", "pw1")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        register.execute("alice", "other")

    assert exc_info.value.status == 409
    assert len(users._users) == 1


def test_register_then_login_resolves_same_user(
    register: RegisterUserUseCase,
    login: LoginUserUseCase,
    verify: VerifyTokenUseCase,
) -> None:
    created = register.execute("alice", "pw1")

    token = login.execute("alice", "pw1")

    assert verify.execute(token) == created
    assert verify.from_header(f"Bearer {token}") == created


def test_login_wrong_password_and_unknown_user_are_indistinguishable(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "pw1")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("mallory", "pw1")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()
    assert wrong_password.value.status == 401


def test_verify_rejects_token_of_removed_user(
    register: RegisterUserUseCase,
    login: LoginUserUseCase,
    verify: VerifyTokenUseCase,
    users: InMemoryUserRepository,
) -> None:
    register.execute("alice", "pw1")
    token = login.execute("alice", "pw1")
    users.remove("alice")

    with pytest.raises(UnauthorizedError) as exc_info:
        verify.execute(token)

    assert exc_info.value.code == "unauthorized"


def test_verify_rejects_token_signed_with_other_secret(
    register: RegisterUserUseCase, verify: VerifyTokenUseCase
) -> None:
    register.execute("alice", "pw1")
    forged = JwtTokenService(secret="another-secret-key-that-is-long-enough").issue("alice")

    with pytest.raises(UnauthorizedError) as exc_info:
        verify.execute(forged)

    assert exc_info.value.code == "invalid_token"


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer ", "Basic abc.def.ghi", "Token abc", "Bearer a b"],
)
def test_extract_bearer_token_rejects_malformed_headers(header: str | None) -> None:
    with pytest.raises(UnauthorizedError):
        extract_bearer_token(header)


@pytest.mark.parametrize("scheme", ["Bearer", "bearer", "BEARER"])
def test_extract_bearer_token_accepts_scheme_case_insensitively(scheme: str) -> None:
    assert extract_bearer_token(f"{scheme} abc.def.ghi") == "abc.def.ghi"


def test_user_entity_requires_username() -> None:
    with pytest.raises(ValueError):
        User(id=1, username="", password_hash="x", created_at=datetime.now(UTC))
