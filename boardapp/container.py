"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from boardapp.application.services.jwt_tokens import JwtTokenService
from boardapp.application.services.password_hashing import WerkzeugPasswordHasher
from boardapp.application.use_cases.boards.board_service import BoardService
from boardapp.application.use_cases.users.login_user import LoginUserUseCase
from boardapp.application.use_cases.users.register_user import RegisterUserUseCase
from boardapp.application.use_cases.users.verify_token import VerifyTokenUseCase
from boardapp.infrastructure.db import SessionLocal
from boardapp.infrastructure.repositories.boards.sqlalchemy_board_repository import (
    SqlAlchemyBoardRepository,
)
from boardapp.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from boardapp.interfaces.http.controllers.auth_controller import AuthController
from boardapp.interfaces.http.controllers.boards_controller import BoardsController
from boardapp.interfaces.http.controllers.misc_controller import MiscController
from boardapp.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self._config.security.password_hash_method,
            salt_length=self._config.security.password_salt_length,
        )

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self._config.jwt_secret,
            algorithm=self._config.jwt.algorithm,
            expires_in=self._config.jwt.expires_in,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def board_repository(self) -> SqlAlchemyBoardRepository:
        return SqlAlchemyBoardRepository(SessionLocal)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def verify_token_use_case(self) -> VerifyTokenUseCase:
        return VerifyTokenUseCase(users=self.user_repository, tokens=self.token_service)

    @cached_property
    def board_service(self) -> BoardService:
        return BoardService(boards=self.board_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def boards_controller(self) -> BoardsController:
        return BoardsController(
            board_service=self.board_service,
            verify_token=self.verify_token_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
