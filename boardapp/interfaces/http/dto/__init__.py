from .auth import AccessTokenDTO, LoginRequestDTO, RegisterRequestDTO, UserSummaryDTO
from .boards import BoardDTO, CreateBoardRequestDTO, UpdateBoardStatusRequestDTO

__all__ = [
    "AccessTokenDTO",
    "BoardDTO",
    "CreateBoardRequestDTO",
    "LoginRequestDTO",
    "RegisterRequestDTO",
    "UpdateBoardStatusRequestDTO",
    "UserSummaryDTO",
]
