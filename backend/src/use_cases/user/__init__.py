from use_cases.user.create_user_use_case import CreateUserUseCase
from use_cases.user.get_users_use_case import GetUsersUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUsersUseCase",
]
