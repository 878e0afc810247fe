from fastapi import APIRouter, HTTPException, status

from core.domain.user import User
from core.exceptions.user_already_exists_error import UserAlreadyExistsError
from infra.adapter.pbkdf2_password_hasher import get_password_hasher
from infra.adapter.postgres_user_repository import get_user_repository
from infra.adapter.system_clock import get_system_clock
from infra.web.routers.schemas.user import UserCreateDTO, UserResponseDTO
from use_cases.user import CreateUserUseCase, GetUsersUseCase

router = APIRouter(prefix="/user", tags=["User"])


@router.post(
    "",
    response_model=UserResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(payload: UserCreateDTO) -> User:
    use_case = CreateUserUseCase(get_user_repository(), get_password_hasher(), get_system_clock())

    try:
        return await use_case.execute(payload)
    except UserAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"User with {e.field}='{e.value}' already exists",
        )


@router.get(
    "",
    response_model=list[UserResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_users() -> list[User]:
    use_case = GetUsersUseCase(get_user_repository())

    return await use_case.execute()
