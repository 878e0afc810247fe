from core.domain.user import User
from core.exceptions.user_already_exists_error import UserAlreadyExistsError
from core.port.clock import Clock
from core.port.password_hasher import PasswordHasher
from core.port.user_repository import UserRepository
from infra.web.routers.schemas.user import UserCreateDTO


class CreateUserUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.clock = clock

    async def execute(self, user: UserCreateDTO) -> User:
        if await self.user_repository.find_by_email(user.email) is not None:
            raise UserAlreadyExistsError("email", user.email)

        now = self.clock.now()

        user_entity = User(
            id=None,
            email=user.email,
            password_hash=self.password_hasher.hash(user.password),
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

        return await self.user_repository.save(user_entity)
