from core.domain.user import User
from core.port.user_repository import UserRepository


class GetUsersUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> list[User]:
        return await self.user_repository.find_all()
