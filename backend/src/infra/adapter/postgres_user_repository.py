from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.user import User
from core.exceptions.user_already_exists_error import UserAlreadyExistsError
from core.port.user_repository import UserRepository
from infra.db.models import UserModel
from infra.db.session import get_session_factory
from infra.utils.datetimes import ensure_utc, utc_or_now


class PostgresUserRepository(UserRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, user: User) -> User:
        async with self._session_factory() as session:
            try:
                model: Optional[UserModel] = None

                if user.id is not None:
                    model = await session.get(UserModel, user.id)

                if model is None:
                    model = UserModel(
                        email=user.email,
                        password_hash=user.password_hash,
                        first_name=user.first_name,
                        last_name=user.last_name,
                        role=user.role,
                        is_active=user.is_active,
                        created_at=utc_or_now(user.created_at),
                        updated_at=utc_or_now(user.updated_at),
                    )
                    session.add(model)
                else:
                    model.email = user.email
                    model.password_hash = user.password_hash
                    model.first_name = user.first_name
                    model.last_name = user.last_name
                    model.role = user.role
                    model.is_active = user.is_active
                    model.updated_at = utc_or_now(user.updated_at)

                await session.commit()
                await session.refresh(model)

                return self._to_domain(model)

            except IntegrityError as e:
                await session.rollback()

                if "email" in str(e.orig).lower():
                    raise UserAlreadyExistsError("email", user.email)

                raise

    async def find_by_email(self, email: str) -> Optional[User]:
        async with self._session_factory() as session:
            statement = select(UserModel).where(UserModel.email == email)
            model = (await session.execute(statement)).scalar_one_or_none()

            return self._to_domain(model) if model is not None else None

    async def find_all(self) -> list[User]:
        async with self._session_factory() as session:
            statement = select(UserModel).order_by(UserModel.id.asc())
            models = (await session.execute(statement)).scalars().all()

            return [self._to_domain(model) for model in models]

    def _to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            role=model.role,
            is_active=model.is_active,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


@lru_cache
def get_user_repository() -> UserRepository:
    session_factory = get_session_factory()

    return PostgresUserRepository(session_factory)
