"""User repository. Interface methods return application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from teamauth.application.dtos.user import UserResult
from teamauth.infrastructure.persistence.models.team import User
from teamauth.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(id=u.id, name=u.name, email=u.email, is_active=u.is_active)


class UserRepository(BaseRepository[User]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_user(self, user_id: str) -> UserResult | None:
        user = await self.get_by_id(user_id)
        return _user_to_result(user) if user else None
