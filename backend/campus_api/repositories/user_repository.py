"""User Repository — SQLAlchemy implementation of core UserRepository.

Invariants:
    - find_by_email_address is an exact, case-sensitive match
    - create commits and returns the database-assigned id
    - A unique-email violation at insert raises DuplicateEmailError, so two requests
      racing past the service's existence check still end in a 409
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.core.domain_types import UserId
from campus_api.core.errors import DuplicateEmailError
from campus_api.models.user import User


class SqlUserRepository:
    """UserRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_email_address(self, email_address: str) -> User | None:
        result = await self._db.execute(
            select(User).where(User.email_address == email_address),
        )
        return result.scalar_one_or_none()

    async def create(self, user_data: dict) -> UserId:
        user = User(**user_data)
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError as exc:
            await self._db.rollback()
            raise DuplicateEmailError(user_data["email_address"]) from exc
        await self._db.refresh(user)
        return UserId(user.id)
