import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.dao.base import BaseDAO
from models.user import User
from schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserDAO(BaseDAO[User, UserCreate]):
    def __init__(self, db: AsyncSession):
        super().__init__(db)

    async def create(self, obj_in: UserCreate) -> User:
        """Create a new user.

        Raises ``IntegrityError`` if a user with the same ``google_id`` already
        exists; the session is rolled back first.
        """
        db_user = User(**obj_in.model_dump())

        self.db.add(db_user)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(db_user)
        logger.info(f"User created: {db_user.id}")
        return db_user

    async def get(self, id: str) -> Optional[User]:
        """Get a user by its local ID."""
        result = await self.db.execute(
            select(User).where(User.id == id)
        )
        return result.scalar_one_or_none()

    async def get_by_google_id(self, google_id: str) -> Optional[User]:
        """Get a user by Google subject."""
        result = await self.db.execute(
            select(User).where(User.google_id == google_id)
        )
        return result.scalar_one_or_none()
