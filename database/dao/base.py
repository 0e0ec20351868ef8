from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar('T')
CreateSchemaType = TypeVar('CreateSchemaType')


class BaseDAO(ABC, Generic[T, CreateSchemaType]):
    def __init__(self, db: AsyncSession):
        self.db = db

    @abstractmethod
    async def create(self, obj_in: CreateSchemaType) -> T:
        pass

    @abstractmethod
    async def get(self, id: str) -> Optional[T]:
        pass
