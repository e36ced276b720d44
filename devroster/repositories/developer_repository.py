"""
Developer repository for data access.

Thin passthrough over the developers table.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devroster.db.models import DeveloperModel
from devroster.core.interfaces import IDeveloperRepository
from devroster.domain.entities import Developer


class DeveloperRepository(IDeveloperRepository):
    """Repository for Developer entity"""

    def __init__(self, session: AsyncSession):
        self._db = session

    async def find_many(self) -> List[Developer]:
        result = await self._db.execute(
            select(DeveloperModel).order_by(DeveloperModel.created_at, DeveloperModel.id)
        )
        return [row.to_entity() for row in result.scalars().all()]

    async def find_unique(self, developer_id: str) -> Optional[Developer]:
        row = await self._get_row(developer_id)
        return row.to_entity() if row else None

    async def create(self, developer: Developer) -> Developer:
        row = DeveloperModel(
            id=developer.id,
            name=developer.name,
            position=developer.position,
            location=developer.location,
            experience_years=developer.experience_years,
            image_url=developer.image_url,
            skills=developer.skills.to_dict(),
        )
        self._db.add(row)
        await self._db.flush()
        return row.to_entity()

    async def update(self, developer_id: str, fields: Dict[str, Any]) -> Optional[Developer]:
        row = await self._get_row(developer_id)
        if row is None:
            return None

        for column, value in fields.items():
            setattr(row, column, value)

        await self._db.flush()
        return row.to_entity()

    async def _get_row(self, developer_id: str) -> Optional[DeveloperModel]:
        result = await self._db.execute(
            select(DeveloperModel).where(DeveloperModel.id == developer_id)
        )
        return result.scalar_one_or_none()
