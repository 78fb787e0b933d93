"""SQLAlchemy implementations of the CRM directory repositories

These tables are owned by the CRM; this module only reads them.
"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from creative_boost.app.repositories.directory_repository import (
    ClientDirectoryRepository,
    EngagementDirectoryRepository,
)
from creative_boost.domain.directory import Client, Engagement, EngagementService


class SqlAlchemyClientDirectoryRepository(ClientDirectoryRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_id: str) -> Optional[Client]:
        stmt = select(Client).where(Client.id == client_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


class SqlAlchemyEngagementDirectoryRepository(EngagementDirectoryRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_status(self, status: str) -> List[Engagement]:
        stmt = select(Engagement).where(Engagement.status == status).order_by(Engagement.start_date)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_service(self, engagement_id: str, service_id: str) -> Optional[EngagementService]:
        stmt = (
            select(EngagementService)
            .where(
                EngagementService.engagement_id == engagement_id,
                EngagementService.service_id == service_id,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()
