"""SQLAlchemy implementation of CreativeBoostClientRepository"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from creative_boost.app.repositories.creative_boost_client_repository import CreativeBoostClientRepository
from creative_boost.domain.creative_boost_client import CreativeBoostClient


class SqlAlchemyCreativeBoostClientRepository(CreativeBoostClientRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_client_id(self, client_id: str) -> Optional[CreativeBoostClient]:
        stmt = select(CreativeBoostClient).where(CreativeBoostClient.client_id == client_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active(self) -> List[CreativeBoostClient]:
        stmt = (
            select(CreativeBoostClient)
            .where(CreativeBoostClient.is_active == True)  # noqa: E712
            .order_by(CreativeBoostClient.client_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, client: CreativeBoostClient) -> CreativeBoostClient:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client
