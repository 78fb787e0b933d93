"""SQLAlchemy implementation of ClientMonthRepository

Natural key uniqueness is enforced by the table's unique constraints, so a
concurrent duplicate insert surfaces as IntegrityError on flush.
"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.domain.client_month import ClientMonth


class SqlAlchemyClientMonthRepository(ClientMonthRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_month_id: str) -> Optional[ClientMonth]:
        stmt = select(ClientMonth).where(ClientMonth.id == client_month_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_client_period(self, client_id: str, year: int, month: int) -> Optional[ClientMonth]:
        stmt = select(ClientMonth).where(
            ClientMonth.client_id == client_id,
            ClientMonth.year == year,
            ClientMonth.month == month,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_engagement_service_period(
        self, engagement_service_id: str, year: int, month: int
    ) -> Optional[ClientMonth]:
        stmt = select(ClientMonth).where(
            ClientMonth.engagement_service_id == engagement_service_id,
            ClientMonth.year == year,
            ClientMonth.month == month,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_period(self, year: int, month: int) -> List[ClientMonth]:
        stmt = (
            select(ClientMonth)
            .where(ClientMonth.year == year, ClientMonth.month == month)
            .order_by(ClientMonth.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, client_month: ClientMonth) -> ClientMonth:
        self.session.add(client_month)
        await self.session.flush()
        await self.session.refresh(client_month)
        return client_month

    async def update(self, client_month: ClientMonth) -> ClientMonth:
        self.session.add(client_month)
        await self.session.flush()
        await self.session.refresh(client_month)
        return client_month

    async def delete(self, client_month: ClientMonth) -> None:
        await self.session.delete(client_month)
        await self.session.flush()
