"""SQLAlchemy implementation of ClientMonthOutputRepository"""

from typing import Optional, List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from creative_boost.app.repositories.client_month_output_repository import ClientMonthOutputRepository
from creative_boost.domain.client_month_output import ClientMonthOutput


class SqlAlchemyClientMonthOutputRepository(ClientMonthOutputRepository):
    """
    SQLAlchemy implementation of ClientMonthOutputRepository

    Features:
    - One row per (client, output type, period), enforced by unique constraint
    - Bulk delete of a client's period on removal from the ledger
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_client_type_period(
        self, client_id: str, output_type_id: str, year: int, month: int
    ) -> Optional[ClientMonthOutput]:
        stmt = select(ClientMonthOutput).where(
            ClientMonthOutput.client_id == client_id,
            ClientMonthOutput.output_type_id == output_type_id,
            ClientMonthOutput.year == year,
            ClientMonthOutput.month == month,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_client_period(self, client_id: str, year: int, month: int) -> List[ClientMonthOutput]:
        stmt = (
            select(ClientMonthOutput)
            .where(
                ClientMonthOutput.client_id == client_id,
                ClientMonthOutput.year == year,
                ClientMonthOutput.month == month,
            )
            .order_by(ClientMonthOutput.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_colleague(
        self, colleague_id: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> List[ClientMonthOutput]:
        stmt = select(ClientMonthOutput).where(ClientMonthOutput.colleague_id == colleague_id)

        if year is not None:
            stmt = stmt.where(ClientMonthOutput.year == year)
        if month is not None:
            stmt = stmt.where(ClientMonthOutput.month == month)

        stmt = stmt.order_by(ClientMonthOutput.year, ClientMonthOutput.month, ClientMonthOutput.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, output: ClientMonthOutput) -> ClientMonthOutput:
        self.session.add(output)
        await self.session.flush()
        await self.session.refresh(output)
        return output

    async def update(self, output: ClientMonthOutput) -> ClientMonthOutput:
        self.session.add(output)
        await self.session.flush()
        await self.session.refresh(output)
        return output

    async def delete(self, output: ClientMonthOutput) -> None:
        await self.session.delete(output)
        await self.session.flush()

    async def delete_for_client_period(self, client_id: str, year: int, month: int) -> int:
        """
        Delete all output rows of a client for a period

        Returns:
            Number of deleted rows
        """
        stmt = delete(ClientMonthOutput).where(
            ClientMonthOutput.client_id == client_id,
            ClientMonthOutput.year == year,
            ClientMonthOutput.month == month,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
