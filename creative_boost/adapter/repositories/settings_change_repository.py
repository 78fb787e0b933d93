"""SQLAlchemy implementation of SettingsChangeRepository

Append-only audit trail of client month settings.
"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from creative_boost.app.repositories.settings_change_repository import SettingsChangeRepository
from creative_boost.domain.settings_change import SettingsChange


class SqlAlchemySettingsChangeRepository(SettingsChangeRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, change: SettingsChange) -> SettingsChange:
        self.session.add(change)
        await self.session.flush()
        await self.session.refresh(change)
        return change

    async def list_for_client(
        self, client_id: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> List[SettingsChange]:
        """
        Retrieve the change history of a client, newest first

        Args:
            client_id: CRM client identifier
            year: Optional year filter
            month: Optional month filter
        """
        stmt = select(SettingsChange).where(SettingsChange.client_id == client_id)

        if year is not None:
            stmt = stmt.where(SettingsChange.year == year)
        if month is not None:
            stmt = stmt.where(SettingsChange.month == month)

        stmt = stmt.order_by(SettingsChange.changed_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
