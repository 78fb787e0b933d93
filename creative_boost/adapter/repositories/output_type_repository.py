"""SQLAlchemy implementation of OutputTypeRepository"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from creative_boost.domain.output_type import OutputType


class SqlAlchemyOutputTypeRepository(OutputTypeRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, output_type_id: str) -> Optional[OutputType]:
        stmt = select(OutputType).where(OutputType.id == output_type_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self, active_only: bool = False) -> List[OutputType]:
        stmt = select(OutputType)

        if active_only:
            stmt = stmt.where(OutputType.is_active == True)  # noqa: E712

        stmt = stmt.order_by(OutputType.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, output_type: OutputType) -> OutputType:
        self.session.add(output_type)
        await self.session.flush()
        await self.session.refresh(output_type)
        return output_type

    async def update(self, output_type: OutputType) -> OutputType:
        self.session.add(output_type)
        await self.session.flush()
        await self.session.refresh(output_type)
        return output_type
