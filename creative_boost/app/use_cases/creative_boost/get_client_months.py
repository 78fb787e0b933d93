"""Client Month Lookup Use Cases

Read-only lookups over the monthly credit ledger. Nothing found is not
an error: lookups return None or an empty list.
"""

from typing import List, Optional
from creative_boost.libs.result import Result, Return
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.app.repositories.creative_boost_client_repository import CreativeBoostClientRepository
from .dtos import ClientMonthDTO, CreativeBoostClientDTO


class GetClientsForMonth:
    """Client ids that have a client month in the period"""

    def __init__(self, client_month_repo: ClientMonthRepository):
        self.client_month_repo = client_month_repo

    async def execute(self, year: int, month: int) -> Result[List[str]]:
        client_months = await self.client_month_repo.list_for_period(year, month)
        return Return.ok([cm.client_id for cm in client_months])


class GetAvailableClientsForMonth:
    """
    Active client configs not yet on the period's ledger

    Used to offer clients in the "add client to month" picker.
    """

    def __init__(
        self,
        client_month_repo: ClientMonthRepository,
        client_repo: CreativeBoostClientRepository,
    ):
        self.client_month_repo = client_month_repo
        self.client_repo = client_repo

    async def execute(self, year: int, month: int) -> Result[List[CreativeBoostClientDTO]]:
        client_months = await self.client_month_repo.list_for_period(year, month)
        taken = {cm.client_id for cm in client_months}

        clients = await self.client_repo.list_active()
        return Return.ok(
            [CreativeBoostClientDTO.model_validate(c) for c in clients if c.client_id not in taken]
        )


class GetClientMonth:
    """Client month of a client for a period, None if absent"""

    def __init__(self, client_month_repo: ClientMonthRepository):
        self.client_month_repo = client_month_repo

    async def execute(self, client_id: str, year: int, month: int) -> Result[Optional[ClientMonthDTO]]:
        client_month = await self.client_month_repo.get_by_client_period(client_id, year, month)
        if not client_month:
            return Return.ok(None)
        return Return.ok(ClientMonthDTO.model_validate(client_month))


class GetClientMonthByEngagementService:
    """Client month linked to a billing line for a period, None if absent"""

    def __init__(self, client_month_repo: ClientMonthRepository):
        self.client_month_repo = client_month_repo

    async def execute(
        self, engagement_service_id: str, year: int, month: int
    ) -> Result[Optional[ClientMonthDTO]]:
        client_month = await self.client_month_repo.get_by_engagement_service_period(
            engagement_service_id, year, month
        )
        if not client_month:
            return Return.ok(None)
        return Return.ok(ClientMonthDTO.model_validate(client_month))
