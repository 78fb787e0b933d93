"""Get Client Outputs Use Case"""

from typing import List
from creative_boost.libs.result import Result, Return
from creative_boost.app.repositories.client_month_output_repository import ClientMonthOutputRepository
from .dtos import ClientMonthOutputDTO


class GetClientOutputs:
    """Read-only: output rows of a client for a period, no aggregation"""

    def __init__(self, output_repo: ClientMonthOutputRepository):
        self.output_repo = output_repo

    async def execute(self, client_id: str, year: int, month: int) -> Result[List[ClientMonthOutputDTO]]:
        outputs = await self.output_repo.list_for_client_period(client_id, year, month)
        return Return.ok([ClientMonthOutputDTO.model_validate(o) for o in outputs])
