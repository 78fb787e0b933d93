"""RemoveClientFromMonth Use Case

Removes a client from a month's ledger together with its output log.
"""

import logging
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.app.repositories.client_month_output_repository import ClientMonthOutputRepository
from .dtos import RemoveClientFromMonthResponseDTO

logger = logging.getLogger(__name__)


class RemoveClientFromMonth:
    """
    Use Case: Remove a client from a month

    Business Rules:
    1. Cascading delete: every output row of (client_id, year, month) goes
       with the client month, no orphaned outputs
    2. Outputs are removed even when no client month exists
    3. Settings history is kept (append-only audit)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_month_repo: ClientMonthRepository,
        output_repo: ClientMonthOutputRepository,
    ):
        self.uow = uow
        self.client_month_repo = client_month_repo
        self.output_repo = output_repo

    async def execute(self, client_id: str, year: int, month: int) -> Result[RemoveClientFromMonthResponseDTO]:
        try:
            client_month = await self.client_month_repo.get_by_client_period(client_id, year, month)
            if client_month:
                await self.client_month_repo.delete(client_month)

            outputs_removed = await self.output_repo.delete_for_client_period(client_id, year, month)

            await self.uow.commit()

            logger.info(
                f"Removed client {client_id} from {year}-{month:02d} "
                f"(client_month_removed={client_month is not None}, outputs_removed={outputs_removed})"
            )
            return Return.ok(
                RemoveClientFromMonthResponseDTO(
                    client_id=client_id,
                    year=year,
                    month=month,
                    client_month_removed=client_month is not None,
                    outputs_removed=outputs_removed,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to remove client {client_id} from {year}-{month:02d}: {e}")
            return Return.err(
                Error(
                    code="REMOVE_CLIENT_FROM_MONTH_FAILED",
                    message="Failed to remove client from month",
                    reason=str(e),
                )
            )
