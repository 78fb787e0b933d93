"""UpdateClientOutput Use Case

Sets the production counts of one output type for a client and month.
"""

import logging
from creative_boost.domain.base import utcnow
from typing import Optional
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.client_month_output_repository import ClientMonthOutputRepository
from creative_boost.domain.client_month_output import ClientMonthOutput
from .dtos import UpdateClientOutputCommandDTO, ClientMonthOutputDTO

logger = logging.getLogger(__name__)


class UpdateClientOutput:
    """
    Use Case: Upsert an output row with auto-delete

    Business Rules:
    1. Existing row: merge the patch; delete the row when
       normal_count + express_count reaches 0
    2. Missing row: create it only when the patched counts sum to more than 0
    3. The log stays sparse: zero rows are never stored

    Returns the stored row, or None when no row remains.
    """

    def __init__(self, uow: UnitOfWork, output_repo: ClientMonthOutputRepository):
        self.uow = uow
        self.output_repo = output_repo

    async def execute(self, command: UpdateClientOutputCommandDTO) -> Result[Optional[ClientMonthOutputDTO]]:
        patch = command.patch.model_dump(exclude_unset=True, exclude_none=True)

        try:
            existing = await self.output_repo.get_by_client_type_period(
                command.client_id, command.output_type_id, command.year, command.month
            )

            if existing:
                for field, value in patch.items():
                    setattr(existing, field, value)
                existing.updated_at = utcnow()

                if existing.total_count == 0:
                    await self.output_repo.delete(existing)
                    await self.uow.commit()
                    logger.info(
                        f"Removed empty output {command.output_type_id} of client {command.client_id} "
                        f"for {command.year}-{command.month:02d}"
                    )
                    return Return.ok(None)

                stored = await self.output_repo.update(existing)
                await self.uow.commit()
                return Return.ok(ClientMonthOutputDTO.model_validate(stored))

            normal_count = patch.get("normal_count", 0)
            express_count = patch.get("express_count", 0)
            if normal_count + express_count <= 0:
                return Return.ok(None)

            output = ClientMonthOutput(
                client_id=command.client_id,
                output_type_id=command.output_type_id,
                year=command.year,
                month=command.month,
                normal_count=normal_count,
                express_count=express_count,
                colleague_id=patch.get("colleague_id", ""),
            )
            stored = await self.output_repo.create(output)
            await self.uow.commit()

            logger.info(
                f"Logged output {command.output_type_id} for client {command.client_id} "
                f"in {command.year}-{command.month:02d} (normal={normal_count}, express={express_count})"
            )
            return Return.ok(ClientMonthOutputDTO.model_validate(stored))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update output for client {command.client_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CLIENT_OUTPUT_FAILED",
                    message="Failed to update client output",
                    reason=str(e),
                )
            )
