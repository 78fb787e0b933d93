"""UpdateOutputType Use Case

Partially updates an output type (rename, re-price, deactivate).
"""

import logging
from creative_boost.domain.base import utcnow
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from .dtos import UpdateOutputTypeCommandDTO, OutputTypeDTO

logger = logging.getLogger(__name__)


class UpdateOutputType:
    """
    Use Case: Update an output type

    Changing base_credits re-prices every summary computed afterwards,
    including past months, since summaries are never stored.
    """

    def __init__(self, uow: UnitOfWork, output_type_repo: OutputTypeRepository):
        self.uow = uow
        self.output_type_repo = output_type_repo

    async def execute(self, output_type_id: str, command: UpdateOutputTypeCommandDTO) -> Result[OutputTypeDTO]:
        try:
            output_type = await self.output_type_repo.get_by_id(output_type_id)
            if not output_type:
                return Return.err(
                    Error(
                        code="OUTPUT_TYPE_NOT_FOUND",
                        message=f"Output type {output_type_id} not found",
                    )
                )

            for field, value in command.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(output_type, field, value)
            output_type.updated_at = utcnow()

            updated = await self.output_type_repo.update(output_type)
            await self.uow.commit()

            logger.info(f"Updated output type {output_type_id}")
            return Return.ok(OutputTypeDTO.model_validate(updated))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update output type {output_type_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_OUTPUT_TYPE_FAILED",
                    message="Failed to update output type",
                    reason=str(e),
                )
            )
