"""AddOutputType Use Case

Adds a deliverable kind to the output type catalog.
"""

import logging
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from creative_boost.domain.output_type import OutputType
from .dtos import AddOutputTypeCommandDTO, OutputTypeDTO

logger = logging.getLogger(__name__)


class AddOutputType:
    """
    Use Case: Add an output type to the catalog

    Output types are never deleted afterwards, only deactivated
    through UpdateOutputType.
    """

    def __init__(self, uow: UnitOfWork, output_type_repo: OutputTypeRepository):
        self.uow = uow
        self.output_type_repo = output_type_repo

    async def execute(self, command: AddOutputTypeCommandDTO) -> Result[OutputTypeDTO]:
        try:
            output_type = OutputType(
                name=command.name,
                category=command.category,
                base_credits=command.base_credits,
                description=command.description,
                is_active=command.is_active,
            )
            created = await self.output_type_repo.create(output_type)
            await self.uow.commit()

            logger.info(f"Added output type {created.id} ({created.name}, {created.base_credits} credits)")
            return Return.ok(OutputTypeDTO.model_validate(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add output type {command.name}: {e}")
            return Return.err(
                Error(
                    code="ADD_OUTPUT_TYPE_FAILED",
                    message="Failed to add output type",
                    reason=str(e),
                )
            )
