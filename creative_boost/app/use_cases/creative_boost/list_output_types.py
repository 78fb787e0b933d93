"""Output Type Lookup Use Cases"""

from typing import List, Optional
from creative_boost.libs.result import Result, Return
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from .dtos import OutputTypeDTO


class ListOutputTypes:
    """Read-only: the output type catalog, optionally only active types"""

    def __init__(self, output_type_repo: OutputTypeRepository):
        self.output_type_repo = output_type_repo

    async def execute(self, active_only: bool = False) -> Result[List[OutputTypeDTO]]:
        output_types = await self.output_type_repo.list_all(active_only=active_only)
        return Return.ok([OutputTypeDTO.model_validate(t) for t in output_types])


class GetOutputType:
    """Read-only: one output type, None if unknown"""

    def __init__(self, output_type_repo: OutputTypeRepository):
        self.output_type_repo = output_type_repo

    async def execute(self, output_type_id: str) -> Result[Optional[OutputTypeDTO]]:
        output_type = await self.output_type_repo.get_by_id(output_type_id)
        if not output_type:
            return Return.ok(None)
        return Return.ok(OutputTypeDTO.model_validate(output_type))
