"""Output Type Repository Interface

Defines the contract for output type catalog persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from creative_boost.domain.output_type import OutputType


class OutputTypeRepository(ABC):
    """
    Repository interface for OutputType persistence

    Output types are never deleted; deactivation goes through update().
    """

    @abstractmethod
    async def get_by_id(self, output_type_id: str) -> Optional[OutputType]:
        """
        Retrieve output type by ID

        Args:
            output_type_id: Output type identifier

        Returns:
            OutputType if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self, active_only: bool = False) -> List[OutputType]:
        """
        Retrieve the catalog

        Args:
            active_only: If True, only active output types are returned

        Returns:
            List of OutputType ordered by name
        """
        pass

    @abstractmethod
    async def create(self, output_type: OutputType) -> OutputType:
        pass

    @abstractmethod
    async def update(self, output_type: OutputType) -> OutputType:
        pass
