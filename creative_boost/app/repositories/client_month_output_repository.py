"""Client Month Output Repository Interface

Defines the contract for output log persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from creative_boost.domain.client_month_output import ClientMonthOutput


class ClientMonthOutputRepository(ABC):
    """
    Repository interface for ClientMonthOutput persistence

    The output log is sparse: zero-count rows are deleted, not stored.
    """

    @abstractmethod
    async def get_by_client_type_period(
        self, client_id: str, output_type_id: str, year: int, month: int
    ) -> Optional[ClientMonthOutput]:
        """
        Retrieve the output row for a client, output type and period

        Returns:
            ClientMonthOutput if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_client_period(self, client_id: str, year: int, month: int) -> List[ClientMonthOutput]:
        """Retrieve all output rows of a client for a period"""
        pass

    @abstractmethod
    async def list_for_colleague(
        self, colleague_id: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> List[ClientMonthOutput]:
        """
        Retrieve output rows attributed to a colleague

        Args:
            colleague_id: Colleague identifier
            year: Optional year filter
            month: Optional month filter

        Returns:
            List of ClientMonthOutput
        """
        pass

    @abstractmethod
    async def create(self, output: ClientMonthOutput) -> ClientMonthOutput:
        pass

    @abstractmethod
    async def update(self, output: ClientMonthOutput) -> ClientMonthOutput:
        pass

    @abstractmethod
    async def delete(self, output: ClientMonthOutput) -> None:
        pass

    @abstractmethod
    async def delete_for_client_period(self, client_id: str, year: int, month: int) -> int:
        """
        Delete all output rows of a client for a period

        Returns:
            Number of deleted rows
        """
        pass
