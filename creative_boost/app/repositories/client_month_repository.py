"""Client Month Repository Interface

Defines the contract for client month (monthly credit ledger) persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from creative_boost.domain.client_month import ClientMonth


class ClientMonthRepository(ABC):
    """
    Repository interface for ClientMonth persistence

    Natural keys (client_id, year, month) and (engagement_service_id, year, month)
    are unique; callers look up before creating.
    """

    @abstractmethod
    async def get_by_id(self, client_month_id: str) -> Optional[ClientMonth]:
        """
        Retrieve client month by ID

        Args:
            client_month_id: Client month identifier

        Returns:
            ClientMonth if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_client_period(self, client_id: str, year: int, month: int) -> Optional[ClientMonth]:
        """
        Retrieve the client month of a client for a period

        Args:
            client_id: CRM client identifier
            year: Calendar year
            month: Calendar month (1-12)

        Returns:
            ClientMonth if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_engagement_service_period(
        self, engagement_service_id: str, year: int, month: int
    ) -> Optional[ClientMonth]:
        """
        Retrieve the client month linked to a billing line for a period

        Args:
            engagement_service_id: Engagement service identifier
            year: Calendar year
            month: Calendar month (1-12)

        Returns:
            ClientMonth if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_period(self, year: int, month: int) -> List[ClientMonth]:
        """
        Retrieve all client months of a period

        Args:
            year: Calendar year
            month: Calendar month (1-12)

        Returns:
            List of ClientMonth ordered by creation time
        """
        pass

    @abstractmethod
    async def create(self, client_month: ClientMonth) -> ClientMonth:
        """
        Create a new client month

        Args:
            client_month: ClientMonth entity to persist

        Returns:
            Created ClientMonth

        Raises:
            IntegrityError: If a row for the same natural key already exists
        """
        pass

    @abstractmethod
    async def update(self, client_month: ClientMonth) -> ClientMonth:
        """
        Update an existing client month

        Args:
            client_month: ClientMonth entity with updated values

        Returns:
            Updated ClientMonth
        """
        pass

    @abstractmethod
    async def delete(self, client_month: ClientMonth) -> None:
        """
        Delete a client month

        Args:
            client_month: ClientMonth entity to delete
        """
        pass
