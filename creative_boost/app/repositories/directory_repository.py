"""CRM Directory Repository Interfaces

Read-only access to clients, engagements and engagement services owned by
the CRM. Unknown ids resolve to None, never to an error.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from creative_boost.domain.directory import Client, Engagement, EngagementService


class ClientDirectoryRepository(ABC):
    """Resolves CRM client ids to names"""

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Optional[Client]:
        """
        Retrieve client by ID

        Args:
            client_id: CRM client identifier

        Returns:
            Client if found, None otherwise
        """
        pass


class EngagementDirectoryRepository(ABC):
    """Read access to billing engagements and their service lines"""

    @abstractmethod
    async def list_by_status(self, status: str) -> List[Engagement]:
        """
        Retrieve engagements with the given status

        Args:
            status: Engagement status (e.g., 'active')

        Returns:
            List of Engagement
        """
        pass

    @abstractmethod
    async def get_service(self, engagement_id: str, service_id: str) -> Optional[EngagementService]:
        """
        Retrieve the billing line of an engagement for a catalog service

        Args:
            engagement_id: Engagement identifier
            service_id: Catalog service identifier

        Returns:
            EngagementService if found, None otherwise
        """
        pass
