"""Creative Boost Client Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional, List
from creative_boost.domain.creative_boost_client import CreativeBoostClient


class CreativeBoostClientRepository(ABC):
    """Repository interface for per-client credit package defaults"""

    @abstractmethod
    async def get_by_client_id(self, client_id: str) -> Optional[CreativeBoostClient]:
        """
        Retrieve client config by CRM client ID

        Returns:
            CreativeBoostClient if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_active(self) -> List[CreativeBoostClient]:
        """Retrieve all active client configs"""
        pass

    @abstractmethod
    async def create(self, client: CreativeBoostClient) -> CreativeBoostClient:
        pass
