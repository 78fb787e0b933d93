"""Settings Change Repository Interface

Defines the contract for the append-only settings audit trail.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from creative_boost.domain.settings_change import SettingsChange


class SettingsChangeRepository(ABC):
    """
    Repository interface for SettingsChange persistence

    Changes are immutable: there is no update or delete.
    """

    @abstractmethod
    async def create(self, change: SettingsChange) -> SettingsChange:
        """
        Append a settings change

        Args:
            change: SettingsChange entity to persist

        Returns:
            Created SettingsChange
        """
        pass

    @abstractmethod
    async def list_for_client(
        self, client_id: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> List[SettingsChange]:
        """
        Retrieve the change history of a client

        Args:
            client_id: CRM client identifier
            year: Optional year filter
            month: Optional month filter

        Returns:
            List of SettingsChange, newest first
        """
        pass
