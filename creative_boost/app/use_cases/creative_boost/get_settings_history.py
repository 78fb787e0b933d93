"""Get Settings History Use Case"""

from typing import List, Optional
from creative_boost.libs.result import Result, Return
from creative_boost.app.repositories.settings_change_repository import SettingsChangeRepository
from .dtos import SettingsChangeDTO


class GetSettingsHistory:
    """
    Read-only: settings changes of a client, newest first

    Optionally narrowed to a year, or a year and month. Ordering comes from
    the repository.
    """

    def __init__(self, settings_change_repo: SettingsChangeRepository):
        self.settings_change_repo = settings_change_repo

    async def execute(
        self, client_id: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> Result[List[SettingsChangeDTO]]:
        changes = await self.settings_change_repo.list_for_client(client_id, year=year, month=month)
        return Return.ok([SettingsChangeDTO.model_validate(c) for c in changes])
