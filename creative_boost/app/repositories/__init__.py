from .output_type_repository import OutputTypeRepository
from .creative_boost_client_repository import CreativeBoostClientRepository
from .client_month_repository import ClientMonthRepository
from .client_month_output_repository import ClientMonthOutputRepository
from .settings_change_repository import SettingsChangeRepository
from .directory_repository import ClientDirectoryRepository, EngagementDirectoryRepository

__all__ = [
    "OutputTypeRepository",
    "CreativeBoostClientRepository",
    "ClientMonthRepository",
    "ClientMonthOutputRepository",
    "SettingsChangeRepository",
    "ClientDirectoryRepository",
    "EngagementDirectoryRepository",
]
