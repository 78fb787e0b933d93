from .output_type_repository import SqlAlchemyOutputTypeRepository
from .creative_boost_client_repository import SqlAlchemyCreativeBoostClientRepository
from .client_month_repository import SqlAlchemyClientMonthRepository
from .client_month_output_repository import SqlAlchemyClientMonthOutputRepository
from .settings_change_repository import SqlAlchemySettingsChangeRepository
from .directory_repository import (
    SqlAlchemyClientDirectoryRepository,
    SqlAlchemyEngagementDirectoryRepository,
)

__all__ = [
    "SqlAlchemyOutputTypeRepository",
    "SqlAlchemyCreativeBoostClientRepository",
    "SqlAlchemyClientMonthRepository",
    "SqlAlchemyClientMonthOutputRepository",
    "SqlAlchemySettingsChangeRepository",
    "SqlAlchemyClientDirectoryRepository",
    "SqlAlchemyEngagementDirectoryRepository",
]
