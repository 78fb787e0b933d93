from .base import BaseModel, generate_uuid
from .output_type import OutputType, OutputCategory
from .creative_boost_client import CreativeBoostClient, PackageDefaults, DEFAULT_PACKAGE
from .client_month import ClientMonth, MonthStatus
from .client_month_output import ClientMonthOutput
from .settings_change import SettingsChange, SettingsChangeType
from .directory import Client, Engagement, EngagementService
from .credit_calculator import CreditCalculator, OutputCredits, EXPRESS_MULTIPLIER

__all__ = [
    "BaseModel",
    "generate_uuid",
    "OutputType",
    "OutputCategory",
    "CreativeBoostClient",
    "PackageDefaults",
    "DEFAULT_PACKAGE",
    "ClientMonth",
    "MonthStatus",
    "ClientMonthOutput",
    "SettingsChange",
    "SettingsChangeType",
    "Client",
    "Engagement",
    "EngagementService",
    "CreditCalculator",
    "OutputCredits",
    "EXPRESS_MULTIPLIER",
]
