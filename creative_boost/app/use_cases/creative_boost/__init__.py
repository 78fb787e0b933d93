"""Creative Boost use cases"""
from .add_output_type import AddOutputType
from .update_output_type import UpdateOutputType
from .list_output_types import ListOutputTypes, GetOutputType
from .calculate_output_credits import CalculateOutputCredits, load_credit_calculator
from .add_creative_boost_client import AddCreativeBoostClient, get_or_create_client_config
from .add_client_to_month import AddClientToMonth
from .remove_client_from_month import RemoveClientFromMonth
from .update_client_month import UpdateClientMonth
from .get_client_months import (
    GetClientsForMonth,
    GetAvailableClientsForMonth,
    GetClientMonth,
    GetClientMonthByEngagementService,
)
from .update_client_output import UpdateClientOutput
from .get_client_outputs import GetClientOutputs
from .get_client_month_summaries import GetClientMonthSummaries, GetClientMonthSummaryByEngagementService
from .get_colleague_credits import (
    GetColleagueCredits,
    GetColleagueCreditsYear,
    GetColleagueCreditsDetail,
    GetColleagueCreditsByClient,
)
from .get_settings_history import GetSettingsHistory
from .ensure_client_months import EnsureClientMonthsForActiveEngagements
from .generate_month_statement import GenerateMonthStatement
from .dtos import (
    ActorDTO,
    OutputTypeDTO,
    AddOutputTypeCommandDTO,
    UpdateOutputTypeCommandDTO,
    CalculateCreditsCommandDTO,
    OutputCreditsDTO,
    CreativeBoostClientDTO,
    AddCreativeBoostClientCommandDTO,
    ClientMonthSettingsDTO,
    AddClientToMonthCommandDTO,
    ClientMonthDTO,
    ClientMonthPatchDTO,
    UpdateClientMonthCommandDTO,
    RemoveClientFromMonthResponseDTO,
    ClientMonthOutputDTO,
    OutputPatchDTO,
    UpdateClientOutputCommandDTO,
    ClientMonthSummaryDTO,
    ColleagueCreditsDTO,
    ColleagueCreditDetailDTO,
    ColleagueClientCreditsDTO,
    SettingsChangeDTO,
    SyncResultDTO,
    StatementLineDTO,
    MonthStatementResponseDTO,
)

__all__ = [
    "AddOutputType",
    "UpdateOutputType",
    "ListOutputTypes",
    "GetOutputType",
    "CalculateOutputCredits",
    "load_credit_calculator",
    "AddCreativeBoostClient",
    "get_or_create_client_config",
    "AddClientToMonth",
    "RemoveClientFromMonth",
    "UpdateClientMonth",
    "GetClientsForMonth",
    "GetAvailableClientsForMonth",
    "GetClientMonth",
    "GetClientMonthByEngagementService",
    "UpdateClientOutput",
    "GetClientOutputs",
    "GetClientMonthSummaries",
    "GetClientMonthSummaryByEngagementService",
    "GetColleagueCredits",
    "GetColleagueCreditsYear",
    "GetColleagueCreditsDetail",
    "GetColleagueCreditsByClient",
    "GetSettingsHistory",
    "EnsureClientMonthsForActiveEngagements",
    "GenerateMonthStatement",
    "ActorDTO",
    "OutputTypeDTO",
    "AddOutputTypeCommandDTO",
    "UpdateOutputTypeCommandDTO",
    "CalculateCreditsCommandDTO",
    "OutputCreditsDTO",
    "CreativeBoostClientDTO",
    "AddCreativeBoostClientCommandDTO",
    "ClientMonthSettingsDTO",
    "AddClientToMonthCommandDTO",
    "ClientMonthDTO",
    "ClientMonthPatchDTO",
    "UpdateClientMonthCommandDTO",
    "RemoveClientFromMonthResponseDTO",
    "ClientMonthOutputDTO",
    "OutputPatchDTO",
    "UpdateClientOutputCommandDTO",
    "ClientMonthSummaryDTO",
    "ColleagueCreditsDTO",
    "ColleagueCreditDetailDTO",
    "ColleagueClientCreditsDTO",
    "SettingsChangeDTO",
    "SyncResultDTO",
    "StatementLineDTO",
    "MonthStatementResponseDTO",
]
