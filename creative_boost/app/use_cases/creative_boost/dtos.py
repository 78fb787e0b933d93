"""Data Transfer Objects for Creative Boost Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from creative_boost.domain.client_month import MonthStatus
from creative_boost.domain.output_type import OutputCategory
from creative_boost.domain.settings_change import SettingsChangeType


class ActorDTO(BaseModel):
    """
    Identity of the user performing a mutation

    Recorded as changed_by/changed_by_name on settings history entries.
    """

    id: str = Field(..., min_length=1, description="Actor identifier")
    full_name: str = Field(..., description="Actor display name")


# ---------------------------------------------------------------------------
# Output types
# ---------------------------------------------------------------------------


class OutputTypeDTO(BaseModel):
    id: str
    name: str
    category: OutputCategory
    base_credits: Decimal
    description: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AddOutputTypeCommandDTO(BaseModel):
    """Command DTO for adding an output type to the catalog"""

    name: str = Field(..., min_length=1, description="Display name")
    category: OutputCategory = Field(default=OutputCategory.BANNER, description="Deliverable category")
    base_credits: Decimal = Field(..., ge=0, description="Credits for one normal piece")
    description: str = Field(default="", description="Optional description")
    is_active: bool = Field(default=True, description="Offered for new output entry")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Static banner",
                "category": "banner",
                "base_credits": "1.000000",
                "description": "One static banner in up to 3 sizes",
                "is_active": True,
            }
        }


class UpdateOutputTypeCommandDTO(BaseModel):
    """Partial update of an output type; unset fields are left unchanged"""

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[OutputCategory] = None
    base_credits: Optional[Decimal] = Field(default=None, ge=0)
    description: Optional[str] = None
    is_active: Optional[bool] = None


# ---------------------------------------------------------------------------
# Credit calculation
# ---------------------------------------------------------------------------


class CalculateCreditsCommandDTO(BaseModel):
    output_type_id: str = Field(..., description="Output type identifier")
    normal_count: int = Field(default=0, ge=0, description="Normal pieces")
    express_count: int = Field(default=0, ge=0, description="Express pieces (x1.5)")


class OutputCreditsDTO(BaseModel):
    normal_credits: Decimal = Field(..., description="normal_count * base_credits")
    express_credits: Decimal = Field(..., description="express_count * base_credits * 1.5")
    total_credits: Decimal = Field(..., description="normal_credits + express_credits")


# ---------------------------------------------------------------------------
# Client configs and client months
# ---------------------------------------------------------------------------


class CreativeBoostClientDTO(BaseModel):
    client_id: str
    is_active: bool
    default_min_credits: Decimal
    default_max_credits: Decimal
    default_price_per_credit: Decimal

    class Config:
        from_attributes = True


class AddCreativeBoostClientCommandDTO(BaseModel):
    """Command DTO for registering a client's package defaults"""

    client_id: str = Field(..., min_length=1, description="CRM client identifier")
    is_active: Optional[bool] = None
    default_min_credits: Optional[Decimal] = Field(default=None, ge=0)
    default_max_credits: Optional[Decimal] = Field(default=None, ge=0)
    default_price_per_credit: Optional[Decimal] = Field(default=None, ge=0)


class ClientMonthSettingsDTO(BaseModel):
    """
    Explicit settings for a new client month

    Unset fields fall back to the client's defaults, then to the
    configured package defaults.
    """

    min_credits: Optional[Decimal] = Field(default=None, ge=0)
    max_credits: Optional[Decimal] = Field(default=None, ge=0)
    price_per_credit: Optional[Decimal] = Field(default=None, ge=0)
    colleague_id: Optional[str] = None
    status: Optional[MonthStatus] = None
    engagement_service_id: Optional[str] = None
    engagement_id: Optional[str] = None


class AddClientToMonthCommandDTO(BaseModel):
    """Command DTO for adding a client to a month's credit ledger"""

    client_id: str = Field(..., min_length=1, description="CRM client identifier")
    year: int = Field(..., ge=2000, le=2100, description="Calendar year")
    month: int = Field(..., ge=1, le=12, description="Calendar month")
    settings: Optional[ClientMonthSettingsDTO] = Field(
        default=None,
        description="Explicit settings; ignored when the client month already exists"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "client_42",
                "year": 2024,
                "month": 3,
                "settings": {"max_credits": "60", "colleague_id": "col_7"},
            }
        }


class ClientMonthDTO(BaseModel):
    id: str
    client_id: str
    year: int
    month: int
    min_credits: Decimal
    max_credits: Decimal
    price_per_credit: Decimal
    colleague_id: str
    status: MonthStatus
    engagement_service_id: Optional[str] = None
    engagement_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ClientMonthPatchDTO(BaseModel):
    """Partial update of a client month; unset fields are left unchanged"""

    min_credits: Optional[Decimal] = Field(default=None, ge=0)
    max_credits: Optional[Decimal] = Field(default=None, ge=0)
    price_per_credit: Optional[Decimal] = Field(default=None, ge=0)
    colleague_id: Optional[str] = None
    status: Optional[MonthStatus] = None


class UpdateClientMonthCommandDTO(BaseModel):
    client_month_id: str = Field(..., description="Client month identifier")
    patch: ClientMonthPatchDTO = Field(..., description="Fields to change")
    actor: ActorDTO = Field(..., description="Who makes the change")


class RemoveClientFromMonthResponseDTO(BaseModel):
    client_id: str
    year: int
    month: int
    client_month_removed: bool = Field(..., description="False if no client month existed")
    outputs_removed: int = Field(..., description="Number of output rows deleted with it")


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class ClientMonthOutputDTO(BaseModel):
    id: str
    client_id: str
    output_type_id: str
    year: int
    month: int
    normal_count: int
    express_count: int
    colleague_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class OutputPatchDTO(BaseModel):
    """Partial update of an output row; unset fields are left unchanged"""

    normal_count: Optional[int] = Field(default=None, ge=0)
    express_count: Optional[int] = Field(default=None, ge=0)
    colleague_id: Optional[str] = None


class UpdateClientOutputCommandDTO(BaseModel):
    """
    Command DTO for setting a client's production counts

    A row is never kept (or created) with both counts at zero.
    """

    client_id: str = Field(..., min_length=1)
    output_type_id: str = Field(..., min_length=1)
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    patch: OutputPatchDTO


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


class ClientMonthSummaryDTO(BaseModel):
    """
    Derived monthly summary of one client (never stored)

    used_credits = normal_credits + express_credits
    remaining_credits = max_credits - used_credits (negative on overage)
    estimated_invoice = used_credits * price_per_credit
    """

    client_id: str
    client_name: str
    brand_name: str
    year: int
    month: int
    min_credits: Decimal
    max_credits: Decimal
    used_credits: Decimal
    normal_credits: Decimal
    express_credits: Decimal
    remaining_credits: Decimal
    estimated_invoice: Decimal
    price_per_credit: Decimal
    status: MonthStatus
    item_count: int


# ---------------------------------------------------------------------------
# Colleague credits
# ---------------------------------------------------------------------------


class ColleagueCreditsDTO(BaseModel):
    colleague_id: str
    year: int
    month: Optional[int] = Field(default=None, description="None for a whole-year total")
    total_credits: Decimal


class ColleagueCreditDetailDTO(BaseModel):
    client_id: str
    client_name: str
    output_type_id: str
    output_type_name: str
    year: int
    month: int
    normal_count: int
    express_count: int
    normal_credits: Decimal
    express_credits: Decimal
    total_credits: Decimal


class ColleagueClientCreditsDTO(BaseModel):
    """Credits a colleague earned on one client, converted to a reward"""

    client_id: str
    client_name: str
    total_credits: Decimal
    reward_per_credit: Decimal
    total_reward: Decimal


# ---------------------------------------------------------------------------
# Settings history
# ---------------------------------------------------------------------------


class SettingsChangeDTO(BaseModel):
    id: str
    client_month_id: str
    client_id: str
    year: int
    month: int
    change_type: SettingsChangeType
    field_name: str
    old_value: str
    new_value: str
    changed_by: str
    changed_by_name: str
    changed_at: datetime

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Engagement sync
# ---------------------------------------------------------------------------


class SyncResultDTO(BaseModel):
    """
    Result of reconciling client months against active engagements
    """

    year: int
    month: int
    engagements_checked: int = Field(..., description="Active engagements covering the month")
    client_months_created: int = Field(..., description="New client months created")
    client_months_linked: int = Field(..., description="Existing client months linked to a billing line")
    client_months_existing: int = Field(..., description="Billing lines that already had a client month")
    client_configs_created: int = Field(..., description="Client configs created on the way")
    execution_time_ms: int

    class Config:
        json_schema_extra = {
            "example": {
                "year": 2024,
                "month": 3,
                "engagements_checked": 12,
                "client_months_created": 2,
                "client_months_linked": 0,
                "client_months_existing": 10,
                "client_configs_created": 1,
                "execution_time_ms": 42,
            }
        }


# ---------------------------------------------------------------------------
# Monthly statement
# ---------------------------------------------------------------------------


class StatementLineDTO(BaseModel):
    output_type_id: str
    output_type_name: str
    normal_count: int
    express_count: int
    base_credits: Decimal
    normal_credits: Decimal
    express_credits: Decimal
    total_credits: Decimal


class MonthStatementResponseDTO(BaseModel):
    summary: ClientMonthSummaryDTO
    lines: List[StatementLineDTO]
    pdf_base64: str = Field(..., description="Base64-encoded PDF document")
    generated_at: datetime
