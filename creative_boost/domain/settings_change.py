"""Settings Change Domain Entity

Immutable append-only audit trail of client month setting changes.
"""

from datetime import datetime
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import String
from creative_boost.domain.base import BaseModel, generate_uuid, utcnow


class SettingsChangeType(str, Enum):
    """Tracked client month fields"""
    MAX_CREDITS = "max_credits"
    PRICE_PER_CREDIT = "price_per_credit"
    STATUS = "status"


class SettingsChange(BaseModel, table=True):
    """
    Settings Change - One audited field change on a client month

    Domain Rules:
    - Appended whenever max_credits, price_per_credit or status changes
    - Never mutated or deleted
    - old_value/new_value are display strings ("50", "1500.5", "Active")
    """

    __tablename__ = "creative_boost_settings_changes"
    __table_args__ = (
        Index("ix_settings_changes_client_period", "client_id", "year", "month"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique change identifier"
    )

    client_month_id: str = Field(
        index=True,
        description="Client month the change was made on"
    )

    client_id: str = Field(description="CRM client identifier")

    year: int = Field(description="Calendar year of the client month")

    month: int = Field(description="Calendar month of the client month")

    change_type: SettingsChangeType = Field(description="Which tracked field changed")

    field_name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Human-readable field label"
    )

    old_value: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Value before the change"
    )

    new_value: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Value after the change"
    )

    changed_by: str = Field(description="Actor identifier")

    changed_by_name: str = Field(description="Actor display name")

    changed_at: datetime = Field(
        default_factory=utcnow,
        description="Change timestamp (immutable)"
    )
