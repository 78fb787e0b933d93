"""Client Month Domain Entity

Monthly credit budget of one client. This is the central ledger record:
outputs logged for the same client and period are measured against it.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, UniqueConstraint
from creative_boost.domain.base import BaseModel, generate_uuid, utcnow


class MonthStatus(str, Enum):
    """Ledger status; both states are stable, only explicit updates move between them"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class ClientMonth(BaseModel, table=True):
    """
    Client Month - Credit budget of a client for one calendar month

    Domain Rules:
    - At most one row per (client_id, year, month)
    - At most one row per (engagement_service_id, year, month)
    - Usage may exceed max_credits; overage is reported, never blocked
    - min/max/price/status changes are recorded as SettingsChange rows
    - engagement_id/engagement_service_id are weak references to billing
      contracts managed elsewhere
    """

    __tablename__ = "creative_boost_client_months"
    __table_args__ = (
        UniqueConstraint("client_id", "year", "month", name="uq_client_month_client_period"),
        UniqueConstraint(
            "engagement_service_id", "year", "month", name="uq_client_month_engagement_service_period"
        ),
        Index("ix_client_months_period", "year", "month"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique client month identifier"
    )

    client_id: str = Field(
        index=True,
        description="CRM client identifier"
    )

    year: int = Field(description="Calendar year")

    month: int = Field(description="Calendar month (1-12)")

    min_credits: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Contracted monthly minimum"
    )

    max_credits: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Contracted monthly cap (usage may exceed it)"
    )

    price_per_credit: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Invoiced price per used credit"
    )

    colleague_id: str = Field(
        default="",
        description="Colleague assigned to the client for this month"
    )

    status: MonthStatus = Field(
        default=MonthStatus.ACTIVE,
        description="Ledger status (active, inactive)"
    )

    engagement_service_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Billing line this month was created for, if any"
    )

    engagement_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Billing engagement this month belongs to, if any"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last update timestamp"
    )
