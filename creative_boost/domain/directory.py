"""CRM Directory Entities

Clients, engagements and engagement services are owned by the CRM.
This service only reads them (name resolution and engagement sync).
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Date, Numeric
from creative_boost.domain.base import BaseModel, generate_uuid


class Client(BaseModel, table=True):
    """CRM client as seen by the credit accounting service"""

    __tablename__ = "clients"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    name: str = Field(description="Legal/company name")
    brand_name: str = Field(default="", description="Brand shown in overviews")


class Engagement(BaseModel, table=True):
    """Billing contract between the agency and a client"""

    __tablename__ = "engagements"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    client_id: str = Field(index=True)
    status: str = Field(default="active", description="Only 'active' engagements are synced")
    start_date: date = Field(sa_column=Column(Date, nullable=False))
    end_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="None = ongoing"
    )


class EngagementService(BaseModel, table=True):
    """
    Billing line of an engagement

    The Creative Boost line is recognised by its service_id and carries the
    package defaults used when the sync creates the first month.
    """

    __tablename__ = "engagement_services"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    engagement_id: str = Field(index=True)
    service_id: str = Field(index=True)
    creative_boost_min_credits: Optional[Decimal] = Field(
        default=None, sa_column=Column(Numeric(18, 6), nullable=True)
    )
    creative_boost_max_credits: Optional[Decimal] = Field(
        default=None, sa_column=Column(Numeric(18, 6), nullable=True)
    )
    creative_boost_price_per_credit: Optional[Decimal] = Field(
        default=None, sa_column=Column(Numeric(18, 6), nullable=True)
    )
