"""Client Month Output Domain Entity

Production counts of one deliverable type for a client in a month.
"""

from datetime import datetime
from sqlmodel import Field, Index
from sqlalchemy import UniqueConstraint
from creative_boost.domain.base import BaseModel, generate_uuid, utcnow


class ClientMonthOutput(BaseModel, table=True):
    """
    Client Month Output - Normal and express piece counts

    Domain Rules:
    - At most one row per (client_id, output_type_id, year, month)
    - A row whose normal_count + express_count reaches zero is deleted
    - colleague_id attributes the credits to a colleague for compensation
    """

    __tablename__ = "creative_boost_client_month_outputs"
    __table_args__ = (
        UniqueConstraint(
            "client_id", "output_type_id", "year", "month", name="uq_client_month_output_type_period"
        ),
        Index("ix_client_month_outputs_period", "client_id", "year", "month"),
        Index("ix_client_month_outputs_colleague", "colleague_id", "year", "month"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique output row identifier"
    )

    client_id: str = Field(description="CRM client identifier")

    output_type_id: str = Field(description="Output type identifier (weak reference)")

    year: int = Field(description="Calendar year")

    month: int = Field(description="Calendar month (1-12)")

    normal_count: int = Field(default=0, description="Pieces delivered at normal speed")

    express_count: int = Field(default=0, description="Pieces delivered express (x1.5 credits)")

    colleague_id: str = Field(default="", description="Colleague who produced the pieces")

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last update timestamp"
    )

    @property
    def total_count(self) -> int:
        return (self.normal_count or 0) + (self.express_count or 0)
