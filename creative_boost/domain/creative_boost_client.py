"""Creative Boost Client Domain Entity

Per-client default credit package settings.
"""

from dataclasses import dataclass
from decimal import Decimal
from sqlmodel import Field, Column
from sqlalchemy import Numeric
from creative_boost.domain.base import BaseModel


class CreativeBoostClient(BaseModel, table=True):
    """
    Creative Boost Client - Default package settings for one client

    Domain Rules:
    - One row per client (client_id is the primary key)
    - Created lazily when a client is first added to a month or
      discovered by the engagement sync
    - Defaults seed new monthly ledger rows
    """

    __tablename__ = "creative_boost_clients"

    client_id: str = Field(
        primary_key=True,
        description="CRM client identifier (one config per client)"
    )

    is_active: bool = Field(
        default=True,
        description="Inactive clients are not offered for new months"
    )

    default_min_credits: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Default contracted monthly minimum"
    )

    default_max_credits: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Default contracted monthly cap"
    )

    default_price_per_credit: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Default invoiced price per credit"
    )


@dataclass(frozen=True)
class PackageDefaults:
    """Fallback package settings when neither the caller nor the client config provide one"""

    min_credits: Decimal = Decimal("30")
    max_credits: Decimal = Decimal("50")
    price_per_credit: Decimal = Decimal("1500")

    @classmethod
    def from_config(cls, config) -> "PackageDefaults":
        return cls(
            min_credits=Decimal(str(config.DEFAULT_MIN_CREDITS)),
            max_credits=Decimal(str(config.DEFAULT_MAX_CREDITS)),
            price_per_credit=Decimal(str(config.DEFAULT_PRICE_PER_CREDIT)),
        )


DEFAULT_PACKAGE = PackageDefaults()
