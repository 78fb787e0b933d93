"""Output Type Domain Entity

Catalog of deliverable kinds a colleague can produce for a client and the
number of credits each one costs.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column
from sqlalchemy import Numeric, String
from creative_boost.domain.base import BaseModel, generate_uuid, utcnow


class OutputCategory(str, Enum):
    """Deliverable categories"""
    BANNER = "banner"
    BANNER_TRANSLATION = "banner_translation"
    BANNER_REVISION = "banner_revision"
    AI_PHOTO = "ai_photo"
    VIDEO = "video"
    VIDEO_TRANSLATION = "video_translation"
    VIDEO_REVISION = "video_revision"


class OutputType(BaseModel, table=True):
    """
    Output Type - Deliverable kind with its base credit cost

    Domain Rules:
    - Identity is immutable, base_credits may change
    - Never hard-deleted, only deactivated (is_active=False)
    - Outputs referencing an unknown type cost 0 credits
    """

    __tablename__ = "output_types"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique output type identifier"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Display name (e.g., 'Static banner')"
    )

    category: OutputCategory = Field(
        default=OutputCategory.BANNER,
        description="Deliverable category"
    )

    base_credits: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Credits charged for one normal (non-express) piece"
    )

    description: str = Field(
        default="",
        description="Optional description shown in the catalog"
    )

    is_active: bool = Field(
        default=True,
        description="Inactive types are hidden from new output entry"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last update timestamp"
    )
