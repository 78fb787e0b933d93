"""Request schemas for the Creative Boost API

Pydantic models for validating incoming HTTP requests.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from creative_boost.domain.client_month import MonthStatus
from creative_boost.domain.output_type import OutputCategory


class OutputTypeCreateRequestSchema(BaseModel):
    """
    Request schema for adding an output type

    Used for POST /creative-boost/output-types endpoint.
    """

    name: str = Field(..., min_length=1, description="Display name")
    category: OutputCategory = Field(default=OutputCategory.BANNER, description="Deliverable category")
    base_credits: Decimal = Field(..., ge=0, description="Credits for one normal piece")
    description: str = Field(default="", description="Optional description")
    is_active: bool = Field(default=True)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Video translation",
                "category": "video_translation",
                "base_credits": "2",
                "description": "Subtitles and voice-over in one language",
            }
        }


class OutputTypeUpdateRequestSchema(BaseModel):
    """Used for PATCH /creative-boost/output-types/{id}; omitted fields are unchanged"""

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[OutputCategory] = None
    base_credits: Optional[Decimal] = Field(default=None, ge=0)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class CalculateCreditsRequestSchema(BaseModel):
    output_type_id: str = Field(..., min_length=1, description="Output type identifier")
    normal_count: int = Field(default=0, ge=0, description="Normal pieces")
    express_count: int = Field(default=0, ge=0, description="Express pieces")


class CreativeBoostClientRequestSchema(BaseModel):
    """
    Request schema for registering a client's package defaults

    Used for POST /creative-boost/clients endpoint. Omitted defaults fall
    back to the configured package (30 / 50 / 1500).
    """

    client_id: str = Field(..., min_length=1, description="CRM client identifier")
    is_active: Optional[bool] = None
    default_min_credits: Optional[Decimal] = Field(default=None, ge=0)
    default_max_credits: Optional[Decimal] = Field(default=None, ge=0)
    default_price_per_credit: Optional[Decimal] = Field(default=None, ge=0)


class ClientMonthCreateRequestSchema(BaseModel):
    """
    Request schema for adding a client to a month

    Used for POST /creative-boost/client-months endpoint. Settings are
    ignored when the client is already on the month.
    """

    client_id: str = Field(..., min_length=1, description="CRM client identifier")
    year: int = Field(..., ge=2000, le=2100, description="Calendar year")
    month: int = Field(..., ge=1, le=12, description="Calendar month")
    min_credits: Optional[Decimal] = Field(default=None, ge=0)
    max_credits: Optional[Decimal] = Field(default=None, ge=0)
    price_per_credit: Optional[Decimal] = Field(default=None, ge=0)
    colleague_id: Optional[str] = None
    status: Optional[MonthStatus] = None
    engagement_service_id: Optional[str] = None
    engagement_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "client_42",
                "year": 2024,
                "month": 3,
                "max_credits": "60",
                "colleague_id": "col_7",
            }
        }


class ClientMonthUpdateRequestSchema(BaseModel):
    """
    Request schema for updating a client month

    Used for PATCH /creative-boost/client-months/{id}. Changes of
    max_credits, price_per_credit and status are recorded in the settings
    history under the calling actor.
    """

    min_credits: Optional[Decimal] = Field(default=None, ge=0)
    max_credits: Optional[Decimal] = Field(default=None, ge=0)
    price_per_credit: Optional[Decimal] = Field(default=None, ge=0)
    colleague_id: Optional[str] = None
    status: Optional[MonthStatus] = None

    class Config:
        json_schema_extra = {"example": {"max_credits": "60", "status": "inactive"}}


class OutputUpdateRequestSchema(BaseModel):
    """
    Request schema for setting production counts

    Used for PUT /creative-boost/outputs/{client_id}/{output_type_id}/{year}/{month}.
    Setting both counts to 0 removes the output row.
    """

    normal_count: Optional[int] = Field(default=None, ge=0)
    express_count: Optional[int] = Field(default=None, ge=0)
    colleague_id: Optional[str] = None

    class Config:
        json_schema_extra = {"example": {"normal_count": 3, "express_count": 1, "colleague_id": "col_7"}}
