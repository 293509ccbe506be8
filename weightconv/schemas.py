"""Pydantic schemas for the Weight Converter API.

Request/response models for:
- Conversion (/convert)
- Readiness (/ready)
"""

from typing import Any, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field


# --- Conversion ---

class ConversionRequest(BaseModel):
    """Wire shape of a conversion: {"from": ..., "to": ..., "quantity": ...}.

    `quantity` is left untyped here; the conversion core decides what is a
    valid amount so that a missing or non-finite value maps to
    invalid_quantity instead of a generic 422.
    """
    model_config = ConfigDict(populate_by_name=True)

    from_unit: str = Field(..., alias="from")
    to_unit: str = Field(..., alias="to")
    quantity: Any = None
    precision: Optional[int] = Field(default=None, ge=0, le=15)


class ConversionResponse(BaseModel):
    result: float


class ConversionErrorDetail(BaseModel):
    error: Literal["unrecognized_unit", "invalid_quantity", "conversion_error"]
    message: str
    token: Optional[str] = None


# --- Readiness ---

class ReadyResponse(BaseModel):
    ok: bool = True
    units: list[str]
