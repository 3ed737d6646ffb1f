"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class HingeSchema(BaseModel):
    """Hinge count and cost of a cabinet."""

    quantity: int = Field(..., description="Number of hinges")
    cost: float = Field(..., description="Total hinge cost")


class BreakdownSchema(BaseModel):
    """Price breakdown with every intermediate figure."""

    material_cost: float
    accessory_cost: float
    manopera_cost: float = Field(..., description="Labor")
    transport_cost: float
    adaos_cost: float = Field(..., description="Markup")
    tva_cost: float = Field(..., description="VAT")
    subtotal: float = Field(..., description="Total before VAT")
    total: float


class CabinetQuoteResponse(BaseModel):
    """Response for a single-cabinet quote."""

    cabinet: dict[str, Any] = Field(..., description="Normalized cabinet record")
    material_cost: float
    accessory_cost: float
    hinges: HingeSchema
    total_cost: float = Field(..., description="Material + accessory + hinge cost")
    breakdown: BreakdownSchema
    currency: str
    include_tva: bool
    warnings: list[str] = Field(default_factory=list, description="Unresolved catalog references")


class CabinetLineSchema(BaseModel):
    """One cabinet's contribution to a project quote."""

    id: str
    name: str
    material_cost: float
    accessory_cost: float


class ProjectSummarySchema(BaseModel):
    """Project header with its re-derived total."""

    id: str
    name: str
    client: str
    date: str
    status: str
    total: float


class ProjectQuoteResponse(BaseModel):
    """Response for a project quote."""

    project: ProjectSummarySchema
    cabinets: list[CabinetLineSchema] = Field(default_factory=list)
    breakdown: BreakdownSchema
    currency: str
    include_tva: bool


class CabinetRecordResponse(BaseModel):
    """A normalized cabinet record."""

    cabinet: dict[str, Any] = Field(..., description="Cabinet record in stored shape")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
