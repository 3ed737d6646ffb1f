"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from cabinet_pricing.application.config import MaterialConfig, PricingSettingsConfig


class CabinetQuoteRequest(BaseModel):
    """Request for quoting a single cabinet.

    Materials and settings fall back to the server's store when omitted.
    """

    cabinet: dict[str, Any] | None = Field(
        default=None, description="Cabinet record; omitted for a default cabinet"
    )
    materials: list[MaterialConfig] | None = Field(
        default=None, description="Material catalog to price against"
    )
    settings: PricingSettingsConfig | None = Field(
        default=None, description="Pricing settings"
    )
    selected_material_id: str | None = Field(
        default=None, description="Material for a cabinet without explicit materials"
    )
    include_tva: bool = Field(default=True, description="Whether to add VAT")
    hinge_price: float | None = Field(
        default=None, ge=0, description="Unit price of a hinge"
    )


class ProjectQuoteRequest(BaseModel):
    """Request for quoting a project given inline or by store id."""

    config: dict[str, Any] | None = Field(
        default=None, description="Full project file JSON"
    )
    project_id: str | None = Field(default=None, description="Id of a stored project")
    include_tva: bool = Field(default=True, description="Whether to add VAT")

    @model_validator(mode="after")
    def exactly_one_source(self) -> "ProjectQuoteRequest":
        if (self.config is None) == (self.project_id is None):
            raise ValueError("Provide exactly one of 'config' or 'project_id'")
        return self


class NormalizeRequest(BaseModel):
    """Request for normalizing (or cloning) a cabinet record."""

    cabinet: dict[str, Any] | None = Field(
        default=None, description="Partial cabinet record"
    )
    materials: list[MaterialConfig] = Field(
        default_factory=list,
        description="Catalog used to resolve piece materials given by id",
    )
