"""Configuration schema models for quoting files.

This module provides the Pydantic models for JSON project files, catalog
files and pricing settings files. Cabinet records are accepted as free-form
objects: they are repaired by the cabinet normalizer rather than rejected.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from cabinet_pricing.domain.value_objects import (
    AccessoryItem,
    MaterialItem,
    PricingSettings,
)

# Supported schema versions for project files
# Version 1.0: Project header, cabinets, embedded catalog and settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PricingSettingsConfig(BaseModel):
    """Pricing percentages and currency.

    Attributes:
        tva: VAT percentage (19 means 19%).
        manopera: Labor percentage.
        transport: Transport percentage.
        adaos: Markup percentage.
        currency: Currency label.
        pdf_footer: Footer text for printed quotes.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    tva: float = Field(default=19, ge=0, le=100)
    manopera: float = Field(default=15, ge=0)
    transport: float = Field(default=5, ge=0)
    adaos: float = Field(default=10, ge=0)
    currency: str = Field(default="RON", min_length=1, max_length=8)
    pdf_footer: str = Field(default="", alias="pdfFooter")

    def to_domain(self) -> PricingSettings:
        return PricingSettings(
            tva=self.tva,
            manopera=self.manopera,
            transport=self.transport,
            adaos=self.adaos,
            currency=self.currency,
            pdf_footer=self.pdf_footer,
        )


class MaterialConfig(BaseModel):
    """A catalog material priced per square metre."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = ""
    price: float = Field(..., ge=0, description="Price per m²")
    thickness: float | None = Field(default=None, gt=0, description="Thickness in mm")

    def to_domain(self) -> MaterialItem:
        return MaterialItem(
            id=self.id, name=self.name, price=self.price, thickness=self.thickness
        )


class AccessoryConfig(BaseModel):
    """A catalog accessory priced per unit."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = ""
    price: float = Field(..., ge=0, description="Price per unit")
    quantity: float = Field(default=1, ge=0)

    def to_domain(self) -> AccessoryItem:
        return AccessoryItem(
            id=self.id, name=self.name, price=self.price, quantity=self.quantity
        )


class CatalogConfig(BaseModel):
    """Materials and accessories available for pricing."""

    model_config = ConfigDict(extra="ignore")

    materials: list[MaterialConfig] = Field(default_factory=list)
    accessories: list[AccessoryConfig] = Field(default_factory=list)

    @field_validator("materials")
    @classmethod
    def validate_unique_material_ids(cls, v: list[MaterialConfig]) -> list[MaterialConfig]:
        ids = [m.id for m in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate material ids: {', '.join(duplicates)}")
        return v


class ProjectHeaderConfig(BaseModel):
    """Descriptive project fields."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str = ""
    client: str = ""
    date: str = ""
    status: str = "draft"


class ProjectConfiguration(BaseModel):
    """Root model of a project quoting file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0").
        project: Project header.
        cabinets: Raw cabinet records, normalized on load.
        catalog: Embedded materials and accessories.
        settings: Pricing settings. Defaults apply when omitted.
        include_tva: Whether totals include VAT.

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     project=ProjectHeaderConfig(name="Kitchen"),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project: ProjectHeaderConfig = Field(default_factory=ProjectHeaderConfig)
    cabinets: list[dict[str, Any]] = Field(default_factory=list)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    settings: PricingSettingsConfig | None = None
    include_tva: bool = True

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
