"""Adapters from configuration models to domain objects."""

from cabinet_pricing.application.config.schema import ProjectConfiguration
from cabinet_pricing.domain.entities import Project
from cabinet_pricing.domain.services import normalize_project
from cabinet_pricing.domain.value_objects import (
    AccessoryItem,
    MaterialItem,
    PricingSettings,
)


def config_to_materials(config: ProjectConfiguration) -> list[MaterialItem]:
    return [m.to_domain() for m in config.catalog.materials]


def config_to_accessories(config: ProjectConfiguration) -> list[AccessoryItem]:
    return [a.to_domain() for a in config.catalog.accessories]


def config_to_settings(config: ProjectConfiguration) -> PricingSettings:
    """Settings from the file, or defaults when the file has none."""
    if config.settings is None:
        return PricingSettings()
    return config.settings.to_domain()


def config_to_project(config: ProjectConfiguration) -> Project:
    """Build a Project whose cabinets have all been normalized.

    Pieces whose material is a bare id are resolved against the embedded
    catalog.
    """
    header = config.project.model_dump(exclude_none=True)
    header["cabinets"] = config.cabinets
    return normalize_project(header, config_to_materials(config))
