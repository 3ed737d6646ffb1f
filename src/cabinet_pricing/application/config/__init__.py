"""Configuration loading for quoting files.

Example:
    ```python
    from pathlib import Path
    from cabinet_pricing.application.config import load_config, config_to_project

    config = load_config(Path("kitchen.json"))
    project = config_to_project(config)
    ```
"""

from cabinet_pricing.application.config.adapter import (
    config_to_accessories,
    config_to_materials,
    config_to_project,
    config_to_settings,
)
from cabinet_pricing.application.config.loader import (
    ConfigError,
    load_cabinet_record,
    load_catalog,
    load_config,
    load_config_from_dict,
    load_json_file,
    load_settings,
)
from cabinet_pricing.application.config.schema import (
    SUPPORTED_VERSIONS,
    AccessoryConfig,
    CatalogConfig,
    MaterialConfig,
    PricingSettingsConfig,
    ProjectConfiguration,
    ProjectHeaderConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AccessoryConfig",
    "CatalogConfig",
    "ConfigError",
    "MaterialConfig",
    "PricingSettingsConfig",
    "ProjectConfiguration",
    "ProjectHeaderConfig",
    "config_to_accessories",
    "config_to_materials",
    "config_to_project",
    "config_to_settings",
    "load_cabinet_record",
    "load_catalog",
    "load_config",
    "load_config_from_dict",
    "load_json_file",
    "load_settings",
]
