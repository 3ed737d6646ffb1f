"""Configuration file loader with comprehensive error handling.

This module loads JSON project, catalog and settings files. It handles file
system errors, JSON parsing errors, and Pydantic validation errors with clear,
actionable error messages.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cabinet_pricing.application.config.schema import (
    CatalogConfig,
    PricingSettingsConfig,
    ProjectConfiguration,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("catalog", "materials", 0, "price"))
        'catalog.materials[0].price'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value/error_type dicts."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def load_json_file(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        ConfigError: With error_type "file_not_found", "permission_denied",
            "file_read_error" or "json_parse".
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def _validate(model: type[ModelT], data: Any, path: Path | None = None) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a project quoting file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     config = load_config(Path("kitchen.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    return _validate(ProjectConfiguration, load_json_file(path), path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate a project configuration held in memory (API requests, tests)."""
    return _validate(ProjectConfiguration, data)


def load_catalog(path: Path) -> CatalogConfig:
    """Load a catalog file with ``materials`` and ``accessories`` lists."""
    return _validate(CatalogConfig, load_json_file(path), path)


def load_settings(path: Path) -> PricingSettingsConfig:
    """Load a pricing settings file."""
    return _validate(PricingSettingsConfig, load_json_file(path), path)


def load_cabinet_record(path: Path) -> dict[str, Any]:
    """Load a single raw cabinet record.

    The record is not schema-validated; the normalizer repairs whatever is
    missing. Only a top-level JSON object is required.
    """
    data = load_json_file(path)
    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Cabinet file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )
    return data
