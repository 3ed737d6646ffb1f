"""Typer CLI for cabinet and project quoting."""

import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError as PydanticValidationError

from cabinet_pricing.application import CabinetQuote, ProjectNotFoundError, ProjectQuote
from cabinet_pricing.application.config import (
    ConfigError,
    PricingSettingsConfig,
    config_to_project,
    config_to_settings,
    load_cabinet_record,
    load_catalog,
    load_config,
    load_settings,
)
from cabinet_pricing.application.factory import ServiceFactory
from cabinet_pricing.domain import (
    MaterialItem,
    PricingSettings,
    normalize_cabinet,
    project_total,
)
from cabinet_pricing.domain.services.constants import DEFAULT_HINGE_PRICE
from cabinet_pricing.infrastructure import (
    CabinetQuoteFormatter,
    JsonFileStore,
    JsonQuoteExporter,
    ProjectQuoteFormatter,
    format_currency,
)

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="cabinet-pricing",
    help="Price furniture cabinets and whole projects from catalog data.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Cabinet pricing engine."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _display_config_error(error: ConfigError) -> None:
    typer.echo(f"Error: {error.message}", err=True)
    if error.error_type == "validation":
        return
    for detail in error.details:
        typer.echo(f"  - {detail}", err=True)


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        _fail(f"Unknown format '{output_format}'. Available: {', '.join(OUTPUT_FORMATS)}")


def _render(quote: CabinetQuote | ProjectQuote, output_format: str) -> str:
    if output_format == "json":
        return JsonQuoteExporter().export(quote)
    if isinstance(quote, CabinetQuote):
        return CabinetQuoteFormatter().format(quote)
    return ProjectQuoteFormatter().format(quote)


def _emit(text: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(text)
        return
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot write {output_file}: {e}")
    typer.echo(f"Quote written to: {output_file}")


@app.command(name="quote-cabinet")
def quote_cabinet(
    cabinet_file: Annotated[
        Path,
        typer.Argument(help="Path to a JSON cabinet record"),
    ],
    store: Annotated[
        Path | None,
        typer.Option("--store", "-s", help="Store file with materials, accessories and settings"),
    ] = None,
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Catalog JSON file (overrides the store's materials)"),
    ] = None,
    settings_file: Annotated[
        Path | None,
        typer.Option("--settings", help="Settings JSON file (overrides the store's settings)"),
    ] = None,
    material_id: Annotated[
        str | None,
        typer.Option("--material", "-m", help="Material for a cabinet without explicit materials"),
    ] = None,
    hinge_price: Annotated[
        float,
        typer.Option("--hinge-price", help="Unit price of a hinge"),
    ] = DEFAULT_HINGE_PRICE,
    no_tva: Annotated[
        bool,
        typer.Option("--no-tva", help="Leave VAT out of the total"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the quote to a file"),
    ] = None,
) -> None:
    """Quote a single cabinet.

    Materials come from --catalog or the store. A cabinet with no explicit
    materials is estimated as a six-panel box in --material (or the first
    catalog material).

    Example:
        cabinet-pricing quote-cabinet base-900.json --store store.json --material pal_alb
    """
    _check_format(output_format)

    factory = ServiceFactory(hinge_price=hinge_price)
    materials: list[MaterialItem] = []
    settings = PricingSettings()
    try:
        record = load_cabinet_record(cabinet_file)
        if store is not None:
            catalog_store = JsonFileStore(store)
            materials = factory.create_catalog_service(catalog_store).materials()
            settings = catalog_store.get_settings()
        if catalog_file is not None:
            materials = [m.to_domain() for m in load_catalog(catalog_file).materials]
        if settings_file is not None:
            settings = load_settings(settings_file).to_domain()
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)

    if material_id is not None and not any(m.id == material_id for m in materials):
        typer.echo(f"Warning: material '{material_id}' is not in the catalog", err=True)

    quote = factory.create_cabinet_command().execute(
        record,
        materials,
        settings,
        selected_material_id=material_id,
        include_tva=not no_tva,
    )
    _emit(_render(quote, output_format), output_file)


@app.command(name="quote-project")
def quote_project(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Project JSON file"),
    ] = None,
    project_id: Annotated[
        str | None,
        typer.Option("--project-id", "-p", help="Id of a project held in the store"),
    ] = None,
    store: Annotated[
        Path | None,
        typer.Option("--store", "-s", help="Store file (required with --project-id)"),
    ] = None,
    no_tva: Annotated[
        bool,
        typer.Option("--no-tva", help="Leave VAT out of the total"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the quote to a file"),
    ] = None,
) -> None:
    """Quote a whole project.

    The project is read either from a project file (--config) or from a
    store (--project-id with --store). The stored project total is ignored
    and re-derived from the cabinets.

    Example:
        cabinet-pricing quote-project --config kitchen.json --format json
    """
    _check_format(output_format)
    if (config_file is None) == (project_id is None):
        _fail("Provide exactly one of --config or --project-id")

    factory = ServiceFactory()
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            _display_config_error(e)
            raise typer.Exit(code=1)
        project = config_to_project(config)
        include_tva = config.include_tva and not no_tva
        quote = factory.create_project_command().execute(
            project, config_to_settings(config), include_tva
        )
    else:
        if store is None:
            _fail("--store is required with --project-id")
        service = factory.create_catalog_service(JsonFileStore(store))
        try:
            quote = service.quote_project(project_id, include_tva=not no_tva)
        except ProjectNotFoundError as e:
            _fail(str(e))

    _emit(_render(quote, output_format), output_file)


@app.command()
def normalize(
    cabinet_file: Annotated[
        Path,
        typer.Argument(help="Path to a JSON cabinet record"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Catalog used to resolve piece materials given by id"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the normalized record to a file"),
    ] = None,
) -> None:
    """Print the canonical form of a cabinet record.

    Missing fields are filled with defaults and the nested and top-level
    dimensions are made to agree.
    """
    try:
        record = load_cabinet_record(cabinet_file)
        materials = (
            [m.to_domain() for m in load_catalog(catalog_file).materials]
            if catalog_file is not None
            else []
        )
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)

    cabinet = normalize_cabinet(record, materials)
    _emit(json.dumps(cabinet.to_dict(), indent=2, ensure_ascii=False), output_file)


@app.command()
def settings(
    store: Annotated[
        Path,
        typer.Option("--store", "-s", help="Store file"),
    ],
    tva: Annotated[float | None, typer.Option("--tva", help="VAT percentage")] = None,
    manopera: Annotated[float | None, typer.Option("--manopera", help="Labor percentage")] = None,
    transport: Annotated[float | None, typer.Option("--transport", help="Transport percentage")] = None,
    adaos: Annotated[float | None, typer.Option("--adaos", help="Markup percentage")] = None,
    currency: Annotated[str | None, typer.Option("--currency", help="Currency label")] = None,
) -> None:
    """Show the store's pricing settings, updating any option given."""
    catalog_store = JsonFileStore(store)
    current = catalog_store.get_settings()

    updates = {
        key: value
        for key, value in {
            "tva": tva,
            "manopera": manopera,
            "transport": transport,
            "adaos": adaos,
            "currency": currency,
        }.items()
        if value is not None
    }
    if updates:
        merged = current.to_dict()
        merged.update(updates)
        try:
            validated = PricingSettingsConfig.model_validate(merged)
        except PydanticValidationError as e:
            _fail(f"Invalid settings: {e.errors()[0]['msg']}")
        current = validated.to_domain()
        if not catalog_store.update_settings(current):
            _fail(f"Could not save settings to {store}")
        typer.echo(f"Settings saved to: {store}")

    typer.echo(f"VAT (tva):        {current.tva:g}%")
    typer.echo(f"Labor (manopera): {current.manopera:g}%")
    typer.echo(f"Transport:        {current.transport:g}%")
    typer.echo(f"Markup (adaos):   {current.adaos:g}%")
    typer.echo(f"Currency:         {current.currency}")
    typer.echo(f"Example: 1000 base -> {format_currency(project_total(1000, 0, current).total, current.currency)}")


if __name__ == "__main__":
    app()
