"""Quoting endpoints."""

from fastapi import APIRouter

from cabinet_pricing.application.config import (
    config_to_project,
    config_to_settings,
    load_config_from_dict,
)
from cabinet_pricing.application.dtos import CabinetQuote, ProjectQuote
from cabinet_pricing.application.factory import ServiceFactory
from cabinet_pricing.domain import PriceBreakdown
from cabinet_pricing.web.dependencies import CatalogServiceDep, ServiceFactoryDep
from cabinet_pricing.web.schemas.requests import CabinetQuoteRequest, ProjectQuoteRequest
from cabinet_pricing.web.schemas.responses import (
    BreakdownSchema,
    CabinetLineSchema,
    CabinetQuoteResponse,
    HingeSchema,
    ProjectQuoteResponse,
    ProjectSummarySchema,
)

router = APIRouter(prefix="/quotes", tags=["quotes"])


def _breakdown_to_schema(breakdown: PriceBreakdown) -> BreakdownSchema:
    return BreakdownSchema(
        material_cost=breakdown.material_cost,
        accessory_cost=breakdown.accessory_cost,
        manopera_cost=breakdown.manopera_cost,
        transport_cost=breakdown.transport_cost,
        adaos_cost=breakdown.adaos_cost,
        tva_cost=breakdown.tva_cost,
        subtotal=breakdown.subtotal,
        total=breakdown.total,
    )


def _cabinet_quote_to_schema(quote: CabinetQuote) -> CabinetQuoteResponse:
    return CabinetQuoteResponse(
        cabinet=quote.cabinet.to_dict(),
        material_cost=quote.cost.material_cost,
        accessory_cost=quote.cost.accessory_cost,
        hinges=HingeSchema(quantity=quote.cost.hinges.quantity, cost=quote.cost.hinges.cost),
        total_cost=quote.cost.total,
        breakdown=_breakdown_to_schema(quote.breakdown),
        currency=quote.settings.currency,
        include_tva=quote.include_tva,
        warnings=quote.warnings,
    )


def _project_quote_to_schema(quote: ProjectQuote) -> ProjectQuoteResponse:
    project = quote.project
    return ProjectQuoteResponse(
        project=ProjectSummarySchema(
            id=project.id,
            name=project.name,
            client=project.client,
            date=project.date,
            status=project.status,
            total=project.total,
        ),
        cabinets=[
            CabinetLineSchema(
                id=line.cabinet_id,
                name=line.name,
                material_cost=line.material_cost,
                accessory_cost=line.accessory_cost,
            )
            for line in quote.lines
        ],
        breakdown=_breakdown_to_schema(quote.breakdown),
        currency=quote.settings.currency,
        include_tva=quote.include_tva,
    )


@router.post("/cabinet", response_model=CabinetQuoteResponse)
async def quote_cabinet(
    request: CabinetQuoteRequest,
    factory: ServiceFactoryDep,
    service: CatalogServiceDep,
) -> CabinetQuoteResponse:
    """Quote a single cabinet.

    Materials and settings missing from the request are read from the store.
    Unknown material or accessory ids are priced at 0 and listed in
    ``warnings``.
    """
    if request.materials is not None:
        materials = [m.to_domain() for m in request.materials]
    else:
        materials = service.materials()
    if request.settings is not None:
        settings = request.settings.to_domain()
    else:
        settings = service.reader.get_settings()

    if request.hinge_price is not None:
        factory = ServiceFactory(hinge_price=request.hinge_price)

    quote = factory.create_cabinet_command().execute(
        request.cabinet,
        materials,
        settings,
        selected_material_id=request.selected_material_id,
        include_tva=request.include_tva,
    )
    return _cabinet_quote_to_schema(quote)


@router.post("/project", response_model=ProjectQuoteResponse)
async def quote_project(
    request: ProjectQuoteRequest,
    factory: ServiceFactoryDep,
    service: CatalogServiceDep,
) -> ProjectQuoteResponse:
    """Quote a project given inline as a project file or by its store id.

    Raises:
        ConfigError: If the inline project file is invalid (422).
        ProjectNotFoundError: If the project id is not in the store (404).
    """
    if request.config is not None:
        config = load_config_from_dict(request.config)
        quote = factory.create_project_command().execute(
            config_to_project(config),
            config_to_settings(config),
            config.include_tva and request.include_tva,
        )
    else:
        quote = service.quote_project(request.project_id, request.include_tva)
    return _project_quote_to_schema(quote)
