"""Cabinet record endpoints."""

from fastapi import APIRouter

from cabinet_pricing.domain import clone_cabinet, normalize_cabinet
from cabinet_pricing.web.schemas.requests import NormalizeRequest
from cabinet_pricing.web.schemas.responses import CabinetRecordResponse

router = APIRouter(prefix="/cabinets", tags=["cabinets"])


@router.post("/normalize", response_model=CabinetRecordResponse)
async def normalize(request: NormalizeRequest) -> CabinetRecordResponse:
    """Return the canonical, fully-populated form of a cabinet record."""
    materials = [m.to_domain() for m in request.materials]
    cabinet = normalize_cabinet(request.cabinet, materials)
    return CabinetRecordResponse(cabinet=cabinet.to_dict())


@router.post("/clone", response_model=CabinetRecordResponse)
async def clone(request: NormalizeRequest) -> CabinetRecordResponse:
    """Return a normalized copy of a cabinet under a freshly generated id."""
    materials = [m.to_domain() for m in request.materials]
    cabinet = clone_cabinet(normalize_cabinet(request.cabinet, materials))
    return CabinetRecordResponse(cabinet=cabinet.to_dict())
