"""Pydantic schemas for the REST API."""

from cabinet_pricing.web.schemas.requests import (
    CabinetQuoteRequest,
    NormalizeRequest,
    ProjectQuoteRequest,
)
from cabinet_pricing.web.schemas.responses import (
    BreakdownSchema,
    CabinetLineSchema,
    CabinetQuoteResponse,
    CabinetRecordResponse,
    ErrorResponseSchema,
    HingeSchema,
    ProjectQuoteResponse,
    ProjectSummarySchema,
)

__all__ = [
    # Requests
    "CabinetQuoteRequest",
    "NormalizeRequest",
    "ProjectQuoteRequest",
    # Responses
    "BreakdownSchema",
    "CabinetLineSchema",
    "CabinetQuoteResponse",
    "CabinetRecordResponse",
    "ErrorResponseSchema",
    "HingeSchema",
    "ProjectQuoteResponse",
    "ProjectSummarySchema",
]
