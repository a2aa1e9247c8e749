"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from loan_decision.service.engine import EngineSettings
from loan_decision.service.engine.settings import get_engine_settings

health_router = APIRouter()


class LoanLimits(BaseModel):
    min_loan_amount: int
    max_loan_amount: int
    min_loan_period: int
    max_loan_period: int


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str
    limits: LoanLimits


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the service status and the loan limits it is running with.",
)
async def health_check(
    request: Request,
    engine: Annotated[EngineSettings, Depends(get_engine_settings)],
) -> HealthResponse:
    settings = request.app.state.settings
    return HealthResponse(
        service=settings.app_name,
        version=settings.app_version,
        limits=LoanLimits(
            min_loan_amount=engine.min_loan_amount,
            max_loan_amount=engine.max_loan_amount,
            min_loan_period=engine.min_loan_period,
            max_loan_period=engine.max_loan_period,
        ),
    )
