"""Decision API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from loan_decision.application.dto import DecisionRequest
from loan_decision.application.services import DecisionService
from loan_decision.core.dependencies import get_decision_service
from loan_decision.presentation.schemas import (
    DecisionRequestSchema,
    DecisionResponseSchema,
    ErrorResponseSchema,
)

decision_router = APIRouter(
    prefix="/decision",
    responses={
        404: {"model": ErrorResponseSchema, "description": "No valid loan found"},
        500: {"model": ErrorResponseSchema, "description": "Unexpected server error"},
    },
)


@decision_router.post(
    "",
    response_model=DecisionResponseSchema,
    status_code=200,
    summary="Request Loan Decision",
    description="""
    Request a loan decision for an applicant.

    Returns the best loan that can be approved. When the requested amount
    cannot be reached within the maximum period, the largest possible loan
    is offered with an explanatory message. Invalid applications are
    answered with a rejected decision that explains the problem.
    """,
    responses={
        200: {"description": "Decision processed successfully"},
    },
)
async def create_decision(
    request: DecisionRequestSchema,
    decision_service: Annotated[DecisionService, Depends(get_decision_service)],
) -> DecisionResponseSchema:
    dto = DecisionRequest(
        personal_code=request.personal_code,
        loan_amount=request.loan_amount,
        loan_period=request.loan_period,
    )

    response = await decision_service.make_decision(dto)

    return DecisionResponseSchema(
        outcome=response.outcome,
        loan_amount=response.loan_amount,
        loan_period=response.loan_period,
        error_message=response.error_message,
    )
