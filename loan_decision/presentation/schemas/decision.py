"""Decision-related Pydantic schemas."""

from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


class DecisionRequestSchema(BaseModel):
    """Schema for POST /v1/decision request body.

    Amount and period ranges are checked by the decision engine, which
    answers out-of-range values with a rejected decision.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "personal_code": "50307172740",
                    "loan_amount": 4000,
                    "loan_period": 12,
                }
            ]
        }
    )
    personal_code: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="National identity code of the applicant",
        examples=["50307172740"],
    )
    loan_amount: int = Field(
        ...,
        description="Requested loan amount in euros (2000-10000)",
        examples=[4000],
    )
    loan_period: int = Field(
        ...,
        description="Requested repayment period in months (12-60)",
        examples=[12],
    )

    @field_validator("personal_code")
    @classmethod
    def strip_personal_code(cls, v: str) -> str:
        """Drop surrounding whitespace from the personal code."""
        return v.strip()


class DecisionResponseSchema(BaseModel):
    """Schema for POST /v1/decision response body."""

    outcome: Literal["approved", "counter_offer", "rejected"] = Field(
        ...,
        description="Kind of decision: approved, counter_offer or rejected",
    )
    loan_amount: Optional[int] = Field(
        None,
        description="Offered loan amount in euros (null if rejected)",
        examples=[4200],
    )
    loan_period: Optional[int] = Field(
        None,
        description="Offered repayment period in months (null if rejected)",
        examples=[42],
    )
    error_message: Optional[str] = Field(
        None,
        description="Reason for a rejection or note on a counter-offer",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "outcome": "approved",
                    "loan_amount": 4200,
                    "loan_period": 42,
                    "error_message": None,
                },
                {
                    "outcome": "rejected",
                    "loan_amount": None,
                    "loan_period": None,
                    "error_message": "Invalid loan amount!",
                },
            ]
        }
    )
