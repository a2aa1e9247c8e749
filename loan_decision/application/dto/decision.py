"""Data transfer objects for loan decision operations."""

from dataclasses import dataclass
from typing import Optional

from loan_decision.service.engine import Decision


@dataclass(frozen=True)
class DecisionRequest:
    """Input data for requesting a loan decision."""
    personal_code: str
    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class DecisionResponse:
    """Response data for a loan decision."""

    outcome: str
    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str]

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        return cls(
            outcome=decision.outcome.value,
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
        )
