"""
Data models for the loan decision engine.

These models describe the result of one loan evaluation and the small
value types the engine works with along the way.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta


class Country(str, Enum):
    """Country of the applicant, as encoded in the personal code."""
    ESTONIA = "estonia"
    LATVIA = "latvia"
    LITHUANIA = "lithuania"
    OTHER = "other"


@dataclass(frozen=True)
class LifeExpectancy:
    """Expected lifespan as a calendar period."""
    years: int
    months: int = 0
    days: int = 0

    def as_relativedelta(self) -> relativedelta:
        return relativedelta(years=self.years, months=self.months, days=self.days)


class DecisionOutcome(str, Enum):
    """Kind of result a loan evaluation produced."""
    APPROVED = "approved"            # Offer satisfies the requested amount
    COUNTER_OFFER = "counter_offer"  # Best possible offer, below the requested amount
    REJECTED = "rejected"            # Application broke a business rule


@dataclass(frozen=True)
class Decision:
    """
    The outcome of a single loan evaluation.

    Attributes:
        outcome: Which kind of result this is
        loan_amount: Offered amount in euros (None if rejected)
        loan_period: Offered period in months (None if rejected)
        error_message: Explanation for rejections and counter-offers
    """
    outcome: DecisionOutcome
    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(
            outcome=DecisionOutcome.APPROVED,
            loan_amount=loan_amount,
            loan_period=loan_period,
        )

    @classmethod
    def counter_offer(cls, loan_amount: int, loan_period: int, message: str) -> "Decision":
        return cls(
            outcome=DecisionOutcome.COUNTER_OFFER,
            loan_amount=loan_amount,
            loan_period=loan_period,
            error_message=message,
        )

    @classmethod
    def rejected(cls, message: str) -> "Decision":
        return cls(outcome=DecisionOutcome.REJECTED, error_message=message)

    @property
    def has_offer(self) -> bool:
        return self.loan_amount is not None and self.loan_period is not None
