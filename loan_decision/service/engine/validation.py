"""
Input Validation for the Loan Decision Gateway.

Checks a loan application against the business rules in a fixed order
and stops at the first violation.
"""

from datetime import date
from typing import Optional

from loan_decision.domain.exceptions import (
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
)
from loan_decision.domain.interfaces import PersonalCodeParser, PersonalCodeValidator

from .age import validate_age
from .settings import EngineSettings, engine_settings


def verify_inputs(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    validator: PersonalCodeValidator,
    parser: PersonalCodeParser,
    settings: EngineSettings = engine_settings,
    today: Optional[date] = None,
) -> None:
    """
    Verify that a loan application satisfies all business rules.

    Order:
        1. Personal code format and checksum
        2. Loan amount within [min_loan_amount, max_loan_amount]
        3. Loan period within [min_loan_period, max_loan_period]
        4. Applicant age and life expectancy

    Raises:
        InvalidPersonalCodeException: If the personal code is invalid
        InvalidLoanAmountException: If the amount is out of range
        InvalidLoanPeriodException: If the period is out of range
        InvalidAgeException: If the applicant's age rules out a loan
    """
    if not validator.is_valid(personal_code):
        raise InvalidPersonalCodeException()

    if not settings.min_loan_amount <= loan_amount <= settings.max_loan_amount:
        raise InvalidLoanAmountException()

    if not settings.min_loan_period <= loan_period <= settings.max_loan_period:
        raise InvalidLoanPeriodException()

    validate_age(personal_code, parser, settings, today)
