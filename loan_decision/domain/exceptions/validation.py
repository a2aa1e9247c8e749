"""Loan application validation exceptions.

These are raised while checking a loan application against the business
rules. The decision engine catches them and turns them into a rejected
decision, so they never reach the HTTP layer on their own.
"""

from .base import DomainException


class LoanValidationException(DomainException):
    """Base class for loan application rule violations."""

    default_message = "Invalid loan application!"
    code = "INVALID_LOAN_APPLICATION"


class InvalidPersonalCodeException(LoanValidationException):
    """Raised when the personal ID code fails format or checksum validation."""

    default_message = "Invalid personal ID code!"
    code = "INVALID_PERSONAL_CODE"


class InvalidLoanAmountException(LoanValidationException):
    """Raised when the requested amount is outside the allowed range."""

    default_message = "Invalid loan amount!"
    code = "INVALID_LOAN_AMOUNT"


class InvalidLoanPeriodException(LoanValidationException):
    """Raised when the requested period is outside the allowed range."""

    default_message = "Invalid loan period!"
    code = "INVALID_LOAN_PERIOD"


class InvalidAgeException(LoanValidationException):
    """Raised when the applicant is too young or past the age limit."""

    default_message = "Invalid applicant age!"
    code = "INVALID_AGE"
