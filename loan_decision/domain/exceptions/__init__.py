"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .validation import (
    LoanValidationException,
    InvalidPersonalCodeException,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidAgeException,
)
from .decision import NoValidLoanException
from .personal_code import PersonalCodeParseException

__all__ = [
    "DomainException",
    "LoanValidationException",
    "InvalidPersonalCodeException",
    "InvalidLoanAmountException",
    "InvalidLoanPeriodException",
    "InvalidAgeException",
    "NoValidLoanException",
    "PersonalCodeParseException",
]
