"""Decision-related domain exceptions."""

from .base import DomainException


class NoValidLoanException(DomainException):
    """Raised when no loan can be offered for the applicant at all."""

    default_message = "No valid loan found!"
    code = "NO_VALID_LOAN"
