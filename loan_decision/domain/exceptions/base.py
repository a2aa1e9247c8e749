"""Base domain exception."""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Subclasses set `default_message` and `code`, so most of them can be
    raised without arguments. The message can still be overridden per
    instance when the failure needs more detail.
    """

    default_message: str = "A domain error occurred."
    code: str = "DOMAIN_ERROR"

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        if code is not None:
            self.code = code
        super().__init__(self.message)
