"""Personal code parsing exceptions."""

from .base import DomainException


class PersonalCodeParseException(DomainException):
    """Raised when a personal code that passed validation cannot be parsed."""

    code = "PERSONAL_CODE_PARSE_ERROR"

    def __init__(self, personal_code_suffix: str):
        self.personal_code_suffix = personal_code_suffix
        super().__init__(f"Unable to parse personal code ending in {personal_code_suffix}")
