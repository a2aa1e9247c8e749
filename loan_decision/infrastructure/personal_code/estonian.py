"""Estonian personal identity code (isikukood) support backed by python-stdnum."""

from datetime import date

import structlog
from stdnum.ee import ik
from stdnum.exceptions import ValidationError

from loan_decision.domain.exceptions import PersonalCodeParseException
from loan_decision.domain.interfaces import PersonalCodeParser, PersonalCodeValidator

logger = structlog.get_logger(__name__)


class EstonianPersonalCodeValidator(PersonalCodeValidator):
    """Validates the format, birth date and check digit of an isikukood."""

    def normalize(self, personal_code: str) -> str:
        # is_valid ignores spaces, so they are removed before slicing too
        return ik.compact(personal_code)

    def is_valid(self, personal_code: str) -> bool:
        return ik.is_valid(personal_code)


class EstonianPersonalCodeParser(PersonalCodeParser):
    """Extracts the birth date encoded in an isikukood."""

    def get_date_of_birth(self, personal_code: str) -> date:
        try:
            return ik.get_birth_date(personal_code)
        except (ValidationError, ValueError) as e:
            suffix = personal_code[-4:]
            logger.error(
                "personal_code_parse_failed",
                personal_code_suffix=suffix,
                error=str(e),
            )
            raise PersonalCodeParseException(suffix) from e
