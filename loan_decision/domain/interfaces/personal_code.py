"""Personal identity code collaborator interfaces."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta


class PersonalCodeValidator(ABC):
    """
    Abstract validator for national identity codes.

    Checks the structure and checksum of a code.
    """

    def normalize(self, personal_code: str) -> str:
        """
        Bring a code into the compact form the decision engine slices.

        Implementations whose `is_valid` tolerates separators must strip
        them here, so that every accepted code is a plain digit string.
        """
        return personal_code.strip()

    @abstractmethod
    def is_valid(self, personal_code: str) -> bool:
        """
        Check whether a personal code is well-formed.

        Args:
            personal_code: The code as entered by the customer

        Returns:
            True if the code has a valid format, birth date and checksum
        """
        ...


class PersonalCodeParser(ABC):
    """
    Abstract parser extracting personal data from a national identity code.

    Callers are expected to validate the code first.
    """

    @abstractmethod
    def get_date_of_birth(self, personal_code: str) -> date:
        """
        Extract the date of birth encoded in a personal code.

        Raises:
            PersonalCodeParseException: If the code cannot be parsed
        """
        ...

    def get_age(self, personal_code: str, today: Optional[date] = None) -> relativedelta:
        """
        Get the age of the code holder as a calendar period.

        Args:
            personal_code: A validated personal code
            today: Reference date (defaults to the current date)

        Returns:
            Years, months and days between the birth date and today
        """
        today = today or date.today()
        return relativedelta(today, self.get_date_of_birth(personal_code))
