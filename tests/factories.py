"""
Test data factories.

Builds Estonian personal codes (isikukood) with a correct check digit so
that tests never rely on hand-computed codes.
"""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from loan_decision.domain.interfaces import PersonalCodeParser, PersonalCodeValidator

_WEIGHTS_FIRST_PASS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
_WEIGHTS_SECOND_PASS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

_CENTURY_DIGITS = {1800: 1, 1900: 3, 2000: 5, 2100: 7}


def check_digit(first_ten: str) -> int:
    """Compute the isikukood check digit for the first ten digits."""
    total = sum(int(d) * w for d, w in zip(first_ten, _WEIGHTS_FIRST_PASS)) % 11
    if total == 10:
        total = sum(int(d) * w for d, w in zip(first_ten, _WEIGHTS_SECOND_PASS)) % 11
        if total == 10:
            total = 0
    return total


def make_personal_code(born: date, suffix: str, female: bool = False) -> str:
    """
    Build a valid personal code ending in `suffix`.

    The suffix fixes the serial number and the check digit, so the birth
    date is moved forward day by day until the check digit matches.
    The resulting birth date is at most a few weeks after `born`.

    Args:
        born: Earliest acceptable birth date
        suffix: Required last four digits
        female: Use the female century digit

    Returns:
        An 11-digit personal code
    """
    assert len(suffix) == 4 and suffix.isdigit()
    serial, wanted = suffix[:3], int(suffix[3])

    for offset in range(60):
        day = born + timedelta(days=offset)
        century = _CENTURY_DIGITS[day.year // 100 * 100] + (1 if female else 0)
        first_ten = f"{century}{day:%y%m%d}{serial}"
        if check_digit(first_ten) == wanted:
            return first_ten + suffix[3]

    raise ValueError(f"No birth date near {born} gives check digit {wanted}")


def code_with_suffix(suffix: str) -> str:
    """
    Build an 11-character code for engine tests that use fake collaborators.

    Only the last four digits matter to the engine (the first three of them
    also select the country), so the rest is filler.
    """
    return "3900101" + suffix


class AcceptingValidator(PersonalCodeValidator):
    """Validator that accepts every code, or none of them."""

    def __init__(self, valid: bool = True):
        self.valid = valid
        self.calls = 0

    def is_valid(self, personal_code: str) -> bool:
        self.calls += 1
        return self.valid


class FixedBirthDateParser(PersonalCodeParser):
    """Parser that reports the same birth date for every code."""

    def __init__(self, date_of_birth: date):
        self.date_of_birth = date_of_birth

    def get_date_of_birth(self, personal_code: str) -> date:
        return self.date_of_birth

    @classmethod
    def aged(cls, years: int, today: date, days: int = 0) -> "FixedBirthDateParser":
        """Parser for an applicant who is `years` years (and `days` days) old on `today`."""
        return cls(today - relativedelta(years=years, days=days))
