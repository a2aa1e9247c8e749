"""
Age Eligibility for the Loan Decision Gateway.

Applicants must be adults, and they must be statistically expected to
live long enough to repay the longest loan the platform offers. Life
expectancy depends on the applicant's country, which is encoded in the
personal code.
"""

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from loan_decision.domain.exceptions import InvalidAgeException
from loan_decision.domain.interfaces import PersonalCodeParser

from .models import Country, LifeExpectancy
from .settings import EngineSettings, engine_settings

UNDERAGE_MESSAGE = "You must be of legal age to apply for a loan!"
AGE_LIMIT_EXCEEDED_MESSAGE = "Loan application age limit exceeded!"

# Upper bounds (exclusive) of the country digits in the personal code
_COUNTRY_RANGES = (
    (200, Country.ESTONIA),
    (500, Country.LATVIA),
    (1000, Country.LITHUANIA),
)


def get_country(personal_code: str) -> Country:
    """
    Determine the applicant's country from a personal code.

    Digits 8-10 of the code select the country:
        000-199: Estonia
        200-499: Latvia
        500-999: Lithuania

    Args:
        personal_code: A validated personal code

    Returns:
        The country, or Country.OTHER if the digits are not numeric
    """
    digits = personal_code[7:10]
    if len(digits) != 3 or not digits.isdigit():
        return Country.OTHER

    value = int(digits)
    for upper_bound, country in _COUNTRY_RANGES:
        if value < upper_bound:
            return country

    return Country.OTHER


def get_life_expectancy(
    country: Country,
    settings: EngineSettings = engine_settings,
) -> LifeExpectancy:
    """Get the life expectancy for a country, falling back to the default."""
    return settings.life_expectancies.get(country, settings.default_life_expectancy)


def validate_age(
    personal_code: str,
    parser: PersonalCodeParser,
    settings: EngineSettings = engine_settings,
    today: Optional[date] = None,
) -> None:
    """
    Check that the applicant's age allows a loan.

    Rules:
        1. The applicant must be at least min_age_years old
        2. The expected date of death (birth date + life expectancy) must
           be at least min_remaining_life_years away from today

    Args:
        personal_code: A validated personal code
        parser: Extracts age and birth date from the code
        settings: Engine settings (uses defaults if not provided)
        today: Reference date (defaults to the current date)

    Raises:
        InvalidAgeException: If either rule is broken
        PersonalCodeParseException: If the code cannot be parsed
    """
    today = today or date.today()

    age = parser.get_age(personal_code, today=today)
    if age.years < settings.min_age_years:
        raise InvalidAgeException(UNDERAGE_MESSAGE)

    date_of_birth = parser.get_date_of_birth(personal_code)
    life_expectancy = get_life_expectancy(get_country(personal_code), settings)
    expected_date_of_death = date_of_birth + life_expectancy.as_relativedelta()

    expected_period_alive = relativedelta(expected_date_of_death, today)
    if expected_period_alive.years < settings.min_remaining_life_years:
        raise InvalidAgeException(AGE_LIMIT_EXCEEDED_MESSAGE)

