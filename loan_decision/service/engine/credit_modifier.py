"""
Credit Modifier Lookup for the Loan Decision Gateway.

The last four digits of the personal code place the applicant in a credit
segment. Each segment carries a credit modifier: the largest loan amount
per month of repayment period that the applicant may be offered.
"""

from .settings import EngineSettings, engine_settings


def get_segment(personal_code: str) -> int:
    """
    Get the credit segment number of a personal code.

    Args:
        personal_code: A validated personal code

    Returns:
        The last four digits as an integer (0-9999)
    """
    return int(personal_code[-4:])


def get_credit_modifier(
    personal_code: str,
    settings: EngineSettings = engine_settings,
) -> int:
    """
    Look up the credit modifier for a personal code.

    Default segments:
        0000-2499: 0 (debt, no loan)
        2500-4999: 100
        5000-7499: 300
        7500-9999: 1000

    Args:
        personal_code: A validated personal code
        settings: Engine settings (uses defaults if not provided)

    Returns:
        Credit modifier (0 = no loan can be offered)
    """
    segment = get_segment(personal_code)

    for min_suffix, max_suffix, modifier in settings.credit_segments:
        if min_suffix <= segment <= max_suffix:
            return modifier

    return 0


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest loan amount the credit modifier allows for a period."""
    return credit_modifier * loan_period
