"""
Decision Engine for the Loan Decision Gateway.

This module orchestrates the complete decision-making process:
1. Validate the application (personal code, amount, period, age)
2. Look up the applicant's credit modifier
3. Search for the shortest period that makes the requested amount affordable
4. Fall back to the largest possible loan when no period is long enough

This is the main entry point for the engine module.
"""

from datetime import date
from typing import Optional

from loan_decision.domain.exceptions import LoanValidationException, NoValidLoanException
from loan_decision.domain.interfaces import PersonalCodeParser, PersonalCodeValidator

from .credit_modifier import get_credit_modifier, highest_valid_loan_amount
from .models import Decision, DecisionOutcome
from .settings import EngineSettings, engine_settings
from .validation import verify_inputs


def calculate_approved_loan(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    *,
    validator: PersonalCodeValidator,
    parser: PersonalCodeParser,
    settings: EngineSettings = engine_settings,
    today: Optional[date] = None,
) -> Decision:
    """
    Calculate the best loan offer for an applicant.

    The personal code is first normalized by the validator. Rule
    violations found during validation are returned as a rejected
    decision carrying the violation message. They are not raised.

    Offer Search:
        The maximum amount for a period is credit_modifier * period.
        Starting from the requested period, the period grows by
        loan_period_step months until the requested amount fits:
        - Fits within max_loan_period: offer min(max_loan_amount,
          maximum amount) at that period. This can exceed the request.
        - Never fits: offer the maximum amount at max_loan_period as a
          counter-offer, as long as it reaches min_loan_amount.

    Args:
        personal_code: Personal ID code of the applicant
        loan_amount: Requested amount in euros
        loan_period: Requested period in months
        validator: Checks the personal code format and checksum
        parser: Extracts age and birth date from the personal code
        settings: Engine settings (uses defaults if not provided)
        today: Reference date for the age check (defaults to today)

    Returns:
        An approved, counter-offer or rejected Decision

    Raises:
        NoValidLoanException: If no loan can be offered at all
        PersonalCodeParseException: If a valid code cannot be parsed
    """
    personal_code = validator.normalize(personal_code)

    try:
        verify_inputs(
            personal_code,
            loan_amount,
            loan_period,
            validator=validator,
            parser=parser,
            settings=settings,
            today=today,
        )
    except LoanValidationException as e:
        return Decision.rejected(e.message)

    credit_modifier = get_credit_modifier(personal_code, settings)
    if credit_modifier == 0:
        raise NoValidLoanException()

    while highest_valid_loan_amount(credit_modifier, loan_period) < loan_amount:
        loan_period += settings.loan_period_step

    max_period = settings.max_loan_period

    # The step may jump past an affordable maximum period
    if loan_period > max_period and highest_valid_loan_amount(credit_modifier, max_period) >= loan_amount:
        loan_period = max_period

    if loan_period <= max_period:
        return Decision.approved(
            loan_amount=min(settings.max_loan_amount, highest_valid_loan_amount(credit_modifier, loan_period)),
            loan_period=loan_period,
        )

    best_amount = min(settings.max_loan_amount, highest_valid_loan_amount(credit_modifier, max_period))
    if best_amount >= settings.min_loan_amount:
        return Decision.counter_offer(
            loan_amount=best_amount,
            loan_period=max_period,
            message=(
                f"No valid loan found for amount {loan_amount} eur, "
                f"offering the maximum possible loan instead"
            ),
        )

    raise NoValidLoanException(f"No valid loan found for amount {loan_amount} eur")


def explain_decision(decision: Decision) -> str:
    """
    Generate a human-readable explanation of a decision.

    Args:
        decision: The decision to explain

    Returns:
        Human-readable explanation string
    """
    if decision.outcome == DecisionOutcome.REJECTED:
        return f"Decision: REJECTED ({decision.error_message})"

    lines = []
    if decision.outcome == DecisionOutcome.APPROVED:
        lines.append("Decision: APPROVED")
    else:
        lines.append("Decision: COUNTER-OFFER")

    lines.append(f"  - Amount: {decision.loan_amount} eur")
    lines.append(f"  - Period: {decision.loan_period} months")

    if decision.error_message:
        lines.append(f"  - Note: {decision.error_message}")

    return "\n".join(lines)
