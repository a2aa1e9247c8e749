"""
Loan Decision Engine for the Loan Decision Gateway
"""

from .models import Country, Decision, DecisionOutcome, LifeExpectancy
from .settings import EngineSettings, engine_settings
from .credit_modifier import (
    get_segment,
    get_credit_modifier,
    highest_valid_loan_amount,
)
from .age import get_country, get_life_expectancy, validate_age
from .validation import verify_inputs
from .decision import calculate_approved_loan, explain_decision

__all__ = [
    # Settings
    "EngineSettings",
    "engine_settings",
    # Models
    "Country",
    "Decision",
    "DecisionOutcome",
    "LifeExpectancy",
    # Credit Modifier
    "get_segment",
    "get_credit_modifier",
    "highest_valid_loan_amount",
    # Age
    "get_country",
    "get_life_expectancy",
    "validate_age",
    # Validation
    "verify_inputs",
    # Decision
    "calculate_approved_loan",
    "explain_decision",
]
