"""Decision service - orchestrates the loan decision use case."""

from datetime import date
from typing import Optional

import structlog

from loan_decision.application.dto import DecisionRequest, DecisionResponse
from loan_decision.core.logging import mask_personal_code
from loan_decision.core.metrics import record_decision, track_decision_latency
from loan_decision.domain.exceptions import NoValidLoanException
from loan_decision.domain.interfaces import PersonalCodeParser, PersonalCodeValidator
from loan_decision.service.engine import (
    EngineSettings,
    calculate_approved_loan,
    engine_settings,
    explain_decision,
)

logger = structlog.get_logger(__name__)


class DecisionService:
    """
    Application service for loan decision use cases.
    """

    def __init__(
        self,
        validator: PersonalCodeValidator,
        parser: PersonalCodeParser,
        settings: EngineSettings = engine_settings,
    ):
        self._validator = validator
        self._parser = parser
        self._settings = settings

    async def make_decision(
        self,
        request: DecisionRequest,
        today: Optional[date] = None,
    ) -> DecisionResponse:
        """
        Process a loan decision request.

        Args:
            request: The decision request with personal code, amount and period
            today: Reference date for the age check (defaults to today)

        Returns:
            DecisionResponse with the offer or the rejection message

        Raises:
            NoValidLoanException: If no loan can be offered at all
            PersonalCodeParseException: If a valid code cannot be parsed
        """
        log = logger.bind(
            personal_code=mask_personal_code(request.personal_code),
            loan_amount_requested=request.loan_amount,
            loan_period_requested=request.loan_period,
        )
        log.info("decision_requested")

        try:
            with track_decision_latency():
                decision = calculate_approved_loan(
                    request.personal_code,
                    request.loan_amount,
                    request.loan_period,
                    validator=self._validator,
                    parser=self._parser,
                    settings=self._settings,
                    today=today,
                )
        except NoValidLoanException as e:
            record_decision("no_valid_loan", None)
            log.info("decision_no_valid_loan", message=e.message)
            raise

        record_decision(decision.outcome.value, decision.loan_amount)

        log.info(
            "decision_made",
            outcome=decision.outcome.value,
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
        )
        log.debug("decision_explained", explanation=explain_decision(decision))

        return DecisionResponse.from_decision(decision)
