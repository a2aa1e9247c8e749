"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from loan_decision.application.services import DecisionService
from loan_decision.infrastructure.personal_code import (
    EstonianPersonalCodeParser,
    EstonianPersonalCodeValidator,
)
from loan_decision.service.engine import EngineSettings
from loan_decision.service.engine.settings import get_engine_settings


# Personal code collaborators
def get_personal_code_validator() -> EstonianPersonalCodeValidator:
    """Get a PersonalCodeValidator instance."""
    return EstonianPersonalCodeValidator()


def get_personal_code_parser() -> EstonianPersonalCodeParser:
    """Get a PersonalCodeParser instance."""
    return EstonianPersonalCodeParser()


# Service dependencies
def get_decision_service(
    validator: Annotated[EstonianPersonalCodeValidator, Depends(get_personal_code_validator)],
    parser: Annotated[EstonianPersonalCodeParser, Depends(get_personal_code_parser)],
    settings: Annotated[EngineSettings, Depends(get_engine_settings)],
) -> DecisionService:
    """Get a DecisionService instance with all dependencies."""
    return DecisionService(
        validator=validator,
        parser=parser,
        settings=settings,
    )
