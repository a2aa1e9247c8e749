"""
Decision Engine Settings for the Loan Decision Gateway.

This module contains all configurable parameters of the loan decision
algorithm. They can be adjusted via environment variables for tuning
or for testing alternative product configurations.

Environment variables use the ENGINE_ prefix:
    ENGINE_MIN_LOAN_AMOUNT=2000
    ENGINE_LOAN_PERIOD_STEP=6
    ENGINE_CREDIT_SEGMENTS_JSON='[[0,2499,0],[2500,9999,100]]'

Usage:
    from loan_decision.service.engine.settings import engine_settings

    # Use default settings (loaded from env)
    limit = engine_settings.max_loan_amount

    # Or create custom settings for testing
    custom = EngineSettings(min_loan_amount=1000)
"""

import json
from functools import lru_cache
from typing import Dict, List, Tuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Country, LifeExpectancy

DEFAULT_LIFE_EXPECTANCY_KEY = "default"


class EngineSettings(BaseSettings):
    """
    Configurable parameters for the loan decision algorithm.

    All settings can be overridden via environment variables with ENGINE_ prefix.
    Amounts are whole euros, periods are months.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Loan Amount ===
    min_loan_amount: int = Field(
        default=2000,
        gt=0,
        description="Smallest loan amount that can be requested or offered",
    )
    max_loan_amount: int = Field(
        default=10000,
        gt=0,
        description="Largest loan amount that can be requested or offered",
    )

    # === Loan Period ===
    min_loan_period: int = Field(
        default=12,
        gt=0,
        description="Shortest repayment period in months",
    )
    max_loan_period: int = Field(
        default=60,
        gt=0,
        description="Longest repayment period in months",
    )
    loan_period_step: int = Field(
        default=6,
        gt=0,
        description="Months added per step while searching for an affordable period",
    )

    # === Age Limits ===
    min_age_years: int = Field(
        default=18,
        ge=0,
        description="Minimum applicant age in full years",
    )
    min_remaining_life_years: int = Field(
        default=5,
        ge=0,
        description="Minimum full years between today and the expected date of death",
    )

    # === Credit Segments ===
    credit_segments_json: str = Field(
        default="[[0,2499,0],[2500,4999,100],[5000,7499,300],[7500,9999,1000]]",
        description="Credit segments as JSON array: [[min_suffix, max_suffix, modifier], ...]",
    )

    # === Life Expectancy ===
    life_expectancy_json: str = Field(
        default=(
            '{"estonia": [78, 3, 0], "latvia": [75, 5, 0], '
            '"lithuania": [76, 0, 0], "default": [64, 10, 10]}'
        ),
        description=(
            "Life expectancy per country as JSON object of [years, months, days]; "
            "the 'default' entry covers every country not listed"
        ),
    )

    @field_validator("credit_segments_json")
    @classmethod
    def validate_segments_json(cls, v: str) -> str:
        """Validate that segments JSON is parseable and well-formed."""
        try:
            segments = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if not isinstance(segments, list) or not segments:
            raise ValueError("Segments must be a non-empty list")
        for segment in segments:
            if not isinstance(segment, list) or len(segment) != 3:
                raise ValueError(
                    "Each segment must be [min_suffix, max_suffix, modifier]"
                )
            if not all(isinstance(x, int) for x in segment):
                raise ValueError("All segment values must be integers")
            min_suffix, max_suffix, modifier = segment
            if min_suffix > max_suffix:
                raise ValueError(
                    f"min_suffix ({min_suffix}) > max_suffix ({max_suffix})"
                )
            if not 0 <= min_suffix <= 9999 or not 0 <= max_suffix <= 9999:
                raise ValueError("Segment bounds must lie within 0..9999")
            if modifier < 0:
                raise ValueError(f"modifier cannot be negative: {modifier}")
        return v

    @field_validator("life_expectancy_json")
    @classmethod
    def validate_life_expectancy_json(cls, v: str) -> str:
        """Validate that the life expectancy table is well-formed and has a default."""
        try:
            table = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if not isinstance(table, dict):
            raise ValueError("Life expectancy must be a JSON object")
        if DEFAULT_LIFE_EXPECTANCY_KEY not in table:
            raise ValueError("Life expectancy table needs a 'default' entry")

        known = {c.value for c in Country} | {DEFAULT_LIFE_EXPECTANCY_KEY}
        for key, value in table.items():
            if key not in known:
                raise ValueError(f"Unknown country in life expectancy table: {key}")
            if (
                not isinstance(value, list)
                or len(value) != 3
                or not all(isinstance(x, int) and x >= 0 for x in value)
            ):
                raise ValueError(
                    f"Life expectancy for {key} must be [years, months, days]"
                )
        return v

    @model_validator(mode="after")
    def validate_ranges(self) -> "EngineSettings":
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount cannot exceed max_loan_amount")
        if self.min_loan_period > self.max_loan_period:
            raise ValueError("min_loan_period cannot exceed max_loan_period")
        return self

    @property
    def credit_segments(self) -> List[Tuple[int, int, int]]:
        """Credit segments mapping identity code suffixes to credit modifiers."""
        segments = json.loads(self.credit_segments_json)
        return [tuple(segment) for segment in segments]

    @property
    def life_expectancies(self) -> Dict[Country, LifeExpectancy]:
        """Life expectancy per known country (the default is not included)."""
        table = json.loads(self.life_expectancy_json)
        return {
            Country(key): LifeExpectancy(*value)
            for key, value in table.items()
            if key != DEFAULT_LIFE_EXPECTANCY_KEY
        }

    @property
    def default_life_expectancy(self) -> LifeExpectancy:
        """Life expectancy used for countries missing from the table."""
        table = json.loads(self.life_expectancy_json)
        return LifeExpectancy(*table[DEFAULT_LIFE_EXPECTANCY_KEY])


@lru_cache
def get_engine_settings() -> EngineSettings:
    """Get cached engine settings instance."""
    return EngineSettings()


engine_settings = get_engine_settings()
