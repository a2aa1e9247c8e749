"""Pydantic schema for API error responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """Body of every non-2xx response produced by the exception handlers."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "NO_VALID_LOAN",
                    "message": "No valid loan found for amount 4000 eur",
                    "request_id": "3f1c0f6e9b2a4d7c8e5f6a7b8c9d0e1f",
                }
            ]
        }
    )

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Explanation of the failure")
    request_id: Optional[str] = Field(
        None,
        description="Value of the X-Request-ID response header",
    )
