"""
Output models for API responses using Pydantic.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field


class HelloOutput(BaseModel):
    """Response model for a successful greeting."""

    message: Annotated[str, Field(
        min_length=1,
        description='Greeting naming the current day of the week',
        examples=['hello world, happy Tuesday!']
    )]

    location: Annotated[str, Field(
        min_length=1,
        description='Public IP address the function reached the internet from',
        examples=['54.240.197.233']
    )]


class ErrorOutput(BaseModel):
    """Standard error response model."""

    error: Annotated[str, Field(
        description='Error type',
        examples=['LocationLookupError', 'InternalServerError']
    )]

    message: Annotated[str, Field(
        description='Human-readable error message',
        examples=['IP lookup failed', 'Internal server error']
    )]

    request_id: Annotated[str, Field(
        description='Request correlation ID for debugging'
    )]

    timestamp: Annotated[datetime, Field(
        description='Timestamp when the error occurred'
    )]
