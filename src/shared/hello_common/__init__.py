"""
Shared dependency layer for the SAM hello world application.

SAM copies this package into the layer's ``python/`` directory, so every function
attached to the layer can ``import hello_common`` without bundling it.
"""

__version__ = "1.0.0"

from hello_common.exceptions import ConfigurationError, HelloServiceError, LocationLookupError
from hello_common.models import ErrorOutput, HelloOutput
from hello_common.observability import logger, metrics, tracer

__all__ = [
    "ConfigurationError",
    "HelloServiceError",
    "LocationLookupError",
    "ErrorOutput",
    "HelloOutput",
    "logger",
    "tracer",
    "metrics",
]
