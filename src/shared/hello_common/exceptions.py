"""Exceptions raised by the shared layer."""


class HelloServiceError(Exception):
    """Base class for errors raised while building a greeting."""


class LocationLookupError(HelloServiceError):
    """The public IP lookup failed or returned nothing usable."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class ConfigurationError(HelloServiceError):
    """A configuration value is present but unusable."""
