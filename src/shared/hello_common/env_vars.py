"""
Environment variable models for type-safe configuration.

The hello world function is configured entirely through environment variables set in
``template.yaml``; this module validates them with Pydantic.
"""

from typing import Annotated

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field, HttpUrl

DEFAULT_CHECKIP_URL = 'https://checkip.amazonaws.com/'


class HelloEnvVars(BaseModel):
    """Environment variables for the hello world handler."""

    # Endpoint returning the caller's public IP as plain text
    CHECKIP_URL: Annotated[HttpUrl, Field(
        default=DEFAULT_CHECKIP_URL,
        description='URL of the public IP lookup service'
    )] = DEFAULT_CHECKIP_URL

    HTTP_TIMEOUT_SECONDS: Annotated[float, Field(
        default=3.0,
        description='Timeout for the IP lookup request in seconds',
        ge=1,
        le=30
    )] = 3.0

    # IANA timezone used to decide the day of the week
    GREETING_TIMEZONE: Annotated[str, Field(
        default='UTC',
        description='Timezone used for the day-of-week greeting',
        min_length=1
    )] = 'UTC'

    ENVIRONMENT: Annotated[str, Field(
        default='dev',
        description='Deployment environment name',
        pattern=r'^(dev|staging|prod|test)$'
    )] = 'dev'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='hello-world',
        description='Service name for AWS Powertools'
    )] = 'hello-world'

    @property
    def checkip_url(self) -> str:
        return str(self.CHECKIP_URL)


def get_hello_env_vars() -> HelloEnvVars:
    """
    Get typed environment variables for the hello world handler.

    The result is cached by ``aws_lambda_env_modeler`` for the lifetime of the container
    unless ``LAMBDA_ENV_MODELER_DISABLE_CACHE`` is set to ``true``.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HelloEnvVars)
