from datetime import datetime, timezone
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from hello_common.clock import day_of_week, greeting_message
from hello_common.env_vars import get_hello_env_vars
from hello_common.exceptions import LocationLookupError
from hello_common.location import fetch_public_ip
from hello_common.models import ErrorOutput, HelloOutput
from hello_common.observability import logger, metrics, tracer
from hello_common.responses import build_response


@tracer.capture_method
def build_greeting(event: Dict[str, Any]) -> HelloOutput:
    """Build the greeting for the current day and the function's public IP."""

    env_vars = get_hello_env_vars()

    logger.info(
        "Processing hello request",
        extra={
            "path": event.get("path"),
            "http_method": event.get("httpMethod"),
            "user_agent": (event.get("headers") or {}).get("User-Agent"),
        },
    )

    weekday = day_of_week(tz_name=env_vars.GREETING_TIMEZONE)
    tracer.put_annotation("weekday", weekday)

    location = fetch_public_ip(env_vars.checkip_url, timeout=env_vars.HTTP_TIMEOUT_SECONDS)

    return HelloOutput(message=greeting_message(weekday), location=location)


def _error_response(status_code: int, error: str, message: str, request_id: str) -> Dict[str, Any]:
    body = ErrorOutput(
        error=error,
        message=message,
        request_id=request_id,
        timestamp=datetime.now(timezone.utc),
    )
    return build_response(status_code, body, request_id)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Hello world Lambda function handler

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response with the greeting and location
    """
    request_id = context.aws_request_id
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    try:
        output = build_greeting(event)
    except LocationLookupError as exc:
        logger.exception("Location lookup failed", extra={"url": exc.url})
        metrics.add_metric(name="LocationLookupFailure", unit=MetricUnit.Count, value=1)
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
        return _error_response(502, "LocationLookupError", str(exc), request_id)
    except Exception:
        logger.exception("Lambda invocation failed")
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
        return _error_response(500, "InternalServerError", "Internal server error", request_id)

    metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
    logger.info("Hello request processed successfully", extra={"response": output.model_dump()})
    return build_response(200, output, request_id)
