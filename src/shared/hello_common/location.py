"""
Public IP lookup.

The hello world response reports where the function runs by asking a check-IP service
for the caller's public address.
"""

import requests

from hello_common.env_vars import DEFAULT_CHECKIP_URL
from hello_common.exceptions import LocationLookupError
from hello_common.observability import logger, tracer

# Reused across warm invocations of the same container
_session = requests.Session()


@tracer.capture_method
def fetch_public_ip(url: str = DEFAULT_CHECKIP_URL, timeout: float = 3.0) -> str:
    """
    Fetch the public IP address reported by ``url``.

    Args:
        url: Check-IP endpoint returning the address as plain text
        timeout: Request timeout in seconds

    Returns:
        The IP address with surrounding whitespace removed

    Raises:
        LocationLookupError: On network errors, non-2xx responses or an empty body
    """
    logger.debug("Fetching public IP", extra={"url": url, "timeout": timeout})

    try:
        response = _session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        tracer.put_annotation("location_lookup", "failed")
        raise LocationLookupError(f'IP lookup failed: {exc}', url=url) from exc

    ip_address = response.text.strip()
    if not ip_address:
        tracer.put_annotation("location_lookup", "empty")
        raise LocationLookupError('IP lookup returned an empty body', url=url)

    tracer.put_annotation("location_lookup", "ok")
    logger.debug("Public IP resolved", extra={"location": ip_address})
    return ip_address
