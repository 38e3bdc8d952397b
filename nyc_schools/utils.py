"""Shared utilities for nyc_schools: the HTTP client and string helpers."""

import logging

import requests

from nyc_schools.errors import InvalidRequestTarget, InvalidResponse, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def build_url(base_url: str, params: dict[str, str] | None = None) -> str:
    """Merge query parameters into base_url."""
    prepared = requests.PreparedRequest()
    try:
        prepared.prepare_url(base_url, params or {})
    except (requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL) as e:
        raise InvalidRequestTarget(f"Cannot build request target from {base_url!r}: {e}") from e

    if not prepared.url.startswith(("http://", "https://")):
        raise InvalidRequestTarget(f"Unsupported URL scheme in {base_url!r}")
    return prepared.url


def fetch(
    base_url: str,
    params: dict[str, str] | None = None,
    *,
    session: requests.Session | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> bytes:
    """GET base_url with params and return the raw body.

    timeout defaults to DEFAULT_TIMEOUT since requests itself never times out.

    Raises:
        InvalidRequestTarget: base_url is malformed
        TransportFailure: DNS, connection or timeout error
        InvalidResponse: status outside 2xx, or an empty body
    """
    url = build_url(base_url, params)
    http = session or requests

    logger.debug("GET %s", url)
    try:
        response = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise TransportFailure(f"GET {url[:80]} failed: {e}") from e

    if not 200 <= response.status_code < 300:
        raise InvalidResponse(
            f"GET {url[:80]} returned HTTP {response.status_code}",
            status_code=response.status_code,
        )
    if not response.content:
        raise InvalidResponse(f"GET {url[:80]} returned no data", status_code=response.status_code)

    return response.content


def join_present(items: list, sep: str = "") -> str:
    """Join the items that are non-empty strings."""
    return sep.join(text for text in items if text)


def get_first_or_none(items: list):
    """Return first item or None."""
    return items[0] if items else None
