# src/api/http.py
import logging
import time
from typing import Any

import requests
from requests.exceptions import RequestException

from src.config import HTTP_RETRY_BASE_S, HTTP_RETRY_COUNT, HTTP_TIMEOUT_S

logger = logging.getLogger("routeforecast")

USER_AGENT = "RouteForecast/1.0"
RETRYABLE_METHODS = frozenset({"GET", "DELETE"})


class FetchError(RequestException):
    """Raised when a request still fails after all retries."""


def api_request_with_retry(
    url: str,
    method: str = "GET",
    retry_count: int = HTTP_RETRY_COUNT,
    **kwargs,
) -> Any:
    """
    Send a request and return the decoded JSON body (None for an empty body).

    GET and DELETE are retried retry_count times with exponential backoff,
    other methods are sent once. Raises FetchError when nothing succeeds.
    """
    method = method.upper()
    attempts = max(1, retry_count) if method in RETRYABLE_METHODS else 1

    headers = {"User-Agent": USER_AGENT, **(kwargs.pop("headers", None) or {})}
    kwargs.setdefault("timeout", HTTP_TIMEOUT_S)

    for attempt in range(attempts):
        try:
            resp = requests.request(method, url, headers=headers, **kwargs)
            resp.raise_for_status()
            if not resp.content:
                return None
            return resp.json()
        except RequestException as e:
            logger.warning("API request failed (%s/%s): %s %s: %s", attempt + 1, attempts, method, url, e)
            if attempt + 1 == attempts:
                raise FetchError(f"{method} {url} failed after {attempts} attempts: {e}") from e
            time.sleep(HTTP_RETRY_BASE_S * 2**attempt)
