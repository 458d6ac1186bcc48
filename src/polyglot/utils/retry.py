"""Retry policy for word list downloads, built on tenacity."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from polyglot.utils.logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


def is_transient(error: BaseException) -> bool:
    """Whether another download attempt could succeed.

    Transport failures and 5xx responses are transient. Any other HTTP
    status (a 404, say) will be the same on the next try.
    """
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.is_server_error
    return isinstance(error, (httpx.TransportError, ConnectionError))


def download_retry(
    attempts: int = 3,
    min_wait: float = 0.5,
    max_wait: float = 4.0,
) -> Callable[[F], F]:
    """Decorator that retries a download on transient failures.

    Waits grow exponentially from ``min_wait`` to ``max_wait`` seconds. The
    final error is re-raised as is, so the caller can fall back to its
    cached copy.

    Usage:
        @download_retry(attempts=5)
        def fetch(client: httpx.Client, url: str) -> str:
            response = client.get(url)
            response.raise_for_status()
            return response.text
    """
    return retry(
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception(is_transient),
        before_sleep=before_sleep_log(logger, logging.INFO),
        reraise=True,
    )
