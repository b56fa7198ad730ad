import asyncio
from functools import wraps

import httpx

from rrl_profile.domain.exceptions import TransientElevationError
from rrl_profile.logging_config import get_logger

logger = get_logger(__name__)

RETRYABLE_EXCEPTIONS = (
    TransientElevationError,
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.ProxyError,
    asyncio.TimeoutError,
)


def async_retry(max_retries=3, backoff_factor=0.5, max_timeout=30.0):
    """
    Decorator for retrying async provider requests with exponential backoff.

    Retries only transient failures (timeouts, network errors, HTTP 429/5xx).
    The timeout passed to the wrapped method starts at the provider's own
    ``timeout`` and doubles on each attempt, capped at ``max_timeout``.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            initial_timeout = getattr(self, "timeout", 10.0)
            for attempt in range(max_retries):
                timeout = min(initial_timeout * (2**attempt), max_timeout)
                kwargs["timeout"] = timeout

                logger.debug(
                    f"Attempt {attempt + 1}/{max_retries} with timeout {timeout:.1f}s for {func.__name__}"
                )
                try:
                    return await func(self, *args, **kwargs)
                except RETRYABLE_EXCEPTIONS as e:
                    error_type = type(e).__name__
                    if attempt == max_retries - 1:
                        logger.error(
                            f"All {max_retries} retry attempts for {func.__name__} failed. "
                            f"Last error: {error_type}: {e}"
                        )
                        raise

                    delay = backoff_factor * (2**attempt)
                    logger.warning(
                        f"{error_type} in {func.__name__}: {e}. "
                        f"Retrying in {delay:.2f}s (attempt {attempt + 1}/{max_retries})..."
                    )
                    await asyncio.sleep(delay)

        return wrapper

    return decorator
