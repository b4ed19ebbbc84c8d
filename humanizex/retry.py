"""Retry with exponential backoff for remote model calls."""

import functools
import logging
import time
from typing import Any, Callable, Optional

from humanizex.errors import error_status_code, is_network_error

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
INITIAL_DELAY = 1.0
RETRYABLE_STATUS_CODES = (429, 500, 503)


def is_retryable_error(error: BaseException) -> bool:
    """
    Return True if the error is transient and the call is worth repeating.

    Network failures and HTTP 429/500/503 responses are retryable; any
    other error is treated as permanent.
    """
    if is_network_error(error):
        return True
    if error_status_code(error) in RETRYABLE_STATUS_CODES:
        return True
    message = str(error)
    return any(str(code) in message for code in RETRYABLE_STATUS_CODES)


def call_with_retry(
    func: Callable[..., Any],
    *args,
    max_attempts: int = MAX_ATTEMPTS,
    initial_delay: float = INITIAL_DELAY,
    on_retry: Optional[Callable[[int], None]] = None,
    sleep: Callable[[float], None] = time.sleep,
    **kwargs,
) -> Any:
    """
    Call ``func`` and retry transient failures with exponential backoff.

    The delay before retry ``n`` is ``initial_delay * 2 ** (n - 1)`` seconds
    (1s, 2s, ... with the defaults). Errors are never translated here: the
    last error is re-raised unchanged once it is permanent or the attempts
    are used up.

    Args:
        func: The single-attempt call to make.
        *args: Positional arguments for ``func``.
        max_attempts: Total number of attempts, including the first one.
        initial_delay: Delay in seconds before the first retry.
        on_retry: Called with the number of the failed attempt before sleeping.
        sleep: Function used to wait between attempts.
        **kwargs: Keyword arguments for ``func``.

    Returns:
        Whatever ``func`` returns on the first successful attempt.

    Raises:
        ValueError: If max_attempts is smaller than 1.
        Exception: The error raised by the last attempt.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    for attempt in range(1, max_attempts + 1):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if attempt >= max_attempts or not is_retryable_error(e):
                raise

            delay = initial_delay * 2 ** (attempt - 1)
            logger.warning(
                f"Attempt {attempt}/{max_attempts} failed ({e}); retrying in {delay:.1f}s"
            )
            if on_retry is not None:
                on_retry(attempt)
            sleep(delay)


def with_retry(
    max_attempts: int = MAX_ATTEMPTS,
    initial_delay: float = INITIAL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
):
    """
    Decorator applying :func:`call_with_retry` to a function.

    The wrapped function accepts an extra ``on_retry`` keyword argument.

    Example:
        >>> @with_retry(max_attempts=5)
        ... def fetch(prompt):
        ...     return llm.generate(prompt)
        >>> fetch("Hello", on_retry=lambda n: print(f"retry {n}"))
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args, on_retry: Optional[Callable[[int], None]] = None, **kwargs):
            return call_with_retry(
                func,
                *args,
                max_attempts=max_attempts,
                initial_delay=initial_delay,
                on_retry=on_retry,
                sleep=sleep,
                **kwargs,
            )

        return wrapper

    return decorator
