"""Error taxonomy surfaced to callers of the analysis pipeline."""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

AUTH_MESSAGE = "The API key is invalid or missing. Please ensure it is configured correctly."
SAFETY_MESSAGE = (
    "Your text could not be processed due to safety policies. "
    "Please revise your content and try again."
)
NETWORK_MESSAGE = (
    "A network error occurred. Please check your internet connection and try again."
)
RATE_LIMIT_MESSAGE = (
    "The service is experiencing high traffic. Please try again in a few moments."
)
BAD_REQUEST_MESSAGE = (
    "The request was invalid. This could be due to unusual formatting in the text. "
    "Please try simplifying the content."
)
SERVER_MESSAGE = (
    "The AI service is currently experiencing a server issue. "
    "Please try again in a little while."
)
FALLBACK_MESSAGE = (
    "An unexpected error occurred. The AI service may be temporarily unavailable."
)
INVALID_RESPONSE_MESSAGE = (
    "The AI returned an invalid response format. This can sometimes happen with "
    "complex text. Please try your request again."
)
UNEXPECTED_MESSAGE = (
    "An unexpected technical issue occurred. Please check your connection or try again later."
)


class UserFacingError(Exception):
    """An error whose message can be shown to the user as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def error_status_code(error: BaseException) -> Optional[int]:
    """
    Return the HTTP status code carried by an exception, if any.

    SDK errors expose it as ``status_code`` or ``code``; ``requests``
    errors carry it on their ``response``.
    """
    for attr in ("status_code", "code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value

    response = getattr(error, "response", None)
    status = getattr(response, "status_code", None)
    if isinstance(status, int):
        return status
    return None


def is_network_error(error: BaseException) -> bool:
    """Return True if the error indicates the service could not be reached."""
    if isinstance(
        error,
        (requests.ConnectionError, requests.Timeout, ConnectionError, TimeoutError),
    ):
        return True
    message = str(error).lower()
    return "network" in message or "fetch" in message


def classify_error(error: BaseException) -> str:
    """
    Map a failed remote call to a user-facing message.

    Checks run in order and the first match wins: credentials, safety
    policies, connectivity, rate limiting, malformed requests, server errors.

    Args:
        error: The exception raised by the final attempt.

    Returns:
        The message to show to the user.
    """
    message = str(error).lower()
    status = error_status_code(error)

    if "api key" in message or "401" in message or "403" in message or status in (401, 403):
        return AUTH_MESSAGE
    if "safety" in message:
        return SAFETY_MESSAGE
    if is_network_error(error):
        return NETWORK_MESSAGE
    if "resource has been exhausted" in message or "429" in message or status == 429:
        return RATE_LIMIT_MESSAGE
    if "400" in message or status == 400:
        return BAD_REQUEST_MESSAGE
    if "500" in message or "503" in message or status in (500, 503):
        return SERVER_MESSAGE
    return FALLBACK_MESSAGE


def to_user_facing_error(error: BaseException) -> UserFacingError:
    """Translate a remote-call failure into a UserFacingError."""
    if isinstance(error, UserFacingError):
        return error
    logger.error(f"Final error after retries: {error}", exc_info=error)
    return UserFacingError(classify_error(error))
