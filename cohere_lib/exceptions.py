"""
Custom exception hierarchy for the Cohere client library.

All public exceptions inherit from :class:`CohereError`, allowing callers
to catch a single base class for any client‑related failure while still being
able to differentiate specific error conditions when needed:

* :class:`CohereConnectionError` – network level failure (DNS, TCP, TLS,
  timeout) or missing connection settings,
* :class:`CohereAPIError` – the API reported an error (``message`` field)
  or answered with a 4xx status,
* :class:`CohereError` itself – any other transport failure or a 5xx status,
* :class:`CohereUsageError` – the caller misused the library; raised before
  any network activity.
"""

from typing import Any, Dict, Optional


class CohereError(Exception):
    """Base exception for all Cohere‑client‑specific errors."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message or ""

    def __str__(self) -> str:
        return self.message


class CohereAPIError(CohereError):
    """
    Raised when the API explicitly reports an error.

    Attributes
    ----------
    http_status : Optional[int]
        HTTP status code of the response, ``None`` when unknown
        (e.g. the body could not be decoded).
    headers : Dict[str, str]
        Response headers; an empty dict when not available.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        http_status: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.headers = dict(headers or {})

    @classmethod
    def from_response(cls, response: Any, message: Optional[str] = None):
        """
        Build the error straight from a ``requests.Response``‑like object.

        When ``message`` is omitted the raw response text is used.
        """
        return cls(
            message if message is not None else response.text,
            response.status_code,
            dict(response.headers),
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"http_status={self.http_status!r})"
        )


class CohereConnectionError(CohereError):
    """Raised on network failures and when connection settings are missing."""

    pass


class CohereUsageError(CohereError, ValueError):
    """Raised when the library is called incorrectly. No request is sent."""

    pass


class InvalidEndpointError(CohereUsageError):
    """Raised when the endpoint name is not one of the known endpoints."""

    pass


class InvalidDocumentFormatError(CohereUsageError):
    """Raised when a rerank document is neither a string nor a ``{text: ...}`` mapping."""

    pass


class NoArgsAndNoPayloadError(CohereUsageError):
    """Raised when a client method receives neither a payload nor required arguments."""

    pass
