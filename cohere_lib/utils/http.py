"""
Thin wrapper around ``requests`` that adds logging and unified error handling.

The :class:`HttpRequester` class is the only place in the library that talks
to the network.  It centralises:

* validation of the endpoint name against the known endpoints,
* construction of ``{base_url}/{version}/{endpoint}`` URLs,
* the ``Authorization``, ``Content-Type`` and ``Request-Source`` headers,
* translation of transport failures and error responses into the
  library‑specific exception hierarchy.

The session is injected, so any object offering ``requests.Session.request``
can serve as the transport.  Retries, pooling and TLS are left to it; the
requester itself sends every request exactly once.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

import requests

from cohere_lib import endpoints
from cohere_lib.config import ConnectionSettings
from cohere_lib.constants import (
    API_WARNING_HEADER,
    DEFAULT_TIMEOUT,
    REQUEST_SOURCE,
    REQUEST_SOURCE_HEADER,
)
from cohere_lib.exceptions import (
    CohereAPIError,
    CohereConnectionError,
    CohereError,
    InvalidEndpointError,
)
from cohere_lib.payload import clean_payload


class HttpRequester:
    """
    Helper for dispatching JSON requests to the Cohere API.

    Parameters
    ----------
    settings : ConnectionSettings
        API key, base URL and API version.
    timeout : int, default ``DEFAULT_TIMEOUT``
        Per‑request timeout in seconds, handed to the session.
    session : Optional[requests.Session]
        Transport used to send requests; a fresh ``requests.Session`` when
        omitted.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        settings: ConnectionSettings,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def _full_url(self, endpoint: str) -> str:
        return f"{self.settings.api_url}/{endpoint}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
            REQUEST_SOURCE_HEADER: REQUEST_SOURCE,
        }

    def request(
        self,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        method: str = "POST",
    ) -> Any:
        """
        Send ``payload`` to ``endpoint`` and return the decoded JSON body.

        Parameters
        ----------
        endpoint : str
            One of :data:`cohere_lib.endpoints.POSSIBLE_ENDPOINTS`.
        payload : Optional[Mapping[str, Any]]
            Request body; ``None`` valued entries are dropped before
            serialisation.
        method : str, default ``"POST"``
            HTTP method.

        Returns
        -------
        Any
            The decoded JSON response (usually a dict).

        Raises
        ------
        InvalidEndpointError
            When ``endpoint`` is unknown. Nothing is sent.
        CohereConnectionError
            On network failures (DNS, TCP, TLS, timeout).
        CohereError
            On any other transport failure or a 5xx response.
        CohereAPIError
            When the body is not JSON, carries a ``message`` or the status
            is 4xx.
        """
        if not endpoints.is_valid(endpoint):
            raise InvalidEndpointError(
                f"Invalid endpoint {endpoint!r}; expected one of: "
                f"{', '.join(sorted(endpoints.POSSIBLE_ENDPOINTS))}"
            )

        url = self._full_url(endpoint)
        body = clean_payload(payload)
        self.logger.debug("%s %s | payload=%s", method, url, body)

        try:
            resp = self.session.request(
                method,
                url,
                data=json.dumps(body).encode("utf-8"),
                headers=self._headers(),
                timeout=self.timeout,
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as exc:
            raise CohereConnectionError(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            raise CohereError(
                f"Unexpected exception ({type(exc).__name__}): {exc}"
            ) from exc

        text = resp.text
        try:
            decoded = json.loads(text)
        except ValueError:
            raise CohereAPIError(f"Failed to decode JSON body: {text}")

        self._check_response(decoded, resp)
        return decoded

    def _check_response(self, decoded: Any, resp: requests.Response) -> None:
        """
        Translate an error response into the library exception hierarchy.

        The checks run in order:

        * an ``X-API-Warning`` header is logged and otherwise ignored,
        * a ``message`` field in the body raises :class:`CohereAPIError`,
        * a 4xx status raises :class:`CohereAPIError`,
        * a 5xx status raises :class:`CohereError`.
        """
        status_code = resp.status_code
        warning = _find_header(resp.headers, API_WARNING_HEADER)
        if warning is not None:
            self.logger.warning(warning)

        if isinstance(decoded, dict) and "message" in decoded:
            raise CohereAPIError.from_response(resp, decoded["message"])
        if 400 <= status_code < 500:
            raise CohereAPIError.from_response(
                resp,
                f"Unexpected client error (status {status_code}): "
                f"{json.dumps(decoded)}",
            )
        if status_code >= 500:
            raise CohereError(
                f"Unexpected server error (status {status_code}): "
                f"{json.dumps(decoded)}"
            )


def _find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # requests already gives a case-insensitive mapping; plain dicts do not
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None
