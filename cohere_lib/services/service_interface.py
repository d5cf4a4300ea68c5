"""
Service layer for invoking the Cohere endpoints.

The module defines a tiny abstract interface that knows how to send a
payload to a specific endpoint using a ``HttpRequester`` instance and how to
reshape the decoded response.  Concrete subclasses bind the interface to the
endpoint identifier, the Pydantic model describing the request payload and,
where the API answer needs it, a ``reshape`` implementation.
"""

import abc
from typing import Any, Dict, Mapping, Type

from pydantic import BaseModel

from cohere_lib.exceptions import CohereAPIError
from cohere_lib.utils.http import HttpRequester


def expect_mapping(value: Any, what: str) -> Mapping[str, Any]:
    """Return ``value`` if it is a JSON object, otherwise raise :class:`CohereAPIError`."""
    if not isinstance(value, Mapping):
        raise CohereAPIError(
            f"Unexpected response shape for {what}: expected an object, "
            f"got {type(value).__name__}"
        )
    return value


def expect_list(value: Any, what: str) -> list:
    """Return ``value`` if it is a JSON array, otherwise raise :class:`CohereAPIError`."""
    if not isinstance(value, list):
        raise CohereAPIError(
            f"Unexpected response shape for {what}: expected an array, "
            f"got {type(value).__name__}"
        )
    return value


class BaseServiceInterface(abc.ABC):
    """
    Abstract base class for endpoint‑service wrappers.

    Sub‑classes must set the ``endpoint`` attribute (one of
    :data:`cohere_lib.endpoints.POSSIBLE_ENDPOINTS`) and the ``model_cls``
    attribute (the Pydantic model of the request payload).  ``call`` sends
    the payload and returns ``reshape(response)``; the default ``reshape``
    returns the decoded body unchanged.
    """

    # Endpoint identifier, e.g. ``"generate"``
    endpoint: str = ""

    # Pydantic model class used to build the request payload.
    model_cls: Type[BaseModel] = None

    def __init__(self, http: HttpRequester, logger):
        """
        Initialise the service wrapper.

        Parameters
        ----------
        http : HttpRequester
            Helper object that dispatches requests to the API.
        logger : logging.Logger
            Logger instance used for debugging.
        """
        self.http = http
        self.logger = logger

    def prepare(self, raw_payload: Any) -> Dict[str, Any]:
        """
        Turn ``raw_payload`` (a ``model_cls`` instance or a mapping of its
        fields) into the cleaned JSON payload.
        """
        if not isinstance(raw_payload, self.model_cls):
            raw_payload = self.model_cls(**dict(raw_payload))
        return raw_payload.to_payload()

    def call(self, raw_payload: Any) -> Any:
        """
        Send the request to the configured endpoint and return the reshaped
        response.

        Parameters
        ----------
        raw_payload : Any
            Instance of ``self.model_cls`` or a dict with its fields.

        Returns
        -------
        Any
            The value returned by :meth:`reshape`.
        """
        payload = self.prepare(raw_payload)
        return self.reshape(self.http.request(self.endpoint, payload), payload)

    def reshape(self, response: Any, payload: Mapping[str, Any]) -> Any:
        return response
