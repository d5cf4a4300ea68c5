"""
Services for the text generation endpoints.

Both endpoints return the decoded API answer unchanged.  Streamed answers
(newline delimited JSON) are not supported, so ``stream=True`` is refused
before anything is sent.
"""

from typing import Any, Dict

from cohere_lib.data_models.generation import ChatModel, GenerateModel
from cohere_lib.endpoints import Endpoints
from cohere_lib.exceptions import CohereUsageError
from cohere_lib.services.service_interface import BaseServiceInterface


class _NonStreamingService(BaseServiceInterface):
    def prepare(self, raw_payload: Any) -> Dict[str, Any]:
        payload = super().prepare(raw_payload)
        if payload.get("stream"):
            raise CohereUsageError(
                f"Streaming responses are not supported by {self.endpoint!r}; "
                f"call it with stream=False"
            )
        return payload


class GenerateService(_NonStreamingService):
    """Service for the ``generate`` endpoint."""

    endpoint = Endpoints.GENERATE
    model_cls = GenerateModel


class ChatService(_NonStreamingService):
    """Service for the ``chat`` endpoint."""

    endpoint = Endpoints.CHAT
    model_cls = ChatModel
