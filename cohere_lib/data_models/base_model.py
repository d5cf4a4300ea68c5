"""
Base model shared by every request model of the library.

Request models are plain Pydantic models; the JSON payload of a request is
the model dump in field declaration order, with ``None`` entries removed by
:func:`cohere_lib.payload.clean_payload`.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from cohere_lib.payload import clean_payload


class BaseRequestModel(BaseModel):
    """Common configuration for the endpoint request models."""

    model_config = ConfigDict(protected_namespaces=())

    def to_payload(self) -> Dict[str, Any]:
        return clean_payload(self.model_dump())
