"""
Service for the ``rerank`` endpoint.

The API is always called with ``return_documents=False``; the service keeps
the normalised documents it sent and attaches each one to the ranked result
that points at it through ``index``.
"""

from typing import Any, Dict, List, Mapping

from cohere_lib.data_models.retrieval import RerankModel
from cohere_lib.endpoints import Endpoints
from cohere_lib.exceptions import CohereAPIError, InvalidDocumentFormatError
from cohere_lib.services.service_interface import (
    BaseServiceInterface,
    expect_list,
    expect_mapping,
)


def normalize_documents(documents: List[Any]) -> List[Dict[str, Any]]:
    """
    Convert every document into ``{"text": ...}`` form.

    Strings are wrapped; mappings must contain a ``text`` key and are copied.
    Anything else raises :class:`InvalidDocumentFormatError`.
    """
    normalized = []
    for position, document in enumerate(documents):
        if isinstance(document, str):
            normalized.append({"text": document})
        elif isinstance(document, Mapping) and "text" in document:
            normalized.append(dict(document))
        else:
            raise InvalidDocumentFormatError(
                f"Invalid format for document at position {position}: "
                f"expected a string or a mapping with a 'text' field, "
                f"got {type(document).__name__}"
            )
    return normalized


class RerankService(BaseServiceInterface):
    endpoint = Endpoints.RERANK
    model_cls = RerankModel

    def prepare(self, raw_payload: Any) -> Dict[str, Any]:
        payload = super().prepare(raw_payload)
        payload["documents"] = normalize_documents(payload["documents"])
        payload["return_documents"] = False
        return payload

    def reshape(self, response: Any, payload: Mapping[str, Any]) -> Dict[str, Any]:
        response = expect_mapping(response, "rerank")
        documents = payload["documents"]
        results = []
        for result in expect_list(response.get("results", []), "results"):
            index = expect_mapping(result, "rerank result").get("index")
            if (
                not isinstance(index, int)
                or isinstance(index, bool)
                or not 0 <= index < len(documents)
            ):
                raise CohereAPIError(
                    f"Rerank result index {index!r} is out of range for "
                    f"{len(documents)} documents"
                )
            results.append({**result, "document": documents[index]})

        return {
            "id": response.get("id"),
            "results": results,
            "meta": response.get("meta"),
        }
