"""
Service for the ``embed`` endpoint.

The API limits the number of texts per call, so the input is sent in
consecutive batches of ``batch_size`` texts.  Batches are sent one after
another; the first failure aborts the remaining ones.  Embeddings of all
batches are concatenated in input order and ``meta`` is taken from the first
batch.
"""

from typing import Any, Dict, List

from cohere_lib.constants import DEFAULT_EMBED_BATCH_SIZE
from cohere_lib.data_models.retrieval import EmbedModel
from cohere_lib.endpoints import Endpoints
from cohere_lib.services.service_interface import (
    BaseServiceInterface,
    expect_list,
    expect_mapping,
)


def batched(items: List[Any], batch_size: int) -> List[List[Any]]:
    """Split ``items`` into slices ``[i*batch_size, (i+1)*batch_size)``."""
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return [items[i : i + batch_size] for i in range(0, len(items), batch_size)]


class EmbedService(BaseServiceInterface):
    endpoint = Endpoints.EMBED
    model_cls = EmbedModel

    def __init__(self, http, logger, batch_size: int = DEFAULT_EMBED_BATCH_SIZE):
        super().__init__(http, logger)
        self.batch_size = batch_size

    def call(self, raw_payload: Any) -> Dict[str, Any]:
        payload = self.prepare(raw_payload)
        batches = batched(payload["texts"], self.batch_size)

        embeddings: List[Any] = []
        compressed_embeddings: List[Any] = []
        meta = None
        for number, texts in enumerate(batches):
            self.logger.debug(
                "embed batch %d/%d (%d texts)", number + 1, len(batches), len(texts)
            )
            result = expect_mapping(
                self.http.request(self.endpoint, {**payload, "texts": texts}), "embed"
            )
            embeddings.extend(expect_list(result.get("embeddings") or [], "embeddings"))
            compressed_embeddings.extend(
                expect_list(
                    result.get("compressed_embeddings") or [], "compressed_embeddings"
                )
            )
            if number == 0:
                meta = result.get("meta")

        return {
            "embeddings": embeddings,
            "compressed_embeddings": compressed_embeddings,
            "meta": meta,
        }
