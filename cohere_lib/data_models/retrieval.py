"""
Request models for the ``rerank`` and ``embed`` endpoints.
"""

from typing import Any, List, Optional

from cohere_lib.constants import DEFAULT_RERANK_MODEL
from cohere_lib.data_models.base_model import BaseRequestModel


class RerankModel(BaseRequestModel):
    """
    Payload for the ``rerank`` endpoint.

    ``documents`` may hold plain strings or mappings with a ``text`` key; the
    rerank service normalises them to ``{"text": ...}`` before sending.  The
    shape is checked by the service, not here, so that a bad document raises
    :class:`InvalidDocumentFormatError`.

    ``return_documents`` is always sent as ``False``: documents are attached
    to the results locally, by index.
    """

    query: str
    documents: List[Any]
    model: str = DEFAULT_RERANK_MODEL
    top_n: Optional[int] = None
    max_chunks_per_doc: Optional[int] = None
    return_documents: bool = False


class EmbedModel(BaseRequestModel):
    """
    Payload for the ``embed`` endpoint.

    The embed service splits ``texts`` into batches and sends one payload per
    batch, each a copy of this model with ``texts`` replaced by the slice.
    """

    texts: List[str]
    model: Optional[str] = None
    truncate: Optional[str] = None
    compress: bool = False
    compression_codebook: Optional[str] = "default"


RERANK_REQ_ARGS = ["query", "documents"]
EMBED_REQ_ARGS = ["texts"]
