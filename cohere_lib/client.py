import logging
from typing import Optional, Dict, Any, Union, List, Mapping

import requests

from cohere_lib.config import ConnectionSettings
from cohere_lib.constants import DEFAULT_EMBED_BATCH_SIZE, DEFAULT_TIMEOUT
from cohere_lib.exceptions import NoArgsAndNoPayloadError
from cohere_lib.utils.http import HttpRequester
from cohere_lib.services.generation import GenerateService, ChatService
from cohere_lib.services.rerank import RerankService
from cohere_lib.services.embedding import EmbedService
from cohere_lib.services.classification import ClassifyService, SummarizeService
from cohere_lib.data_models.generation import (
    GenerateModel,
    ChatModel,
    GENERATE_REQ_ARGS,
    CHAT_REQ_ARGS,
)
from cohere_lib.data_models.retrieval import (
    RerankModel,
    EmbedModel,
    RERANK_REQ_ARGS,
    EMBED_REQ_ARGS,
)
from cohere_lib.data_models.classification import (
    ClassifyModel,
    SummarizeModel,
    CLASSIFY_REQ_ARGS,
    SUMMARIZE_REQ_ARGS,
)


class CohereClient:

    def __init__(
        self,
        api_key: Optional[str],
        api: Optional[str],
        version: Optional[str],
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        batch_size: int = DEFAULT_EMBED_BATCH_SIZE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = ConnectionSettings.build(
            api_key=api_key, base_url=api, version=version
        )
        self.timeout = timeout
        self.batch_size = batch_size
        self.logger = logger or logging.getLogger(__name__)
        self.http = HttpRequester(
            settings=self.settings,
            timeout=self.timeout,
            session=session,
            logger=self.logger,
        )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **kwargs
    ) -> "CohereClient":
        """
        Build a client from ``COHERE_API_KEY``, ``COHERE_BASE_URL`` and
        ``COHERE_VERSION``.  Remaining keyword arguments go to ``__init__``.
        """
        settings = ConnectionSettings.from_env(environ)
        return cls(
            api_key=settings.api_key,
            api=settings.base_url,
            version=settings.version,
            **kwargs,
        )

    # ------------------------------------------------------------------ #
    def request(
        self,
        endpoint: str,
        payload: Optional[Dict[str, Any]] = None,
        method: str = "POST",
    ) -> Any:
        return self.http.request(endpoint, payload, method)

    # ------------------------------------------------------------------ #
    def generate(
        self,
        prompt: Optional[str] = None,
        payload: Optional[Union[Dict[str, Any], GenerateModel]] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        payload = self._payload_or_args(
            payload, GENERATE_REQ_ARGS, dict(prompt=prompt, **kwargs)
        )
        return GenerateService(self.http, self.logger).call(payload)

    # ------------------------------------------------------------------ #
    def chat(
        self,
        query: Optional[str] = None,
        payload: Optional[Union[Dict[str, Any], ChatModel]] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        payload = self._payload_or_args(
            payload, CHAT_REQ_ARGS, dict(query=query, **kwargs)
        )
        return ChatService(self.http, self.logger).call(payload)

    # ------------------------------------------------------------------ #
    def rerank(
        self,
        query: Optional[str] = None,
        documents: Optional[List[Union[str, Dict[str, Any]]]] = None,
        payload: Optional[Union[Dict[str, Any], RerankModel]] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        payload = self._payload_or_args(
            payload,
            RERANK_REQ_ARGS,
            dict(query=query, documents=documents, **kwargs),
        )
        return RerankService(self.http, self.logger).call(payload)

    # ------------------------------------------------------------------ #
    def embed(
        self,
        texts: Optional[List[str]] = None,
        payload: Optional[Union[Dict[str, Any], EmbedModel]] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        payload = self._payload_or_args(
            payload, EMBED_REQ_ARGS, dict(texts=texts, **kwargs)
        )
        return EmbedService(
            self.http, self.logger, batch_size=self.batch_size
        ).call(payload)

    # ------------------------------------------------------------------ #
    def classify(
        self,
        inputs: Optional[List[str]] = None,
        examples: Optional[List[Dict[str, str]]] = None,
        payload: Optional[Union[Dict[str, Any], ClassifyModel]] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        payload = self._payload_or_args(
            payload,
            CLASSIFY_REQ_ARGS,
            dict(inputs=inputs, examples=examples, **kwargs),
        )
        return ClassifyService(self.http, self.logger).call(payload)

    # ------------------------------------------------------------------ #
    def summarize(
        self,
        text: Optional[str] = None,
        payload: Optional[Union[Dict[str, Any], SummarizeModel]] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        payload = self._payload_or_args(
            payload, SUMMARIZE_REQ_ARGS, dict(text=text, **kwargs)
        )
        return SummarizeService(self.http, self.logger).call(payload)

    # ------------------------------------------------------------------ #
    @staticmethod
    def _payload_or_args(
        payload: Optional[Any], required: List[str], args: Dict[str, Any]
    ) -> Any:
        """
        Return ``payload`` when given, otherwise the keyword arguments without
        the ones left as ``None``.  Missing required arguments raise
        :class:`NoArgsAndNoPayloadError`.
        """
        if payload is not None:
            return payload
        missing = [name for name in required if args.get(name) is None]
        if missing:
            raise NoArgsAndNoPayloadError(
                f"No payload and no required arguments were passed: "
                f"{', '.join(missing)}"
            )
        return {key: value for key, value in args.items() if value is not None}
