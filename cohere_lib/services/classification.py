"""
Services for the ``classify`` and ``summarize`` endpoints.
"""

from typing import Any, Dict, Mapping

from cohere_lib.data_models.classification import ClassifyModel, SummarizeModel
from cohere_lib.endpoints import Endpoints
from cohere_lib.services.service_interface import (
    BaseServiceInterface,
    expect_list,
    expect_mapping,
)


class ClassifyService(BaseServiceInterface):
    """
    Service for the ``classify`` endpoint.

    Each classification's ``labels`` go from ``{label: {"confidence": x}}``
    to ``{label: x}``; ``input``, ``prediction``, ``confidence`` and ``id``
    are kept as returned.
    """

    endpoint = Endpoints.CLASSIFY
    model_cls = ClassifyModel

    def reshape(self, response: Any, payload: Mapping[str, Any]) -> Dict[str, Any]:
        response = expect_mapping(response, "classify")
        classifications = []
        for res in expect_list(response.get("classifications", []), "classifications"):
            res = expect_mapping(res, "classification")
            labels = {
                label: expect_mapping(prediction, f"label {label!r}").get("confidence")
                for label, prediction in expect_mapping(
                    res.get("labels") or {}, "labels"
                ).items()
            }
            classifications.append(
                {
                    "input": res.get("input"),
                    "prediction": res.get("prediction"),
                    "confidence": res.get("confidence"),
                    "labels": labels,
                    "id": res.get("id"),
                }
            )
        return {"classifications": classifications, "meta": response.get("meta")}


class SummarizeService(BaseServiceInterface):
    """Service for the ``summarize`` endpoint; keeps only ``id``, ``summary`` and ``meta``."""

    endpoint = Endpoints.SUMMARIZE
    model_cls = SummarizeModel

    def reshape(self, response: Any, payload: Mapping[str, Any]) -> Dict[str, Any]:
        response = expect_mapping(response, "summarize")
        return {
            "id": response.get("id"),
            "summary": response.get("summary"),
            "meta": response.get("meta"),
        }
