"""
Request models for the ``classify`` and ``summarize`` endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel

from cohere_lib.constants import DEFAULT_CLASSIFY_MODEL
from cohere_lib.data_models.base_model import BaseRequestModel


class ClassifyExample(BaseModel):
    """A single labelled example for ``classify``."""

    text: str
    label: str


class ClassifyModel(BaseRequestModel):
    """
    Payload for the ``classify`` endpoint.

    Attributes
    ----------
    inputs : List[str]
        Texts to classify.
    examples : List[ClassifyExample]
        Labelled examples; plain ``{"text", "label"}`` dicts are accepted.
    model : str, default ``DEFAULT_CLASSIFY_MODEL``
    preset : Optional[str]
    truncate : Optional[str]
    """

    model: str = DEFAULT_CLASSIFY_MODEL
    preset: Optional[str] = None
    inputs: List[str]
    examples: List[ClassifyExample]
    truncate: Optional[str] = None


class SummarizeModel(BaseRequestModel):
    """
    Payload for the ``summarize`` endpoint.

    Attributes
    ----------
    text : str
        Text to summarise.
    length : Optional[str]
        ``"short"``, ``"medium"``, ``"long"`` or ``"auto"``.
    format : Optional[str]
        ``"paragraph"``, ``"bullets"`` or ``"auto"``.
    extractiveness : Optional[str]
        ``"low"``, ``"medium"``, ``"high"`` or ``"auto"``.
    additional_command : Optional[str]
        Free‑form instruction appended to the summarisation prompt.
    """

    model: Optional[str] = None
    text: str
    length: Optional[str] = None
    format: Optional[str] = None
    temperature: Optional[float] = None
    additional_command: Optional[str] = None
    extractiveness: Optional[str] = None


CLASSIFY_REQ_ARGS = ["inputs", "examples"]
SUMMARIZE_REQ_ARGS = ["text"]
