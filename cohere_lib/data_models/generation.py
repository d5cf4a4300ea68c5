"""
Request models for the text generation endpoints (``generate`` and ``chat``).
"""

from typing import Any, Dict, List, Optional

from cohere_lib.data_models.base_model import BaseRequestModel


class GenerateModel(BaseRequestModel):
    """
    Payload for the ``generate`` endpoint.

    Attributes
    ----------
    prompt : str
        Text the model should continue.
    model : Optional[str]
        Model identifier; the API default is used when omitted.
    preset : Optional[str]
        Name of a preset saved in the Cohere playground.
    num_generations : Optional[int]
        Number of completions to return.
    max_tokens : Optional[int]
        Upper bound of generated tokens per completion.
    temperature, k, p : Optional
        Sampling controls.
    frequency_penalty, presence_penalty : Optional[float]
        Repetition penalties.
    end_sequences, stop_sequences : Optional[List[str]]
        Generation stops at these sequences (excluded / included).
    return_likelihoods : Optional[str]
        ``"GENERATION"``, ``"ALL"`` or ``"NONE"``.
    truncate : Optional[str]
        ``"NONE"``, ``"START"`` or ``"END"``.
    logit_bias : Optional[Dict[int, float]]
        Token id to bias mapping.
    stream : bool, default ``False``
        Sent as ``False``; streamed responses are not supported and the
        generation services refuse ``True``.
    """

    prompt: str
    model: Optional[str] = None
    preset: Optional[str] = None
    num_generations: Optional[int] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    k: Optional[int] = None
    p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    end_sequences: Optional[List[str]] = None
    stop_sequences: Optional[List[str]] = None
    return_likelihoods: Optional[str] = None
    truncate: Optional[str] = None
    logit_bias: Optional[Dict[int, float]] = None
    stream: bool = False


class ChatModel(BaseRequestModel):
    """
    Payload for the ``chat`` endpoint.

    Attributes
    ----------
    query : str
        The latest user message.
    conversation_id : Optional[str]
        Identifier that lets the API keep the conversation server side.
    chat_history : Optional[List[Dict[str, Any]]]
        Previous turns, each with ``user_name`` and ``text`` keys.
    chatlog_override, preamble_override : Optional
        Replace the stored chatlog / system preamble for this call.
    temperature : float, default ``0.8``
    return_chatlog, return_prompt, return_preamble : bool, default ``False``
        Ask the API to echo back the respective parts of the prompt.
    stream : bool, default ``False``
        Same restriction as :attr:`GenerateModel.stream`.
    """

    query: str
    conversation_id: Optional[str] = None
    model: Optional[str] = None
    return_chatlog: bool = False
    return_prompt: bool = False
    return_preamble: bool = False
    chatlog_override: Optional[List[Dict[str, Any]]] = None
    chat_history: Optional[List[Dict[str, Any]]] = None
    preamble_override: Optional[str] = None
    user_name: Optional[str] = None
    temperature: float = 0.8
    max_tokens: Optional[int] = None
    stream: bool = False


GENERATE_REQ_ARGS = ["prompt"]
CHAT_REQ_ARGS = ["query"]
