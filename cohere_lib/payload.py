"""
Payload builder used by every endpoint service.

A payload is an ordered mapping of field name to value.  Before the request
body is serialised, entries whose value is ``None`` are dropped.  Falsy but
present values (``False``, ``0``, ``""``, ``[]``, ``{}``) are kept, so flags
such as ``stream=False`` or ``return_chatlog=False`` reach the API.
"""

from typing import Any, Dict, Mapping, Optional


def clean_payload(payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Return a new dict without the ``None`` valued entries of ``payload``.

    Key order of the input mapping is preserved; the input is not modified.
    ``None`` as the whole payload gives an empty dict.
    """
    if not payload:
        return {}
    return {key: value for key, value in payload.items() if value is not None}
