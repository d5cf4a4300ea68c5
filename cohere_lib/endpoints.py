"""
Closed set of endpoints exposed by the Cohere API.

Every request goes through :func:`is_valid` before anything is sent; a name
outside :data:`POSSIBLE_ENDPOINTS` is a usage error.
"""


class Endpoints:
    GENERATE = "generate"
    CHAT = "chat"
    RERANK = "rerank"
    EMBED = "embed"
    CLASSIFY = "classify"
    SUMMARIZE = "summarize"


POSSIBLE_ENDPOINTS = frozenset(
    [
        Endpoints.GENERATE,
        Endpoints.CHAT,
        Endpoints.RERANK,
        Endpoints.EMBED,
        Endpoints.CLASSIFY,
        Endpoints.SUMMARIZE,
    ]
)


def is_valid(name) -> bool:
    return isinstance(name, str) and name in POSSIBLE_ENDPOINTS
