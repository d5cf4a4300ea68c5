from cohere_lib.client import CohereClient
from cohere_lib.config import ConnectionSettings
from cohere_lib.endpoints import Endpoints
from cohere_lib.exceptions import (
    CohereError,
    CohereAPIError,
    CohereConnectionError,
    CohereUsageError,
    InvalidEndpointError,
    InvalidDocumentFormatError,
    NoArgsAndNoPayloadError,
)

__all__ = [
    "CohereClient",
    "ConnectionSettings",
    "Endpoints",
    "CohereError",
    "CohereAPIError",
    "CohereConnectionError",
    "CohereUsageError",
    "InvalidEndpointError",
    "InvalidDocumentFormatError",
    "NoArgsAndNoPayloadError",
]
