import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "COHERE_"


# Names of environment variables holding the connection settings
API_KEY_ENV = f"{_DontChangeMe.MAIN_ENV_PREFIX}API_KEY"
BASE_URL_ENV = f"{_DontChangeMe.MAIN_ENV_PREFIX}BASE_URL"
VERSION_ENV = f"{_DontChangeMe.MAIN_ENV_PREFIX}VERSION"

# Per-request timeout (seconds) handed to the transport
DEFAULT_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}DEFAULT_TIMEOUT", "120").strip()
)

# Maximum number of texts sent to ``embed`` in a single request
DEFAULT_EMBED_BATCH_SIZE = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}EMBED_BATCH_SIZE", "96"
    ).strip()
)

# Value of the client-identifier header
REQUEST_SOURCE = "python-sdk"
REQUEST_SOURCE_HEADER = "Request-Source"

# Non-fatal warning sent back by the API
API_WARNING_HEADER = "X-API-Warning"

DEFAULT_RERANK_MODEL = "rerank-english-v2.0"
DEFAULT_CLASSIFY_MODEL = "embed-english-v2.0"
