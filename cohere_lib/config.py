"""
Connection settings for the Cohere API.

:class:`ConnectionSettings` is an immutable triple (api key, base URL, API
version) built once, when the client is created.  Any missing or empty value
fails fast with :class:`CohereConnectionError`.
"""

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from cohere_lib.constants import API_KEY_ENV, BASE_URL_ENV, VERSION_ENV
from cohere_lib.exceptions import CohereConnectionError

# Characters stripped from each field on top of surrounding whitespace
_STRIP_CHARS = {"api_key": "", "base_url": "/", "version": "/"}


def _missing_settings_message(missing) -> str:
    return (
        f"Missing connection settings ({', '.join(missing)}). Please set "
        f"{API_KEY_ENV}, {BASE_URL_ENV}, and {VERSION_ENV}."
    )


class ConnectionSettings(BaseModel):
    """
    Attributes
    ----------
    api_key : str
        Sent as ``Authorization: Bearer <api_key>``.
    base_url : str
        e.g. ``"https://api.cohere.ai"``; a trailing slash is stripped.
    version : str
        API version segment of the URL, e.g. ``"v1"``; surrounding slashes
        are stripped.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str
    version: str

    @model_validator(mode="before")
    @classmethod
    def _require_all(cls, data: Any) -> Any:
        # CohereConnectionError is not a ValueError, so pydantic lets it through
        if not isinstance(data, Mapping):
            return data

        cleaned = dict(data)
        missing = []
        for name, chars in _STRIP_CHARS.items():
            value = data.get(name)
            value = "" if value is None else str(value).strip()
            if chars:
                value = value.rstrip(chars) if name == "base_url" else value.strip(chars)
            if not value:
                missing.append(name)
            cleaned[name] = value

        if missing:
            raise CohereConnectionError(_missing_settings_message(missing))
        return cleaned

    @classmethod
    def build(
        cls,
        api_key: Optional[str],
        base_url: Optional[str],
        version: Optional[str],
    ) -> "ConnectionSettings":
        """
        Validate and build the settings; any remaining validation problem is
        reported as :class:`CohereConnectionError` as well.
        """
        try:
            return cls(api_key=api_key, base_url=base_url, version=version)
        except ValidationError as exc:
            invalid = [str(err["loc"][0]) for err in exc.errors() if err["loc"]]
            raise CohereConnectionError(_missing_settings_message(invalid)) from exc

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "ConnectionSettings":
        environ = os.environ if environ is None else environ
        return cls.build(
            api_key=environ.get(API_KEY_ENV),
            base_url=environ.get(BASE_URL_ENV),
            version=environ.get(VERSION_ENV),
        )

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/{self.version}"
