"""Parser configuration.

Holds the constants shared by both dialects and the user-tunable
ParserSettings (loadable from a YAML file and the environment).
"""

from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

# Reserved parameter that is never bound to a generated call site.
VERSION_MARKER = "api-version"

JSON_MEDIA_TYPE = "application/json"

BASIC_MEDIA_TYPES = (
    "application/json-patch+json",
    "application/json",
    "application/x-www-form-urlencoded",
    "text/json",
    "text/plain",
    "multipart/form-data",
    "multipart/mixed",
    "multipart/related",
    "multipart/batch",
)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")

DEFAULT_TAG = "Default"

REQUEST_BODY_PROP = "requestBody"


class ParserSettings(BaseSettings):
    """Knobs for the normalization stage.

    Every field can also be set from an ``OPENAPI_PARAMS_``-prefixed
    environment variable, e.g. ``OPENAPI_PARAMS_EXPAND_PARAMETERS=false``.
    """

    model_config = SettingsConfigDict(env_prefix="OPENAPI_PARAMS_", extra="forbid")

    version_marker: str = VERSION_MARKER
    expand_parameters: bool = True  # explode $ref query/form parameters
    expand_request_body: bool = True  # explode $ref JSON request bodies

    @classmethod
    def from_file(cls, path: Path) -> "ParserSettings":
        """Load settings from a YAML mapping; an empty file yields defaults.

        Values in the file take precedence over the environment.
        """
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping: {path}")
        return cls(**data)
