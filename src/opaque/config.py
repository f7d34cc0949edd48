"""Routing configuration.

RoutingConfig is a frozen dataclass — immutable after creation, validated
once on construction, shared by the encoder, decoder, navigator, and
middleware.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from opaque.errors import ConfigurationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class RoutingConfig:
    """Routing configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RoutingConfig(opaque_root="/s/", decoy_params=True)
    """

    # Pathname under which every encoded URL lives
    opaque_root: str = "/v2/"

    # Legacy query parameters (read-only)
    code_param: str = "code"
    error_code_param: str = "errorCode"

    # Decoy query parameters on encoded URLs
    decoy_params: bool = False
    code_length: int = 16
    error_code_length: int = 6

    # Pathnames that are never rewritten into the opaque form
    passthrough_prefixes: tuple[str, ...] = (
        "/api/",
        "/uploads/",
        "/static/",
        "/favicon.ico",
        "/_vite/",
    )

    def __post_init__(self) -> None:
        if not (self.opaque_root.startswith("/") and self.opaque_root.endswith("/")):
            msg = f"opaque_root must start and end with '/', got {self.opaque_root!r}"
            raise ConfigurationError(msg)
        if not self.code_param or not self.error_code_param:
            msg = "code_param and error_code_param must be non-empty"
            raise ConfigurationError(msg)
        if self.code_param == self.error_code_param:
            msg = f"code_param and error_code_param must differ, both are {self.code_param!r}"
            raise ConfigurationError(msg)
        if self.code_length < 1 or self.error_code_length < 1:
            msg = "code_length and error_code_length must be positive"
            raise ConfigurationError(msg)

    def is_opaque(self, pathname: str) -> bool:
        """True if *pathname* is the opaque root or lives beneath it."""
        return pathname == self.opaque_root.rstrip("/") or pathname.startswith(self.opaque_root)

    def is_passthrough(self, pathname: str) -> bool:
        """True if *pathname* must never be rewritten."""
        return any(pathname.startswith(prefix) for prefix in self.passthrough_prefixes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RoutingConfig":
        """Build a config from ``OPAQUE_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        if "OPAQUE_ROOT" in env:
            overrides["opaque_root"] = env["OPAQUE_ROOT"]
        if "OPAQUE_CODE_PARAM" in env:
            overrides["code_param"] = env["OPAQUE_CODE_PARAM"]
        if "OPAQUE_ERROR_CODE_PARAM" in env:
            overrides["error_code_param"] = env["OPAQUE_ERROR_CODE_PARAM"]
        if "OPAQUE_DECOY_PARAMS" in env:
            overrides["decoy_params"] = env["OPAQUE_DECOY_PARAMS"].strip().lower() in _TRUTHY
        return cls(**overrides)  # type: ignore[arg-type]


DEFAULT_CONFIG = RoutingConfig()
