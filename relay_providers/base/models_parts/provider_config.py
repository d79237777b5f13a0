"""
Per-provider connection settings.

A :class:`ProviderConfig` is produced by a provider's ``from_settings``
classmethod from the application settings object. It is a pure data container
built per call; nothing here performs I/O or validates URL syntax beyond
presence (malformed URLs surface as network errors at call time).
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .model_options import ModelOptions


class ProviderConfig(BaseModel):
    """Credentials, endpoint and generation parameters for one provider.

    Attributes:
        api_key: Secret credential; may be empty when not configured.
        endpoint_url: Full URL the chat request is POSTed to.
        model: Model (or deployment) identifier sent as ``model``.
        model_options: Generation parameters, already restricted to the
            provider's supported subset by the client.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    endpoint_url: str = ""
    model: str = ""
    model_options: ModelOptions = Field(default_factory=ModelOptions)

    def __repr__(self) -> str:
        # Keep credentials out of reprs that may end up in logs.
        masked = "***" if self.api_key else ""
        return (
            f"ProviderConfig(api_key={masked!r}, endpoint_url={self.endpoint_url!r}, "
            f"model={self.model!r})"
        )


__all__ = ["ProviderConfig"]
