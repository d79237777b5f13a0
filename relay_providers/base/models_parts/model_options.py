"""
Generation parameters shared by the host application.

``ModelOptions`` is the flat set of sampling/length parameters configured once
in application settings. Providers do not all accept every option, so each
client builds its payload with :meth:`ModelOptions.to_payload` and an
``exclude`` set naming the options its API does not understand.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelOptions(BaseModel):
    """Sampling and length parameters forwarded in request bodies.

    Attributes:
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        max_tokens: Upper bound on generated tokens.
        frequency_penalty: OpenAI-style repetition penalty.
        presence_penalty: OpenAI-style topic penalty.

    Unset options (``None``) are never sent.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)

    def to_payload(self, exclude: Iterable[str] = ()) -> Dict[str, Any]:
        """Return set options as a flat mapping, minus the ``exclude`` names."""
        dropped = set(exclude)
        return {
            k: v
            for k, v in self.model_dump(exclude_none=True).items()
            if k not in dropped
        }


__all__ = ["ModelOptions"]
