"""AnthropicProvider adapter.

Talks to the Anthropic Messages API with a direct JSON POST (no SDK).

Key behaviors:
* Conversations are reshaped by :func:`normalize_alternating`: ``system``
  messages become ``user`` messages and filler turns are inserted so roles
  strictly alternate, which the API requires. The caller's list is copied,
  never modified.
* ``frequency_penalty`` and ``presence_penalty`` are not part of the
  Messages API and are dropped from the configured options.
* The completion is ``content[0].text`` of the response body.

Headers: ``content-type``, ``anthropic-version: 2023-06-01``, ``x-api-key``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..base.constants import ANTHROPIC_API_VERSION, JSON_CONTENT_TYPE
from ..base.models import ChatMessage
from ..base.normalization import normalize_alternating
from ..base.provider import BaseChatProvider


class AnthropicProvider(BaseChatProvider):
    """Anthropic Messages API client."""

    name = "anthropic"
    display_name = "Anthropic"
    unsupported_options = frozenset({"frequency_penalty", "presence_penalty"})

    @classmethod
    def api_settings(cls, settings: Any) -> Any:
        return settings.anthropic_api_settings

    def normalize_messages(self, messages: Sequence[ChatMessage]) -> List[ChatMessage]:
        return normalize_alternating(messages)

    def build_headers(self) -> Dict[str, str]:
        return {
            "content-type": JSON_CONTENT_TYPE,
            "anthropic-version": ANTHROPIC_API_VERSION,
            "x-api-key": self._config.api_key,
        }

    def extract_completion(self, data: Any) -> Any:
        return data["content"][0]["text"]


__all__ = ["AnthropicProvider"]
