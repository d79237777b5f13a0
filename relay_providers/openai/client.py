"""OpenAI provider adapter.

Posts to the Chat Completions endpoint
(``https://api.openai.com/v1/chat/completions`` by default) with bearer
authentication. The API accepts ``system`` messages and repeated roles, so
the conversation is sent as an unchanged copy, and every configured model
option is supported.

The completion is ``choices[0].message.content``.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.provider import BaseChatProvider


class OpenAIProvider(BaseChatProvider):
    """OpenAI Chat Completions client."""

    name = "openai"
    display_name = "OpenAI"

    @classmethod
    def api_settings(cls, settings: Any) -> Any:
        return settings.openai_api_settings

    def build_headers(self) -> Dict[str, str]:
        headers = self.json_headers()
        headers["Authorization"] = f"Bearer {self._config.api_key}"
        return headers

    def extract_completion(self, data: Any) -> Any:
        return data["choices"][0]["message"]["content"]


__all__ = ["OpenAIProvider"]
