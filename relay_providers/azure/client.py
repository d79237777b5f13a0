"""Azure OpenAI provider adapter.

Azure-hosted deployments expose the OpenAI Chat Completions schema at a
per-deployment URL, e.g.::

    https://<resource>.openai.azure.com/openai/deployments/<deployment>/chat/completions?api-version=2024-02-01

The full URL (deployment and ``api-version`` included) is configured as the
endpoint; authentication uses the ``api-key`` header instead of a bearer
token. The deployment already fixes the model, so ``model`` is only sent
when one is configured.

The completion is ``choices[0].message.content``.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

from ..base.models import ChatMessage
from ..base.provider import BaseChatProvider


class AzureOpenAIProvider(BaseChatProvider):
    """Azure OpenAI Chat Completions client."""

    name = "azure"
    display_name = "Azure OpenAI"

    @classmethod
    def api_settings(cls, settings: Any) -> Any:
        return settings.azure_oai_api_settings

    def build_headers(self) -> Dict[str, str]:
        headers = self.json_headers()
        headers["api-key"] = self._config.api_key
        return headers

    def build_body(self, messages: Sequence[ChatMessage]) -> Dict[str, Any]:
        body = super().build_body(messages)
        if not body.get("model"):
            body.pop("model", None)
        return body

    def extract_completion(self, data: Any) -> Any:
        return data["choices"][0]["message"]["content"]


__all__ = ["AzureOpenAIProvider"]
