"""ChatProvider Protocol.

Defines the uniform contract every provider client implements. Consumers
(the connectivity check, the CLI, host applications) depend only on this.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, runtime_checkable

from .models import ChatMessage
from .result import Result


@runtime_checkable
class ChatProvider(Protocol):
    """Minimal interface for chat-completion providers.

    Implementations never raise for provider failures: errors are returned
    inside ``Err`` results (``query_chat_model``) or as problem strings
    (``check_configuration``).
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"anthropic"``."""
        ...

    async def query_chat_model(self, messages: Iterable[ChatMessage]) -> Result[str]:
        """Send one conversation and return the completion text."""
        ...

    async def check_configuration(self) -> List[str]:
        """Return human-readable problems; an empty list means configured."""
        ...


__all__ = ["ChatProvider"]
