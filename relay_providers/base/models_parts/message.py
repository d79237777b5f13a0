"""
Chat message DTO used across providers.

Defines the :class:`ChatMessage` dataclass and the :data:`Role` literal. A
conversation is a plain ``list`` of messages ordered oldest first.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal


# Message roles accepted by every provider client.
Role = Literal["system", "user", "assistant"]

ROLES = ("system", "user", "assistant")


@dataclass
class ChatMessage:
    """A single turn of a conversation.

    Attributes:
        role: The author of the message (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content.
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        """Return the wire shape ``{"role": ..., "content": ...}``."""
        return {"role": self.role, "content": self.content}

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role="assistant", content=content)

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)


__all__ = ["ChatMessage", "Role", "ROLES"]
