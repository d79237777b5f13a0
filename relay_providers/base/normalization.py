"""Conversation normalization helpers shared across providers.

Helpers here are pure: they never mutate the caller's list or its messages
and always return a new list of new :class:`ChatMessage` objects.

Anthropic's Messages API rejects a conversation in which two consecutive
messages share a role and has no ``system`` role inside ``messages``.
:func:`normalize_alternating` turns any conversation into one it accepts:

1. :func:`coerce_system_roles` retags every ``system`` message as ``user``.
2. :func:`repair_alternation` inserts a filler message of the opposite role
   between every adjacent same-role pair, then applies a trailing guard.

The forward scan compares every adjacent pair of the growing list, and each
filler differs from both of its neighbours, so after the scan the list already
alternates; the trailing guard never fires on scan output and the whole
transform is idempotent.
"""
from __future__ import annotations

from typing import Iterable, List

from .constants import ALTERNATION_FILLER, TRAILING_FILLER
from .models import ChatMessage


def _opposite(role: str) -> str:
    return "assistant" if role == "user" else "user"


def copy_messages(messages: Iterable[ChatMessage]) -> List[ChatMessage]:
    """Return a new list of copied messages."""
    return [ChatMessage(role=m.role, content=m.content) for m in messages]


def coerce_system_roles(messages: Iterable[ChatMessage]) -> List[ChatMessage]:
    """Return a copy of ``messages`` with every ``system`` role retagged ``user``."""
    return [
        ChatMessage(role="user" if m.role == "system" else m.role, content=m.content)
        for m in messages
    ]


def repair_alternation(messages: Iterable[ChatMessage]) -> List[ChatMessage]:
    """Return a copy of ``messages`` in which no two adjacent roles match.

    Parameters:
        messages: Conversation, oldest first.

    Returns:
        A new list. Between each adjacent same-role pair a message of the
        opposite role with content ``"Thanks."`` is inserted. If the final
        two messages still share a role afterwards, a message of the
        opposite role with content ``"Automated response"`` is appended.

    The scan index skips past each inserted filler so it is not compared
    again; the pass is linear in the conversation length.
    """
    out = copy_messages(messages)
    i = 0
    while i < len(out) - 1:
        if out[i].role == out[i + 1].role:
            out.insert(i + 1, ChatMessage(role=_opposite(out[i].role), content=ALTERNATION_FILLER))
            i += 1
        i += 1

    if len(out) > 1 and out[-1].role == out[-2].role:
        out.append(ChatMessage(role=_opposite(out[-1].role), content=TRAILING_FILLER))
    return out


def normalize_alternating(messages: Iterable[ChatMessage]) -> List[ChatMessage]:
    """Coerce system roles, then repair alternation (see module docstring)."""
    return repair_alternation(coerce_system_roles(messages))


def alternates(messages: List[ChatMessage]) -> bool:
    """Return True when no two adjacent messages share a role."""
    return all(a.role != b.role for a, b in zip(messages, messages[1:]))


__all__ = [
    "copy_messages",
    "coerce_system_roles",
    "repair_alternation",
    "normalize_alternating",
    "alternates",
]
