"""CLI action handlers.

Purpose
-------
Subcommand handlers for ``relay-providers``, keeping the entrypoint thin.
This module has no top-level side effects and is safe to import in tests.

Exit codes
----------
- ``0``: success
- ``1``: the provider check failed or the query returned an error
- ``2``: settings could not be loaded or the provider is unknown

Output
------
Completions and notices go to stdout; errors go to stderr. With ``--json``
the check prints a single JSON object.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from ...base.errors import ConfigurationError
from ...base.factory import UnknownProviderError, create_from_settings
from ...base.models import ChatMessage
from ...config import Settings, load_settings
from ..connectivity import ConnectivityCheck, ConnectivityStatus

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _load(args: argparse.Namespace) -> Optional[Settings]:
    """Load settings for ``args``; print the error and return None on failure."""
    overrides: Dict[str, Any] = {}
    if args.provider:
        overrides["api_provider"] = args.provider
    try:
        return load_settings(args.settings, overrides or None)
    except ConfigurationError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return None


def handle_check(args: argparse.Namespace) -> int:
    """Run the connectivity check for the selected provider.

    Prints the notice (or a JSON summary with ``--json``) and returns
    ``0`` on success, ``1`` on failure.
    """
    settings = _load(args)
    if settings is None:
        return EXIT_USAGE

    notices: List[str] = []
    check = ConnectivityCheck(
        settings,
        notify=notices.append,
        client_factory=lambda s: create_from_settings(s),
    )
    try:
        status = asyncio.run(check.run())
    except UnknownProviderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if args.json:
        print(
            json.dumps(
                {
                    "provider": settings.api_provider,
                    "status": status.value,
                    "problems": check.problems,
                },
                ensure_ascii=False,
            )
        )
    else:
        for text in notices:
            print(text)
        for problem in check.problems[1:]:
            print(f"  - {problem}")
    return EXIT_OK if status is ConnectivityStatus.SUCCESS else EXIT_FAILURE


def build_messages(prompt: str, system: Optional[str] = None) -> List[ChatMessage]:
    """Return ``[system?, user]`` for a single-shot query."""
    messages: List[ChatMessage] = []
    if system:
        messages.append(ChatMessage.system(system))
    messages.append(ChatMessage.user(prompt))
    return messages


def handle_query(args: argparse.Namespace) -> int:
    """Send ``--prompt`` (with optional ``--system``) and print the completion."""
    settings = _load(args)
    if settings is None:
        return EXIT_USAGE
    try:
        client = create_from_settings(settings)
    except UnknownProviderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    result = asyncio.run(client.query_chat_model(build_messages(args.prompt, args.system)))
    if result.is_err():
        print(f"error: {result.error.message}", file=sys.stderr)
        return EXIT_FAILURE
    print(result.value)
    return EXIT_OK


__all__ = ["handle_check", "handle_query", "build_messages"]
