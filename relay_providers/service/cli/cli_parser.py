"""CLI parser construction for relay-providers.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def _add_settings_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--settings`` and ``--provider`` to a subcommand parser."""
    parser.add_argument(
        "--settings",
        default=None,
        help="JSON or YAML settings file (default: $RELAY_SETTINGS_FILE)",
    )
    parser.add_argument(
        "--provider",
        default=None,
        help="Provider to use instead of the configured api_provider",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``check`` and ``query`` subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(
        prog="relay-providers",
        description="Query chat providers and verify their configuration",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # check
    p_check = sub.add_parser("check", help="Verify the configured provider can be reached")
    _add_settings_flags(p_check)
    p_check.add_argument("--json", action="store_true", help="Print a JSON summary")

    # query
    p_query = sub.add_parser("query", help="Send one prompt and print the completion")
    _add_settings_flags(p_query)
    p_query.add_argument("--prompt", required=True)
    p_query.add_argument("--system", default=None, help="Optional system message")

    return p


__all__ = ["build_parser"]
