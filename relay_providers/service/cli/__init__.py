"""relay-providers command line (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``; performs no
provider logic directly.
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_check, handle_query
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    return handle_query(args) if args.cmd == "query" else handle_check(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
