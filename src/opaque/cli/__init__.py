"""Opaque CLI — inspect and produce opaque URLs from the shell.

Entry point registered as ``opaque`` in ``pyproject.toml``::

    [project.scripts]
    opaque = "opaque.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``opaque`` command."""
    parser = argparse.ArgumentParser(
        prog="opaque",
        description="Opaque — hash-fragment URL routing with legacy code support.",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Opaque root pathname (default: $OPAQUE_ROOT or /v2/)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log routing decisions")
    subparsers = parser.add_subparsers(dest="command")

    # -- opaque encode ----------------------------------------------------
    encode_parser = subparsers.add_parser("encode", help="Encode an internal path")
    encode_parser.add_argument("path", help="Internal path (e.g. /article/42)")
    encode_parser.add_argument(
        "--decoy",
        action="store_true",
        help="Add random code/errorCode query parameters",
    )

    # -- opaque decode ----------------------------------------------------
    decode_parser = subparsers.add_parser("decode", help="Decode a public URL")
    decode_parser.add_argument("url", help="Public URL (absolute or path-only)")

    # -- opaque resolve ---------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Decode a URL and dispatch it")
    resolve_parser.add_argument("url", help="Public URL (absolute or path-only)")

    # -- opaque routes ----------------------------------------------------
    subparsers.add_parser("routes", help="List the page table in match order")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from opaque.cli._commands import run_decode, run_encode, run_resolve, run_routes

    if args.command == "encode":
        run_encode(args)
    elif args.command == "decode":
        run_decode(args)
    elif args.command == "resolve":
        run_resolve(args)
    elif args.command == "routes":
        run_routes(args)
