"""Subcommand implementations for the ``opaque`` CLI."""

import argparse
import dataclasses
import logging
import sys

from opaque.codec import decode, encode_link
from opaque.config import RoutingConfig
from opaque.errors import ConfigurationError
from opaque.pages import default_dispatcher


def _config(args: argparse.Namespace, **overrides: object) -> RoutingConfig:
    """Environment config with command-line overrides applied."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        config = RoutingConfig.from_env()
        if args.root is not None:
            overrides["opaque_root"] = args.root
        return dataclasses.replace(config, **overrides)  # type: ignore[arg-type]
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_encode(args: argparse.Namespace) -> None:
    overrides: dict[str, object] = {}
    if args.decoy:
        overrides["decoy_params"] = True
    print(encode_link(args.path, _config(args, **overrides)))


def run_decode(args: argparse.Namespace) -> None:
    print(decode(args.url, _config(args)))


def run_resolve(args: argparse.Namespace) -> None:
    """Print the page a URL lands on, then one ``name=value`` per parameter."""
    path = decode(args.url, _config(args))
    match = default_dispatcher().dispatch(path)
    print(match.page)
    for name, value in match.params.items():
        print(f"{name}={value}")


def run_routes(args: argparse.Namespace) -> None:
    """Print the page table as ORDER, KIND, PATTERN, PAGE columns."""
    _config(args)
    dispatcher = default_dispatcher()
    rows = [
        (str(i), route.kind, str(route), route.page)
        for i, route in enumerate(dispatcher.routes, start=1)
    ]
    rows.append(("-", dispatcher.fallback.kind, "*", dispatcher.fallback.page))

    widths = [max(len(r[col]) for r in rows) for col in range(3)]
    widths = [max(w, len(h)) for w, h in zip(widths, ("ORDER", "KIND", "PATTERN"), strict=True)]
    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format("ORDER", "KIND", "PATTERN", "PAGE"))
    print("-" * min(sum(widths) + 6 + max(len(r[3]) for r in rows), 80))
    for row in rows:
        print(fmt.format(*row))
