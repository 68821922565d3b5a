#!/usr/bin/env python3
"""
asset-conf: manage the Stork auth token, browse the asset catalog and
generate per-asset YAML configuration files.

Examples:
    asset-conf set-token <token>
    asset-conf get-assets --format csv
    asset-conf encode BTCUSD ETHUSD
    asset-conf search BTCUSX
    asset-conf generate-config -o assets.yaml -a BTCUSD,ETHUSD -r 3 -f 60 -p 0.5
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from asset_conf import __version__
from asset_conf.assembler import assemble_config
from asset_conf.config_writer import validate_output_path, write_config
from asset_conf.data_sources import get_catalog_provider
from asset_conf.encoding import encode_many
from asset_conf.errors import AssetConfError, UnknownAssetError
from asset_conf.formatters import (
    OUTPUT_FORMATS,
    render_assets,
    render_encoded,
    render_suggestions,
)
from asset_conf.selection import parse_asset_list, plan_selection
from asset_conf.similarity import suggest_assets
from asset_conf.utils import get_logger, load_settings
from asset_conf.utils.token_store import get_token, set_token

_log = logging.getLogger(__name__)

NO_TOKEN_HINT = "No authentication token set"


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {n}")
    return n


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {n}")
    return n


def _positive_float(value: str) -> float:
    try:
        x = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not x > 0 or x == float("inf"):
        raise argparse.ArgumentTypeError(f"must be a finite number greater than 0, got {value}")
    return x


def _add_format(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="plain",
        help="Output format (default: plain)",
    )


def _add_catalog_file(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--catalog-file",
        default=None,
        help="Read the asset catalog from a local JSON/text file instead of the API",
    )


def build_parser(settings: dict) -> argparse.ArgumentParser:
    """Build the argparse tree; defaults for -f/-p/--limit come from settings."""
    gen = settings["generate"]
    parser = argparse.ArgumentParser(
        prog="asset-conf",
        description="A CLI tool for asset configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"asset-conf {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging to stderr")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("set-token", help="Set the authentication token")
    p.add_argument("token", help="The authentication token to store")

    sub.add_parser("get-token", help="Get the current authentication token")

    p = sub.add_parser("get-assets", help="Get available assets")
    _add_format(p)
    _add_catalog_file(p)

    p = sub.add_parser("encode", help="Print the encoded asset id of one or more symbols")
    p.add_argument("symbols", nargs="+", help="Asset symbols, hashed exactly as typed")
    _add_format(p)

    p = sub.add_parser("list-encoded", help="List available assets with their encoded ids")
    _add_format(p)
    _add_catalog_file(p)

    p = sub.add_parser("search", aliases=["suggest"], help="Find assets similar to a symbol")
    p.add_argument("query", help="Symbol or fragment to look for")
    p.add_argument(
        "-l", "--limit",
        type=_positive_int,
        default=settings["search"]["limit"],
        help="Maximum number of suggestions (default: %(default)s, at most 10)",
    )
    _add_format(p)
    _add_catalog_file(p)

    p = sub.add_parser(
        "generate-config",
        aliases=["gen", "generate", "gen-config", "gen-conf"],
        help="Generate an asset configuration file",
    )
    p.add_argument("-o", "--output", required=True, help="Output file path (must end in .yaml or .yml)")
    p.add_argument("-a", "--assets", default=None, help="Comma-separated list of assets to include")
    p.add_argument(
        "-r", "--random",
        type=_non_negative_int,
        default=None,
        help="Number of random assets to add after the explicit ones",
    )
    p.add_argument(
        "-f", "--fallback",
        dest="fallback_period",
        type=_positive_int,
        default=int(gen["fallback_period_sec"]),
        help="Fallback period in seconds (default: %(default)s)",
    )
    p.add_argument(
        "-p", "--percent",
        dest="percent_change",
        type=_positive_float,
        default=float(gen["percent_change_threshold"]),
        help="Percent change threshold (default: %(default)s)",
    )
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducible random picks")
    _add_catalog_file(p)

    return parser


# --- command handlers --------------------------------------------------------

def cmd_set_token(args, settings) -> int:
    path = set_token(args.token)
    _log.debug(f"Token stored in {path}")
    print("Authentication token updated successfully")
    return 0


def cmd_get_token(args, settings) -> int:
    token = get_token()
    print(token if token else NO_TOKEN_HINT)
    return 0


def _fetch_catalog(args, settings) -> List[str]:
    provider = get_catalog_provider(args.catalog_file, settings)
    return provider.fetch()


def cmd_get_assets(args, settings) -> int:
    print(render_assets(_fetch_catalog(args, settings), args.format))
    return 0


def cmd_encode(args, settings) -> int:
    print(render_encoded(encode_many(args.symbols), args.format))
    return 0


def cmd_list_encoded(args, settings) -> int:
    print(render_encoded(encode_many(_fetch_catalog(args, settings)), args.format))
    return 0


def cmd_search(args, settings) -> int:
    catalog = _fetch_catalog(args, settings)
    print(render_suggestions(args.query, suggest_assets(args.query, catalog, args.limit), args.format))
    return 0


def cmd_generate_config(args, settings) -> int:
    # fail on a bad path before touching the network
    validate_output_path(args.output)
    explicit = parse_asset_list(args.assets)
    if not explicit and args.random is None:
        print("Error: Either -r or -a must be provided", file=sys.stderr)
        return 1

    catalog = _fetch_catalog(args, settings)
    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        selected = plan_selection(catalog, explicit, args.random, rng=rng)
    except UnknownAssetError as e:
        hints = suggest_assets(e.symbol, catalog, settings["search"]["limit"])
        print(f"Error: {e}", file=sys.stderr)
        if hints:
            print(f"Did you mean: {', '.join(hints)}?", file=sys.stderr)
        return 1

    artifact = assemble_config(selected, args.fallback_period, args.percent_change)
    path = write_config(artifact, args.output)
    print(f"Successfully generated config with {len(artifact)} assets")
    _log.info(f"Config written to {path}")
    return 0


COMMANDS = {
    "set-token": cmd_set_token,
    "get-token": cmd_get_token,
    "get-assets": cmd_get_assets,
    "encode": cmd_encode,
    "list-encoded": cmd_list_encoded,
    "search": cmd_search,
    "suggest": cmd_search,
    "generate-config": cmd_generate_config,
    "gen": cmd_generate_config,
    "generate": cmd_generate_config,
    "gen-config": cmd_generate_config,
    "gen-conf": cmd_generate_config,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    get_logger("asset_conf", level="DEBUG" if args.verbose else None)

    if not args.command:
        print("No command provided. Use --help to see available commands.")
        return 0

    try:
        return COMMANDS[args.command](args, settings)
    except AssetConfError as e:
        _log.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
