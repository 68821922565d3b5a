#!/usr/bin/env python
"""
Offline smoke check: run the demo catalog through planning, assembly and
YAML dumping, and print the result. No token or network needed.

Run:
    python dev/smoke_check.py [--random N] [--assets BTCUSD,ETHUSD] [--seed N]
"""
import argparse
import random
import sys
from pathlib import Path

# Ensure repo root on sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))

from asset_conf.assembler import assemble_config
from asset_conf.config_writer import dump_config
from asset_conf.data_sources import DemoCatalogProvider
from asset_conf.encoding import encode_asset_id
from asset_conf.selection import parse_asset_list, plan_selection
from asset_conf.similarity import suggest_assets


def main():
    parser = argparse.ArgumentParser(description="Offline smoke check for asset-conf")
    parser.add_argument("--assets", type=str, default="BTCUSD,ETHUSD", help="Comma-separated explicit assets")
    parser.add_argument("--random", type=int, default=2, help="Random fill count (default: 2)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    catalog = DemoCatalogProvider().fetch()
    print(f"Catalog: {len(catalog)} assets")

    assert encode_asset_id("BTCUSD") == "0x7404e3d104ea7841c3d9e6fd20adfe99b4ad586bc08d8f3bd3afef894cf184de"

    selected = plan_selection(catalog, parse_asset_list(args.assets), args.random, rng=random.Random(args.seed))
    print(f"Selected: {selected}")

    artifact = assemble_config(selected)
    assert list(artifact) == sorted(selected), "Artifact keys not sorted"
    print(dump_config(artifact))

    print("Suggestions for 'BTCUSX':", suggest_assets("BTCUSX", catalog, 3))
    return 0


if __name__ == "__main__":
    code = main()
    print("\nAll checks passed!")
    raise SystemExit(code)
