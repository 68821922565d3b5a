"""Render asset listings for the terminal or for other tools."""
from __future__ import annotations

import json
from typing import List, Sequence, Tuple

import pandas as pd

OUTPUT_FORMATS = ("plain", "json", "csv", "markdown")

ENCODED_COLUMNS = ["Asset ID", "Encoded Asset ID"]


def _check_format(fmt: str) -> str:
    fmt = (fmt or "plain").lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'. Choose from: {', '.join(OUTPUT_FORMATS)}")
    return fmt


def _md_cell(value) -> str:
    return str(value).replace("|", "\\|")


def _markdown_table(df: pd.DataFrame) -> str:
    header = "| " + " | ".join(df.columns) + " |"
    sep = "|" + "|".join("---" for _ in df.columns) + "|"
    rows = ["| " + " | ".join(_md_cell(v) for v in row) + " |" for row in df.itertuples(index=False)]
    return "\n".join([header, sep, *rows])


def _csv(df: pd.DataFrame) -> str:
    return df.to_csv(index=False, lineterminator="\n").rstrip("\n")


def render_encoded(pairs: Sequence[Tuple[str, str]], fmt: str = "plain") -> str:
    """Render (asset_id, encoded_id) pairs.

    plain:    ``BTCUSD: 0x...`` per line
    csv:      header ``Asset ID,Encoded Asset ID``
    markdown: two-column table
    json:     array of ``{"asset_id": ..., "encoded_id": ...}``
    """
    fmt = _check_format(fmt)
    if fmt == "plain":
        return "\n".join(f"{asset}: {encoded}" for asset, encoded in pairs)
    if fmt == "json":
        return json.dumps([{"asset_id": a, "encoded_id": e} for a, e in pairs], indent=2)
    df = pd.DataFrame(list(pairs), columns=ENCODED_COLUMNS)
    if fmt == "csv":
        return _csv(df)
    return _markdown_table(df)


def render_assets(symbols: Sequence[str], fmt: str = "plain") -> str:
    fmt = _check_format(fmt)
    if fmt == "plain":
        lines = [f"Total Assets: {len(symbols)}", "Assets:"]
        lines += [f"  {s}" for s in symbols]
        return "\n".join(lines)
    if fmt == "json":
        return json.dumps(list(symbols), indent=2)
    df = pd.DataFrame({"Asset ID": list(symbols)})
    if fmt == "csv":
        return _csv(df)
    return _markdown_table(df)


def render_suggestions(query: str, suggestions: List[str], fmt: str = "plain") -> str:
    fmt = _check_format(fmt)
    if fmt == "json":
        return json.dumps({"query": query, "suggestions": list(suggestions)}, indent=2)
    if fmt == "plain":
        if not suggestions:
            return f"No assets similar to '{query}'"
        return "\n".join([f"Assets similar to '{query}':"] + [f"  {s}" for s in suggestions])
    df = pd.DataFrame({"Rank": range(1, len(suggestions) + 1), "Asset ID": list(suggestions)})
    if fmt == "csv":
        return _csv(df)
    return _markdown_table(df)


__all__ = ["OUTPUT_FORMATS", "render_encoded", "render_assets", "render_suggestions"]
