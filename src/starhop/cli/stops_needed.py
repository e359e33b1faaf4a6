#!/usr/bin/env python3
# src/starhop/cli/stops_needed.py
"""
Example:
  export PYTHONPATH="$PWD/src:$PYTHONPATH"
  export SWAPI_BASE_URL="https://swapi.dev/api/starships/"   # optional

  python -m starhop.cli.stops_needed --distance 1000000
  python -m starhop.cli.stops_needed --distance 1000000 --json
"""
from __future__ import annotations
import sys
import json
import argparse
import logging
from typing import Any, List, Optional, Sequence

import pandas as pd

from starhop.config.settings import settings
from starhop.providers.base import Starship
from starhop.providers.swapi import CatalogFetchError, SwapiProvider


def log(msg: str):
    print(msg, file=sys.stderr, flush=True)


def show_progress(url: str, starships: Sequence[Starship], total: int):
    loaded = len(starships)
    pct = (loaded / total * 100) if total else 100.0
    log(f"{loaded} of {total} starships loaded ({pct:.0f}%).")


def stops_table(starships: Sequence[Starship], distance: Any) -> pd.DataFrame:
    """One row per ship: name, stops (int, or the StopsError message explaining why not)."""
    rows = [{"name": s.name, "stops": s.stops_needed(distance)} for s in starships]
    return pd.DataFrame(rows, columns=["name", "stops"])


def _fmt(v: Any) -> str:
    # error cells may come back from pandas as plain str
    if isinstance(v, str):
        return str(v)
    return f"{v:,}"


def _to_records(df: pd.DataFrame) -> List[dict]:
    out = []
    for r in df.itertuples(index=False):
        if isinstance(r.stops, str):
            out.append({"name": r.name, "stops": None, "error": str(r.stops)})
        else:
            out.append({"name": r.name, "stops": int(r.stops), "error": None})
    return out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Resupply stops each SWAPI starship needs to cover a distance.")
    ap.add_argument("--distance", required=True, help="Distance in megalights (MGLT).")
    ap.add_argument("--base-url", default=settings.SWAPI_BASE_URL, help="Starships endpoint (first page).")
    ap.add_argument("--timeout", type=float, default=settings.REQUEST_TIMEOUT_SEC, help="Per-request timeout, seconds.")
    ap.add_argument("--json", action="store_true", help="Print JSON records instead of a table.")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.getLogger("starhop.providers.swapi").setLevel(logging.DEBUG)

    prov = SwapiProvider(base_url=args.base_url, timeout=args.timeout, user_agent=settings.USER_AGENT)
    try:
        starships = prov.get_all(show_progress)
    except CatalogFetchError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    df = stops_table(starships, args.distance)
    if args.json:
        print(json.dumps(_to_records(df), indent=2))
    elif df.empty:
        print("No starships returned.")
    else:
        shown = df.assign(stops=df["stops"].map(_fmt))
        print(shown.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
