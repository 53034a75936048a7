"""
Query one FRED endpoint and print the response as JSON.
Run: PYTHONPATH=. python scripts/fred_query.py series_tags JPNCPIALLMINMEI [--raw] [--param limit=5]
"""
import argparse
import logging
import sys
from pathlib import Path

# Project root
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

RAW_METHODS = {"series": "series_json", "series_observations": "series_observations_json"}


def parse_params(items: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {item!r}")
        out[key] = value
    return out


def coerce_arg(value: str) -> int | str:
    # ids for category/release/source are integers; everything else stays text
    return int(value) if value.isdigit() else value


def main(endpoint: str, args: list[str], params: dict[str, str], raw: bool) -> int:
    from fred_client.connectors.fred import FREDConnector
    from fred_client.core.errors import FredError

    method = RAW_METHODS.get(endpoint, endpoint) if raw else endpoint
    with FREDConnector() as fred:
        fn = getattr(fred, method, None)
        if fn is None or method.startswith("_") or method == "close":
            print(f"Unknown endpoint: {endpoint}", file=sys.stderr)
            return 2
        try:
            result = fn(*[coerce_arg(a) for a in args], **params)
        except FredError as e:
            print(f"{type(e).__name__}: {e}", file=sys.stderr)
            return 1
    if isinstance(result, str):
        print(result)
    else:
        print(result.model_dump_json(indent=2, by_alias=True))
    return 0


def cli() -> None:
    p = argparse.ArgumentParser(description="Query the FRED API")
    p.add_argument("endpoint", help="Connector method, e.g. series_tags, category_children")
    p.add_argument("args", nargs="*", help="Required arguments for the endpoint")
    p.add_argument("--param", action="append", default=[], help="Extra query parameter key=value")
    p.add_argument("--raw", action="store_true", help="Print the undecoded JSON (series, series_observations)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log requests")
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        params = parse_params(args.param)
    except argparse.ArgumentTypeError as e:
        p.error(str(e))
    sys.exit(main(args.endpoint, args.args, params, args.raw))


if __name__ == "__main__":
    cli()
