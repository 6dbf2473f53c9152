# cli.py
"""
Command-line entry point: score one or more URLs.

Run:
    urlrisk http://192.168.1.1/login
    python -m urlrisk --json https://example.com/
"""

import argparse
import json
import logging
import sys

from urlrisk import config
from urlrisk.app.scanner import feature_rows, scan_url
from urlrisk.url_parser import InvalidURL

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="urlrisk", description="Score URLs for phishing risk")
    parser.add_argument("urls", nargs="+", metavar="URL", help="URL(s) to score")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--features", action="store_true", help="Also print the feature table")
    return parser


def _print_text(result: dict, show_features: bool) -> None:
    print(result["url"])
    print(f"  {result['label']} ({result['score']}/100)")
    for line in result["signals"]:
        print(f"  - {line}")
    if show_features:
        for name, value in feature_rows(result["features"]):
            print(f"    {name:<16} {value}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.log_level())
    logger.debug("Scoring %d URL(s)", len(args.urls))

    results = []
    status = EXIT_OK
    for raw in args.urls:
        try:
            result = scan_url(raw)
        except InvalidURL as e:
            print(f"{raw}: {e}", file=sys.stderr)
            status = EXIT_INVALID
            continue
        if args.json:
            results.append(result)
        else:
            _print_text(result, args.features)

    if args.json:
        print(json.dumps(results, indent=2))
    return status


if __name__ == "__main__":
    sys.exit(main())
