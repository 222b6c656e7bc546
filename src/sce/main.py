"""
Command line wrapper over the extraction entry points.

Usage:
    python -m src.sce.main parse page.html
    cat page.html | python -m src.sce.main parse
    python -m src.sce.main fetch 440 570
"""
import argparse
import asyncio
import logging
import sys

from src.sce.fetch import fetch_and_parse
from src.sce.parse import parse_sce_html

logging.basicConfig(level=logging.INFO)


def _read_markup(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


async def _fetch_all(appids: list[str]) -> list[str]:
    results: list[str] = []
    for appid in appids:
        results.append(await fetch_and_parse(appid))
    return results


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for parsing saved pages or fetching live ones."""
    parser = argparse.ArgumentParser(
        description="Extract game and card data from Steam Card Exchange inventory pages",
        epilog="Examples:\n"
               "  %(prog)s parse page.html\n"
               "  %(prog)s fetch 440 570",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Extract a saved inventory page")
    parse_parser.add_argument("path", nargs="?", default=None, help="HTML file (default: stdin)")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch and extract inventory pages by app id")
    fetch_parser.add_argument("appids", nargs="+", help="Steam app ids, fetched one after another")

    args = parser.parse_args(argv)

    if args.command == "parse":
        print(parse_sce_html(_read_markup(args.path)))
        return 0

    for line in asyncio.run(_fetch_all(args.appids)):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
