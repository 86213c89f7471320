"""Command-line search against torrentapi.org."""

import argparse
import sys
from pathlib import Path

from .client import TorrentAPI
from .config import ConfigManager
from .errors import TorrentAPIError
from .log import LEVELS, init_logger
from .output import print_results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torrentapi-search",
        description="Search torrentapi.org and print results as a table",
    )
    parser.add_argument(
        "--ranked",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Should results be ranked (default: yes)",
    )
    parser.add_argument("--tvdb", default="", help="TheTVDB ID to search")
    parser.add_argument("--imdb", default="", help="The IMDB ID to search")
    parser.add_argument("--search", default="", help="Search string")
    parser.add_argument(
        "--sort",
        default="seeders",
        help="Sort order (seeders, leechers, last)",
    )
    parser.add_argument(
        "--limit", type=int, default=25, help="Limit of results (25, 50, 100)"
    )
    parser.add_argument(
        "--category",
        type=int,
        action="append",
        default=[],
        help="Category ID, may be repeated",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the newest torrents instead of searching",
    )
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument(
        "--log-level", choices=sorted(LEVELS), help="Write a log file"
    )
    return parser


def apply_args(api: TorrentAPI, args: argparse.Namespace) -> TorrentAPI:
    """Copy search criteria from parsed arguments onto the client."""
    if args.tvdb:
        api.search_tvdb(args.tvdb)
    if args.imdb:
        api.search_imdb(args.imdb)
    if args.search:
        api.search_string(args.search)
    for category in args.category:
        api.category(category)
    return api.ranked(args.ranked).sort(args.sort).format("json_extended").limit(
        args.limit
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not (args.tvdb or args.imdb or args.search or args.list):
        parser.print_help()
        return 0

    if args.log_level:
        init_logger(args.log_level)

    try:
        config = ConfigManager(args.config).load()
    except (OSError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    with TorrentAPI(config=config) as api:
        apply_args(api, args)
        try:
            results = api.list() if args.list else api.search()
        except TorrentAPIError as e:
            print(f"Error while querying torrentapi: {e}", file=sys.stderr)
            return 1

    print_results(results, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
