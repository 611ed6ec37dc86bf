"""CLI entry point for the profile search engine."""

import argparse
import logging
import sys

from cardsearch.core.config import EngineSettings
from cardsearch.core.snapshot import load_snapshot
from cardsearch.search.engine import SearchEngine
from cardsearch.search.export import export_results_json


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data",
        required=True,
        help="Path to a JSON export of accounts or cards",
    )
    parser.add_argument(
        "--config",
        help="Path to engine settings YAML (default: built-in settings)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Profile search engine - rank business cards against free-text queries",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- search subcommand ---
    search_parser = subparsers.add_parser("search", help="Run one or more queries")
    _add_common_args(search_parser)
    search_parser.add_argument(
        "--export",
        choices=["json"],
        help="Export results to format (json)",
    )
    search_parser.add_argument(
        "queries",
        nargs="*",
        default=[""],
        help="Queries to run in order (default: a single empty query)",
    )

    # --- suggest subcommand ---
    suggest_parser = subparsers.add_parser("suggest", help="Suggest completions for a prefix")
    _add_common_args(suggest_parser)
    suggest_parser.add_argument("partial", help="Partial text typed by the user")

    # --- trending subcommand ---
    trending_parser = subparsers.add_parser(
        "trending",
        help="Run queries silently and print the trending list",
    )
    _add_common_args(trending_parser)
    trending_parser.add_argument("queries", nargs="+", help="Queries to replay")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_engine(args: argparse.Namespace) -> SearchEngine:
    """Load settings and snapshot, then construct the engine."""
    settings = EngineSettings.from_yaml(args.config) if args.config else EngineSettings()
    return SearchEngine(load_snapshot(args.data), settings)


def cmd_search(engine: SearchEngine, args: argparse.Namespace) -> None:
    """Handle search subcommand."""
    for query in args.queries:
        results = engine.search(query)
        if args.export == "json":
            print(export_results_json(query, results, engine.settings.profile_base_url))
            continue

        label = f"Results for '{query}'" if query else "Top ranked"
        print(f"\n{label}: {len(results)} cards found")
        for i, profile in enumerate(results, start=1):
            title = profile.title or "Professional"
            print(f"  {i}. {profile.display_name} (@{profile.username}) - {title}")

    trending = engine.get_trending()
    if trending and args.export != "json":
        print(f"\nTrending: {', '.join(trending)}")


def cmd_suggest(engine: SearchEngine, args: argparse.Namespace) -> None:
    """Handle suggest subcommand."""
    for suggestion in engine.get_suggestions(args.partial):
        print(suggestion)


def cmd_trending(engine: SearchEngine, args: argparse.Namespace) -> None:
    """Handle trending subcommand."""
    for query in args.queries:
        engine.search(query)
    for i, query in enumerate(engine.get_trending(), start=1):
        print(f"{i}. {query}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        engine = build_engine(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "suggest":
        cmd_suggest(engine, args)
    elif args.command == "trending":
        cmd_trending(engine, args)
    else:
        cmd_search(engine, args)


if __name__ == "__main__":
    main()
