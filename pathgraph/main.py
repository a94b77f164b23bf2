"""Main CLI entry point for pathgraph.

Provides commands: demo, path
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from pathgraph.cli.demo import demo_command
from pathgraph.cli.path import path_command

logger = logging.getLogger("pathgraph.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Pathgraph - weighted graph shortest simple path tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    demo_parser = subparsers.add_parser(
        "demo",
        help="Build the sample graph and print neighbor and path queries",
    )
    demo_parser.add_argument(
        "--show-edges",
        action="store_true",
        help="Print the edge table before the queries",
    )

    path_parser = subparsers.add_parser(
        "path",
        help="Find the shortest simple path in a graph given as edge specs",
    )
    path_parser.add_argument("source", type=int, help="Source node id")
    path_parser.add_argument("target", type=int, help="Target node id")
    path_parser.add_argument(
        "-e",
        "--edge",
        dest="edges",
        action="append",
        default=[],
        metavar="U,V[,W]",
        help="Directed edge U->V with optional weight W (default 1.0); repeatable",
    )
    path_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional search configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )
    path_parser.add_argument(
        "--skip-blocked",
        action="store_true",
        help=(
            "Skip only the edge that leads back onto the current path instead "
            "of abandoning the whole node"
        ),
    )
    path_parser.add_argument(
        "--show-edges",
        action="store_true",
        help="Print the edge table before the result",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "demo":
        return demo_command(args)
    elif args.command == "path":
        return path_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
