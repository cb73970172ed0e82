"""Command-line entry point.

Usage:
    topic-index <topic_word> [file]

    # Read from stdin
    pdftotext paper.pdf - | topic-index neuron

    # Merge extra stop words and report six other words
    topic-index --stop-words extra.txt --others 6 neuron paper.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import ValidationError

from . import __version__, load
from ._errors import TopicIndexError, TopicIndexUsageError
from ._log import setup_logging
from ._report import render_report
from ._settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="topic-index",
        description=(
            "Report how often a topic word is used in a text, together with "
            "the most frequent other words."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("topic_word", help="Word whose usage is reported")
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Plain text file to analyze (default: read stdin)",
    )
    parser.add_argument(
        "--stop-words",
        "-s",
        dest="stop_words_file",
        default=None,
        help="Extra stop words (.json, .msgpack or one word per line)",
    )
    parser.add_argument(
        "--replace-stop-words",
        action="store_true",
        default=None,
        help="Use only the words from --stop-words, not the built-in list",
    )
    parser.add_argument(
        "--others",
        "-n",
        dest="others_limit",
        type=int,
        default=None,
        help="Number of other words to report (default: 4)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        help="Bytes read from the input at a time",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Log pipeline details to stderr",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _settings_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Command-line values that were given explicitly; env fills the rest."""
    names = (
        "stop_words_file", "replace_stop_words", "others_limit",
        "chunk_size", "debug",
    )
    return {
        name: getattr(args, name)
        for name in names
        if getattr(args, name) is not None
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(debug=bool(args.debug))

    try:
        settings = Settings(**_settings_overrides(args))
    except ValidationError as e:
        logger.error("Invalid configuration: {}", e)
        return 1
    if settings.debug and not args.debug:
        setup_logging(debug=True)

    try:
        indexer = load(settings)
        if args.file is None:
            result = indexer.analyze(sys.stdin.buffer, args.topic_word)
        else:
            result = indexer.analyze_file(args.file, args.topic_word)
    except TopicIndexUsageError as e:
        parser.error(str(e))
    except TopicIndexError as e:
        logger.error("{}", e)
        return 1
    except MemoryError:
        logger.critical("topic-index: out of memory")
        return 1

    print(render_report(result))  # noqa: T201
    return 0
