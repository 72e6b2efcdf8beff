"""CLI entry point for Chunk Hunter."""

import argparse
import logging
import sys
from pathlib import Path

from chunkhunter.dictionary import load_dictionary
from chunkhunter.errors import HuntError
from chunkhunter.ingesters import get_ingester
from chunkhunter.pipeline import ChunkHunt, HuntConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def hunt(input_dir: str, chunks: str, output: str) -> None:
    """Scan every .txt document and write its reports.

    Args:
        input_dir: Folder (or .zip) holding the documents
        chunks: Path to the chunk dictionary
        output: Folder receiving the reports
    """
    config = HuntConfig(
        input_dir=Path(input_dir),
        chunks_file=Path(chunks),
        output_dir=Path(output),
    )
    chunk_hunt = ChunkHunt(config)

    try:
        chunk_hunt.prepare()
    except HuntError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Hunting {input_dir} -> {output}")

    file_count = 0
    failed = 0
    for outcome in chunk_hunt.run():
        file_count += 1
        stats = outcome.report.stats
        if not outcome.written:
            failed += 1
        logger.info(
            f"  {outcome.report.document.path}"
            f"  {len(outcome.report.records)} chunks, {stats.percentage_text}%"
        )

    logger.info(f"")
    logger.info(f"Checked {file_count} files, {failed} failed -> {config.output_dir}")


def info(input_dir: str, chunks: str) -> None:
    """Show information about a dictionary and input source.

    Args:
        input_dir: Folder (or .zip) holding the documents
        chunks: Path to the chunk dictionary
    """
    try:
        dictionary = load_dictionary(chunks)
    except HuntError as e:
        logger.error(str(e))
        sys.exit(1)

    word_counts = [chunk.word_count for chunk in dictionary]

    print(f"Dictionary: {dictionary.source}")
    print(f"  Chunks: {len(dictionary)}")
    if word_counts:
        print(f"  Words per chunk: {min(word_counts)}-{max(word_counts)}")
    print(f"")

    source = Path(input_dir)
    ingester = get_ingester(source)
    print(f"Input: {input_dir}")
    if ingester is None:
        print(f"  Not found")
        return

    try:
        documents = ingester.discover(source)
    except HuntError as e:
        print(f"  {e}")
        return

    print(f"  Type: {ingester.source_type}")
    print(f"  Text files: {len(documents)}")


def deck() -> None:
    """Launch the Flight Deck TUI for interactive hunts."""
    from chunkhunter.flight_deck import main as flight_deck_main

    flight_deck_main()


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input",
        default="input",
        help="Input folder or zip file path (default: input)",
    )
    parser.add_argument(
        "-c",
        "--chunks",
        default="chunks.txt",
        help="Chunk dictionary, one phrase per line (default: chunks.txt)",
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="chunkhunter",
        description="Chunk Hunter - scan text files for predefined chunks",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every matched chunk",
    )
    subparsers = parser.add_subparsers(dest="command")

    # hunt command
    hunt_parser = subparsers.add_parser(
        "hunt",
        help="Scan the input documents and write reports (default)",
    )
    _add_path_arguments(hunt_parser)
    hunt_parser.add_argument(
        "-o",
        "--output",
        default="output",
        help="Output folder for reports (default: output)",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show information about the dictionary and input",
    )
    _add_path_arguments(info_parser)

    # deck command
    subparsers.add_parser(
        "deck",
        help="Launch Flight Deck TUI for interactive hunts",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command is None:
        hunt("input", "chunks.txt", "output")
    elif args.command == "hunt":
        hunt(args.input, args.chunks, args.output)
    elif args.command == "info":
        info(args.input, args.chunks)
    elif args.command == "deck":
        deck()


if __name__ == "__main__":
    main()
