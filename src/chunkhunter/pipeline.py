"""The hunt pipeline: load, discover, match, write."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from chunkhunter.dictionary import load_dictionary
from chunkhunter.errors import InputError
from chunkhunter.ingesters import get_ingester
from chunkhunter.matchers import SubstringMatcher
from chunkhunter.models import ChunkDictionary, DocumentReport
from chunkhunter.protocols import Ingester, MatchingStrategy
from chunkhunter.reports import ReportWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HuntConfig:
    """Locations used by a hunt."""

    input_dir: Path = Path("input")
    chunks_file: Path = Path("chunks.txt")
    output_dir: Path = Path("output")


@dataclass(frozen=True)
class HuntOutcome:
    """Result of processing one document."""

    report: DocumentReport
    written: bool


class ChunkHunt:
    """A single pass over an input source.

    prepare() does all the startup work that may abort the run, so nothing is
    written before the dictionary and the document list are known to be good.
    """

    def __init__(
        self,
        config: HuntConfig,
        matcher: Optional[MatchingStrategy] = None,
        writer: Optional[ReportWriter] = None,
    ):
        self.config = config
        self.matcher = matcher or SubstringMatcher()
        self.writer = writer or ReportWriter(config.output_dir)
        self.dictionary: Optional[ChunkDictionary] = None
        self.ingester: Optional[Ingester] = None
        self.documents: list[str] = []

    def prepare(self) -> None:
        """Load the dictionary and discover documents.

        Raises:
            HuntError: If the dictionary or input source is unusable
        """
        self.dictionary = load_dictionary(self.config.chunks_file)

        source = Path(self.config.input_dir)
        ingester = get_ingester(source)
        if ingester is None:
            raise InputError(f"Unable to open the input folder: {source}")

        self.ingester = ingester
        self.documents = ingester.discover(source)
        logger.info(
            f"Found {len(self.documents)} files in {source},"
            f" checking against {len(self.dictionary)} chunks from {self.dictionary.source}"
        )

    def run(self) -> Iterator[HuntOutcome]:
        """Match and write each document in turn."""
        if self.dictionary is None or self.ingester is None:
            self.prepare()
        assert self.dictionary is not None and self.ingester is not None

        source = Path(self.config.input_dir)
        for path in self.documents:
            document = self.ingester.read(source, path)
            report = self.matcher.match(document, self.dictionary)
            written = self.writer.write(report)
            yield HuntOutcome(report=report, written=written)

    def execute(self) -> list[HuntOutcome]:
        """Run the whole hunt and collect outcomes."""
        return list(self.run())

