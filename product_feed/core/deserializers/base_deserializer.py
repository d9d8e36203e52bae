"""
Base class for line-based deserializers.

A deserializer turns one line into one record; this base class supplies the
iteration over many lines, the per-line error policy and file handling.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from product_feed.core.models.rejected_line import RejectedLine
from product_feed.observability.logger import get_logger

from .errors import LineRejectedError, ParseError

T = TypeVar("T")

logger = get_logger(__name__)


class ErrorPolicy(str, Enum):
    """What to do with a line that fails to parse."""

    SKIP = "skip"
    FAIL_FAST = "fail_fast"


class LineBasedDeserializer(ABC, Generic[T]):
    """
    Deserialize line-oriented input into records.

    Subclasses implement parse_record() for a single line.
    """

    @abstractmethod
    def parse_record(self, data: str) -> T:
        """
        Parse one line.

        Args:
            data: The line, without its line terminator

        Returns:
            The parsed record

        Raises:
            ParseError: If the line is malformed
        """
        pass

    def parse_lines(
        self,
        lines: Iterable[str],
        source_name: str = "",
        on_error: ErrorPolicy = ErrorPolicy.SKIP,
        rejected: Optional[Callable[[RejectedLine], None]] = None,
    ) -> Iterator[T]:
        """
        Parse a sequence of lines lazily.

        Lines are numbered from 1. Only ParseError is handled here; errors
        from the field model propagate unchanged.

        Args:
            lines: Lines to parse; trailing line terminators are stripped
            source_name: Label used when reporting bad lines (e.g., a file path)
            on_error: SKIP logs the bad line and continues, FAIL_FAST raises
            rejected: Called with a RejectedLine for every skipped line

        Yields:
            Parsed records in input order

        Raises:
            LineRejectedError: Under FAIL_FAST, for the first bad line
        """
        for line_number, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            try:
                record = self.parse_record(line)
            except ParseError as e:
                if on_error == ErrorPolicy.FAIL_FAST:
                    raise LineRejectedError(line_number, source_name, e) from e

                rejected_line = RejectedLine(
                    line_number=line_number,
                    source_name=source_name,
                    raw_line=line,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    field_name=e.field_name,
                )
                logger.warning(
                    f"{rejected_line.location}: {e}",
                    extra={
                        "source_name": source_name,
                        "line_number": line_number,
                        "error_type": rejected_line.error_type,
                    },
                )
                if rejected is not None:
                    rejected(rejected_line)
                continue
            yield record

    def parse_file(self, file_path: str | Path, encoding: str = "utf-8", **kwargs) -> Iterator[T]:
        """
        Parse every line of a text file, using its path as the source label.

        The file stays open until the returned iterator is exhausted or closed.
        """
        with open(file_path, encoding=encoding, newline="") as f:
            yield from self.parse_lines(f, source_name=str(file_path), **kwargs)
