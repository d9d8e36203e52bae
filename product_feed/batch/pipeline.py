"""
Batch processing pipeline orchestration.

Coordinates the flow: read lines -> deserialize -> collect records and
rejected lines -> record metrics.
"""

import time
from pathlib import Path
from typing import Iterable, Iterator, Optional

from product_feed.core.config import PipelineConfig
from product_feed.core.deserializers import LineBasedDeserializer, ProductRecordDeserializer
from product_feed.core.models import IngestResult, RejectedLine
from product_feed.observability.logger import get_logger, log_operation
from product_feed.observability.metrics import record_batch_processing


logger = get_logger(__name__)


class LineCounter:
    """Iterable wrapper that counts the lines handed out."""

    def __init__(self, lines: Iterable[str]):
        self.lines = lines
        self.count = 0

    def __iter__(self) -> Iterator[str]:
        for line in self.lines:
            self.count += 1
            yield line


class BatchPipeline:
    """
    Orchestrates parsing of whole sources.

    Flow:
    1. Read lines from a file or any iterable of lines
    2. Deserialize each line, applying the configured error policy
    3. Collect records and rejected lines into an IngestResult
    4. Record metrics for the batch
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        deserializer: Optional[LineBasedDeserializer] = None,
    ):
        """
        Initialize batch pipeline.

        Args:
            config: Pipeline settings (defaults when omitted)
            deserializer: Line deserializer (product lines when omitted)
        """
        self.config = config or PipelineConfig()
        self.deserializer = deserializer or ProductRecordDeserializer()

    def process_file(self, file_path: str | Path) -> IngestResult:
        """
        Parse a file through the pipeline.

        Args:
            file_path: Path to input file

        Returns:
            IngestResult with records, rejected lines and counts

        Raises:
            FileNotFoundError: If the file does not exist
            LineRejectedError: Under the fail_fast policy, for the first bad line
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        with open(path, encoding=self.config.encoding, newline="") as f:
            return self.process_lines(f, source_name=str(path))

    def process_lines(self, lines: Iterable[str], source_name: str = "") -> IngestResult:
        """
        Parse an iterable of lines through the pipeline.

        Args:
            lines: Input lines
            source_name: Label used for reporting and metrics

        Returns:
            IngestResult with records, rejected lines and counts

        Raises:
            LineRejectedError: Under the fail_fast policy, for the first bad line
            pydantic.ValidationError: If the deserializer drops a line it read
                without yielding or rejecting it
        """
        rejected: list[RejectedLine] = []
        counter = LineCounter(lines)
        start = time.time()

        with log_operation("Parsing source", logger=logger, source_name=source_name):
            records = list(
                self.deserializer.parse_lines(
                    counter,
                    source_name=source_name,
                    on_error=self.config.on_error,
                    rejected=rejected.append,
                )
            )

        duration = time.time() - start
        result = IngestResult(
            source_name=source_name,
            total_lines=counter.count,
            records=records,
            rejected=rejected,
            duration_seconds=duration,
        )

        logger.info(
            f"Parsed {result.parsed_count} records, rejected {result.rejected_count} lines",
            extra={
                "source_name": source_name,
                "parsed_count": result.parsed_count,
                "rejected_count": result.rejected_count,
            },
        )

        if self.config.metrics_enabled:
            record_batch_processing(
                source_name=source_name,
                parsed_lines=result.parsed_count,
                rejected_error_types=[r.error_type for r in rejected],
                duration_seconds=duration,
            )

        return result
