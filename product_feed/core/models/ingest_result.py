"""
IngestResult model summarising one batch of parsed lines (ephemeral).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .rejected_line import RejectedLine


class IngestResult(BaseModel):
    """
    Outcome of parsing one source.

    Attributes:
        source_name: Label of the source
        total_lines: Lines read from the source
        records: Records parsed successfully, in input order
        rejected: Lines skipped because they failed to parse
        duration_seconds: Wall-clock time spent on the batch
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source_name: str = ""
    total_lines: int = Field(0, ge=0)
    records: list[Any] = Field(default_factory=list)
    rejected: list[RejectedLine] = Field(default_factory=list)
    duration_seconds: float = Field(0.0, ge=0.0)

    @model_validator(mode="after")
    def check_counts_consistency(self):
        """Every line read is either a record or a rejected line."""
        if len(self.records) + len(self.rejected) != self.total_lines:
            raise ValueError(
                f"records ({len(self.records)}) + rejected ({len(self.rejected)}) "
                f"must equal total_lines ({self.total_lines})"
            )
        return self

    @property
    def parsed_count(self) -> int:
        return len(self.records)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)

    @property
    def passed(self) -> bool:
        return not self.rejected
