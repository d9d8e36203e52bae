"""
RejectedLine model representing an input line that failed to parse.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class RejectedLine(BaseModel):
    """
    A line skipped by the deserializer, with enough context to find it again.

    Attributes:
        line_number: 1-based line number within the source
        source_name: Label of the source (usually the file path), may be empty
        raw_line: The line as read, without its line terminator
        error_type: Name of the ParseError subclass raised
        error_message: The error's message
        field_name: Field the error is scoped to, if any
        rejected_at: When the line was rejected
    """

    line_number: int = Field(..., ge=1)
    source_name: str = ""
    raw_line: str
    error_type: str
    error_message: str
    field_name: str | None = None
    rejected_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def location(self) -> str:
        """``<source>:<line>`` label used in log messages."""
        return f"{self.source_name}:{self.line_number}" if self.source_name else str(self.line_number)

    class Config:
        json_schema_extra = {
            "example": {
                "line_number": 3,
                "source_name": "data/products.txt",
                "raw_line": "1x2d34cc Generic Soda 12-pack ...",
                "error_type": "NumberFormatError",
                "error_message": "Couldn't parse number for Product Id from '1x2d34cc'",
                "field_name": "Product Id",
            }
        }
