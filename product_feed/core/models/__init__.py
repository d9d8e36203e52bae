"""
Domain models for the product feed.

Value and result models use Pydantic for runtime validation.
"""

from .ingest_result import IngestResult
from .price import Price, format_cents, round_half_down
from .product import PRODUCT_MODULE, ProductModule
from .rejected_line import RejectedLine

__all__ = [
    "Price",
    "format_cents",
    "round_half_down",
    "ProductModule",
    "PRODUCT_MODULE",
    "RejectedLine",
    "IngestResult",
]
