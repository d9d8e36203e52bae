"""
Batch ingestion of product feed files.
"""

from .pipeline import BatchPipeline

__all__ = ["BatchPipeline"]
