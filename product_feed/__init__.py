"""
product_feed - fixed-width retail product feed ingestion.
"""

__version__ = "0.1.0"
