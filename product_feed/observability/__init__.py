"""
Logging and metrics for the product feed.
"""
