"""
Configuration for ingestion runs.
"""

from .pipeline_config import PipelineConfig, PipelineConfigLoader

__all__ = ["PipelineConfig", "PipelineConfigLoader"]
