"""
Pipeline configuration management.

Loads ingestion settings from YAML files into a validated PipelineConfig.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from product_feed.core.deserializers.base_deserializer import ErrorPolicy


class PipelineConfig(BaseModel):
    """
    Settings for one ingestion run.

    Attributes:
        on_error: "skip" logs bad lines and continues, "fail_fast" stops at the first one
        encoding: Text encoding of input files
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL; None defers to
            the LOG_LEVEL env var, then INFO
        log_format: "json" or "text"; None defers to LOG_FORMAT, then json
        metrics_enabled: Whether to record Prometheus metrics
    """

    on_error: ErrorPolicy = ErrorPolicy.SKIP
    encoding: str = Field("utf-8", min_length=1)
    log_level: str | None = None
    log_format: Literal["json", "text"] | None = None
    metrics_enabled: bool = True

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str | None) -> str | None:
        """Normalize and validate the log level name."""
        if v is None:
            return None
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    class Config:
        json_schema_extra = {
            "example": {
                "on_error": "skip",
                "encoding": "utf-8",
                "log_level": "INFO",
                "log_format": "json",
                "metrics_enabled": True,
            }
        }


class PipelineConfigLoader:
    """
    Loads pipeline settings from YAML configuration files.

    Expected YAML format:
    ```yaml
    pipeline:
      on_error: skip
      encoding: utf-8
      log_level: INFO
      log_format: json
      metrics_enabled: true
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Pipeline configuration file not found: {config_path}")

    def load(self) -> PipelineConfig:
        """
        Load and validate the pipeline section.

        Returns:
            PipelineConfig

        Raises:
            ValueError: If the file is not valid YAML, or the 'pipeline' section
                is missing or not a mapping
            pydantic.ValidationError: If a setting has an invalid value
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "pipeline" not in config:
            raise ValueError("Configuration file must contain 'pipeline' section")

        section: Any = config["pipeline"] or {}
        if not isinstance(section, dict):
            raise ValueError("'pipeline' section must be a mapping")

        return PipelineConfig(**section)
