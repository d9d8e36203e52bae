"""
Unit tests for pipeline configuration loading.
"""

import pytest
import yaml
from pydantic import ValidationError

from product_feed.core.config import PipelineConfig, PipelineConfigLoader
from product_feed.core.deserializers import ErrorPolicy


class TestPipelineConfig:
    """Tests for PipelineConfig"""

    def test_defaults(self):
        config = PipelineConfig()
        assert config.on_error == ErrorPolicy.SKIP
        assert config.encoding == "utf-8"
        assert config.log_level is None
        assert config.log_format is None
        assert config.metrics_enabled is True

    def test_error_policy_from_string(self):
        assert PipelineConfig(on_error="fail_fast").on_error == ErrorPolicy.FAIL_FAST

    def test_invalid_error_policy(self):
        with pytest.raises(ValidationError) as exc_info:
            PipelineConfig(on_error="retry")
        assert "on_error" in str(exc_info.value)

    def test_log_settings_unset_by_default(self):
        """Unset log settings leave the choice to LOG_LEVEL / LOG_FORMAT"""
        config = PipelineConfig(log_level=None, log_format=None)
        assert config.log_level is None
        assert config.log_format is None

    def test_log_level_normalized(self):
        assert PipelineConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            PipelineConfig(log_level="LOUD")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            PipelineConfig(log_format="xml")


class TestPipelineConfigLoader:
    """Tests for PipelineConfigLoader"""

    def test_load(self, tmp_path):
        path = tmp_path / "pipeline.yaml"
        path.write_text(
            "pipeline:\n"
            "  on_error: fail_fast\n"
            "  encoding: latin-1\n"
            "  log_format: text\n"
            "  metrics_enabled: false\n"
        )

        config = PipelineConfigLoader(path).load()

        assert config.on_error == ErrorPolicy.FAIL_FAST
        assert config.encoding == "latin-1"
        assert config.log_format == "text"
        assert config.metrics_enabled is False

    def test_empty_section_uses_defaults(self, tmp_path):
        path = tmp_path / "pipeline.yaml"
        path.write_text("pipeline:\n")

        assert PipelineConfigLoader(path).load() == PipelineConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PipelineConfigLoader(tmp_path / "missing.yaml")

    def test_missing_section(self, tmp_path):
        path = tmp_path / "pipeline.yaml"
        path.write_text("rules: {}\n")

        with pytest.raises(ValueError) as exc_info:
            PipelineConfigLoader(path).load()
        assert "pipeline" in str(exc_info.value)

    def test_section_must_be_mapping(self, tmp_path):
        path = tmp_path / "pipeline.yaml"
        path.write_text("pipeline:\n  - skip\n")

        with pytest.raises(ValueError):
            PipelineConfigLoader(path).load()

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "pipeline.yaml"
        path.write_text("pipeline: [unclosed\n")

        with pytest.raises(ValueError) as exc_info:
            PipelineConfigLoader(path).load()
        assert "Invalid YAML" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    @pytest.mark.parametrize("document", ["42\n", "- pipeline\n", "just text\n"])
    def test_non_mapping_document(self, tmp_path, document):
        path = tmp_path / "pipeline.yaml"
        path.write_text(document)

        with pytest.raises(ValueError) as exc_info:
            PipelineConfigLoader(path).load()
        assert "pipeline" in str(exc_info.value)
