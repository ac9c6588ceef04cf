"""Tests for config validation."""

import pytest

from resume_builder.config import GeminiConfig, load_config


class TestConfigValidation:
    def test_valid_defaults(self, tmp_path):
        """Default config passes validation without raising."""
        config = load_config(tmp_path / "missing.yaml")
        assert config.gemini.timeout == 60
        assert config.gemini.max_attempts == 1

    def test_invalid_timeout(self, tmp_path):
        """timeout of 0 (below minimum of 1) raises ValueError."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("gemini:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)

    def test_invalid_max_attempts_high(self, tmp_path):
        """max_attempts above 10 raises ValueError."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("gemini:\n  max_attempts: 99\n")
        with pytest.raises(ValueError, match="max_attempts"):
            load_config(yaml)

    def test_invalid_max_attempts_zero(self):
        with pytest.raises(ValueError, match="max_attempts"):
            GeminiConfig(max_attempts=0)

    def test_empty_model(self):
        with pytest.raises(ValueError, match="model"):
            GeminiConfig(model="")
