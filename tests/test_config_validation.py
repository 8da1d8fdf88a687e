"""Tests for config validation."""

import pytest

from work_history.config import load_config


class TestConfigValidation:
    def test_invalid_encoding(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("report:\n  input_encoding: not-a-codec\n")
        with pytest.raises(ValueError, match="input_encoding"):
            load_config(yaml)

    def test_empty_default_output(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("report:\n  default_output: '  '\n")
        with pytest.raises(ValueError, match="default_output"):
            load_config(yaml)

    def test_invalid_log_level(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="level"):
            load_config(yaml)

    def test_lowercase_log_level_accepted(self, tmp_path):
        yaml = tmp_path / "ok.yaml"
        yaml.write_text("logging:\n  level: debug\n")
        assert load_config(yaml).logging.level == "debug"

    def test_unknown_key(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("report:\n  default_outptu: x.txt\n")
        with pytest.raises(ValueError, match="default_outptu"):
            load_config(yaml)

    def test_invalid_yaml(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("report: [unclosed\n")
        with pytest.raises(ValueError, match="invalid YAML"):
            load_config(yaml)

    def test_top_level_not_a_mapping(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("- report\n- logging\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(yaml)

    def test_section_not_a_mapping(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("report: out.txt\n")
        with pytest.raises(ValueError, match="report"):
            load_config(yaml)

    def test_non_string_value(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("logging:\n  level: 10\n")
        with pytest.raises(ValueError, match="logging.level"):
            load_config(yaml)
