"""Test settings loading and validation."""

import pytest

from tokensplit.config import (
    ConfigLoadError,
    SplitterConfig,
    TokenizerConfig,
    load_config_from_mapping,
    load_config_from_string,
)


class TestConfigLoading:
    """Test settings loading from YAML strings and mappings."""

    def test_load_valid_config_from_string(self, sample_config_yaml):
        """Test loading valid settings from YAML string."""
        config = load_config_from_string(sample_config_yaml)

        assert isinstance(config, SplitterConfig)
        assert config.tokenizer.separators == ["\t", "\n", " "]
        assert config.tokenizer.encoding == "utf-8"
        assert config.tokenizer.errors == "strict"
        assert config.terminators == ["!", ".", "?"]
        assert config.quotes == ['"']
        assert config.continue_on_ellipsis is True

    def test_defaults(self):
        """Test that an empty mapping gives the default settings."""
        config = load_config_from_mapping({})

        assert config.tokenizer.separators == ["\t", "\n", "\r", " "]
        assert config.terminators == ["!", ".", "?"]
        assert config.quotes == []
        assert config.continue_on_ellipsis is False

    def test_load_invalid_yaml(self):
        """Test loading invalid YAML."""
        invalid_yaml = """
        invalid: yaml: content:
          - missing: bracket
        """

        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_config_from_string(invalid_yaml)

    def test_load_non_mapping_yaml(self):
        """Test YAML that is not a mapping."""
        with pytest.raises(ConfigLoadError, match="YAML mapping"):
            load_config_from_string("- a\n- b\n")

    def test_load_non_mapping_data(self):
        """Test a mapping loader given a list."""
        with pytest.raises(ConfigLoadError, match="must be a mapping"):
            load_config_from_mapping(["a", "b"])

    def test_load_unknown_field(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("terminators: ['.']\nabbreviations: [Dr]\n")

    def test_load_multichar_separator(self):
        """Test that separators must be single characters."""
        yaml_text = """
        tokenizer:
          separators: ["--"]
        """

        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string(yaml_text)

    def test_load_multichar_terminator(self):
        """Test that terminators must be single characters."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_mapping({"terminators": ["?!"]})

    def test_load_empty_quote(self):
        """Test that quote marks must not be empty."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_mapping({"quotes": [""]})

    def test_load_bad_encoding(self):
        """Test unknown, non-text and unsafe encodings."""
        for encoding in ("no-such-codec", "utf-16", "shift_jis", "utf-7", "base64"):
            with pytest.raises(ConfigLoadError, match="validation failed"):
                load_config_from_mapping({"tokenizer": {"encoding": encoding}})

    def test_load_bad_error_handler(self):
        """Test unknown codec error handlers."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_mapping({"tokenizer": {"errors": "shrug"}})


class TestConfigSchema:
    """Test schema normalization."""

    def test_encoding_is_canonical(self):
        """Test that codec aliases resolve to their canonical name."""
        assert TokenizerConfig(encoding="UTF8").encoding == "utf-8"
        assert TokenizerConfig(encoding="latin1").encoding == "iso8859-1"

    def test_duplicates_are_dropped(self):
        """Test that repeated characters collapse."""
        config = SplitterConfig(
            tokenizer=TokenizerConfig(separators=[" ", ",", " "]),
            terminators=[".", ".", "!"],
            quotes=['"', '"', "'"],
        )

        assert config.tokenizer.separators == [" ", ","]
        assert config.terminators == ["!", "."]
        assert config.quotes == ['"', "'"]

    def test_empty_separator_list_is_valid(self):
        """Test that an empty separator list is accepted."""
        assert TokenizerConfig(separators=[]).separators == []
