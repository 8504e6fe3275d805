"""Tests for configuration schema and loading."""

import logging

import pytest
import yaml
from pydantic import ValidationError

from handcanon.shared.config import Config, HandShapeConfig
from handcanon.shared.config_loader import apply_logging_config, load_config
from handcanon.shared.dicts import deep_merge_dicts


class TestConfig:
    """Tests for the Config model."""

    def test_defaults(self):
        """Test default hand shape and log level."""
        config = Config.default()
        assert config.hand.private_size == 2
        assert config.hand.shared_sizes == (0, 3, 4, 5)
        assert config.system.log_level == "INFO"

    def test_frozen(self):
        """Test config fields cannot be reassigned."""
        config = Config.default()
        with pytest.raises(ValidationError):
            config.system = None  # type: ignore[assignment]

    def test_unknown_keys_rejected(self):
        """Test extra keys are forbidden."""
        with pytest.raises(ValidationError):
            Config.from_dict({"hand": {"unknown": 1}})

    def test_duplicate_switch_not_configurable(self):
        """Test duplicate cards cannot be switched on through config."""
        with pytest.raises(ValidationError):
            Config.from_dict({"hand": {"reject_duplicates": False}})

    def test_shared_sizes_validated(self):
        """Test shared sizes must be street board sizes and non-empty."""
        with pytest.raises(ValidationError):
            HandShapeConfig(shared_sizes=(1,))
        with pytest.raises(ValidationError):
            HandShapeConfig(shared_sizes=())

    def test_shared_sizes_normalized(self):
        """Test shared sizes are deduplicated and sorted."""
        assert HandShapeConfig(shared_sizes=(5, 3, 3)).shared_sizes == (3, 5)

    def test_private_size_fixed(self):
        """Test the private segment size cannot change."""
        with pytest.raises(ValidationError):
            HandShapeConfig(private_size=3)  # type: ignore[arg-type]

    def test_merge_keeps_other_fields(self):
        """Test merging one section leaves the others at defaults."""
        config = Config.default().merge({"system": {"log_level": "DEBUG"}})
        assert config.system.log_level == "DEBUG"
        assert config.hand.shared_sizes == (0, 3, 4, 5)

    def test_to_dict(self):
        """Test serialization to a plain dict."""
        data = Config.default().to_dict()
        assert data["system"] == {"log_level": "INFO"}


class TestLoadConfig:
    """Tests for YAML loading and overrides."""

    def test_no_path_gives_defaults(self):
        """Test loading without a file returns defaults."""
        assert load_config() == Config.default()

    def test_yaml_overrides(self, tmp_path):
        """Test YAML values replace defaults."""
        path = tmp_path / "river_only.yaml"
        path.write_text(yaml.safe_dump({"hand": {"shared_sizes": [5]}}))

        config = load_config(path)
        assert config.hand.shared_sizes == (5,)
        assert config.system.log_level == "INFO"

    def test_keyword_overrides_win(self, tmp_path):
        """Test keyword overrides take precedence over YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"system": {"log_level": "ERROR"}}))

        config = load_config(path, system__log_level="DEBUG", hand__shared_sizes=(3,))
        assert config.system.log_level == "DEBUG"
        assert config.hand.shared_sizes == (3,)

    def test_empty_yaml(self, tmp_path):
        """Test an empty file means no overrides."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config.default()

    def test_non_mapping_yaml(self, tmp_path):
        """Test a YAML list at top level is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text(yaml.safe_dump([1, 2]))
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_override(self):
        """Test override values are validated."""
        with pytest.raises(ValidationError):
            load_config(system__log_level="LOUD")

    def test_malformed_override_key(self):
        """Test override keys need a section and a field."""
        with pytest.raises(ValueError, match="section__field"):
            load_config(log_level="DEBUG")


class TestApplyLoggingConfig:
    """Tests for applying the configured log level."""

    def test_sets_package_logger_level(self):
        """Test the handcanon logger picks up the configured level."""
        logger = logging.getLogger("handcanon")
        original = logger.level
        try:
            apply_logging_config(load_config(system__log_level="WARNING"))
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(original)


class TestDeepMerge:
    """Tests for recursive dict merging."""

    def test_nested_merge(self):
        """Test nested dicts merge key by key without mutating the base."""
        base = {"a": 1, "b": {"x": 10, "y": 20}}
        merged = deep_merge_dicts(base, {"b": {"y": 30}, "c": 3})
        assert merged == {"a": 1, "b": {"x": 10, "y": 30}, "c": 3}
        assert base == {"a": 1, "b": {"x": 10, "y": 20}}

    def test_non_dict_replaces(self):
        """Test a scalar override replaces a nested dict."""
        assert deep_merge_dicts({"a": {"x": 1}}, {"a": 5}) == {"a": 5}
