"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from assetviz_app.config.defaults import DefaultConfig, get_default_config
from assetviz_app.config.loader import ConfigLoader
from assetviz_app.config.validation import ConfigValidator
from assetviz_app.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config is not None
        assert config.stocks.value_field == "chg_%"
        assert config.stocks.magnitude_field == "vol_"
        assert config.crypto.magnitude_parser == "thousands"
        assert config.crypto.label_field == "name"
        assert config.selection.pos_n == 10
        assert config.hierarchy.root_name == "Assets"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert loader is not None
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with defaults only."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["selection"]["pos_n"] == 10
        assert config["stocks"]["identifier_field"] == "symbol"

    def test_merge_config_with_overrides(self, tmp_path: Path) -> None:
        """Test config merging with call-time overrides."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config({"selection": {"pos_n": 3}})

        assert config["selection"]["pos_n"] == 3
        # Other defaults should remain
        assert config["selection"]["neg_n"] == 10

    def test_file_overrides_precedence(self, tmp_path: Path) -> None:
        """File overrides defaults, call-time overrides the file."""
        (tmp_path / "datasets.yaml").write_text(
            "selection:\n  pos_n: 5\n  neg_n: 4\nsources:\n  delimiter: ';'\n"
        )
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"selection": {"neg_n": 1}})

        assert config["selection"]["pos_n"] == 5
        assert config["selection"]["neg_n"] == 1
        assert config["sources"]["delimiter"] == ";"

    def test_empty_file_is_ignored(self, tmp_path: Path) -> None:
        """An empty datasets.yaml changes nothing."""
        (tmp_path / "datasets.yaml").write_text("")

        assert ConfigLoader.create(tmp_path).merge_config() == ConfigLoader.create(tmp_path / "x").merge_config()

    def test_non_mapping_file_rejected(self, tmp_path: Path) -> None:
        """A datasets.yaml holding a list is a configuration error."""
        (tmp_path / "datasets.yaml").write_text("- a\n- b\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError, match="mapping"):
            loader.merge_config()

        with pytest.raises(ConfigurationError):
            loader.load_config()

    def test_malformed_yaml_rejected(self, tmp_path: Path) -> None:
        """Unparsable YAML surfaces as ConfigurationError."""
        (tmp_path / "datasets.yaml").write_text("selection: [1,\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML") as exc_info:
            ConfigLoader.create(tmp_path).load_file_overrides()

        assert exc_info.value.recoverable is False

    def test_load_config_typed(self, tmp_path: Path) -> None:
        """load_config rebuilds the frozen dataclasses."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.load_config({"crypto": {"value_field": "chg_7d"}})

        assert isinstance(config, DefaultConfig)
        assert config.crypto.value_field == "chg_7d"
        assert config.crypto.magnitude_field == "market_cap"

    def test_load_config_rejects_invalid(self, tmp_path: Path) -> None:
        """Invalid merged config raises ConfigurationError."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_config({"selection": {"pos_n": -1}, "stocks": {"colour": "red"}})

        fields = {err.field for err in exc_info.value.errors}
        assert fields == {"pos_n", "stocks.colour"}
        assert exc_info.value.recoverable is False


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_default_config(self, tmp_path: Path) -> None:
        """Defaults validate cleanly."""
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("value", [-1, 2.5, "3", True])
    def test_invalid_selection_counts(self, value) -> None:
        """Selection counts must be non-negative integers."""
        errors = ConfigValidator.validate_selection_params({"neg_n": value})
        assert len(errors) == 1
        assert errors[0].field == "neg_n"
        assert "non-negative integer" in errors[0].message

    def test_invalid_parser(self) -> None:
        """Parser names must be registered."""
        errors = ConfigValidator.validate_dataset_params({"value_parser": "currency"}, prefix="stocks.")
        assert len(errors) == 1
        assert errors[0].field == "stocks.value_parser"

    def test_blank_field_name(self) -> None:
        """Column names cannot be blank."""
        errors = ConfigValidator.validate_dataset_params({"identifier_field": "  "})
        assert len(errors) == 1
        assert errors[0].field == "identifier_field"

    def test_label_field_may_be_null(self) -> None:
        """label_field is optional."""
        assert ConfigValidator.validate_dataset_params({"label_field": None}) == []

    def test_invalid_delimiter(self) -> None:
        """Delimiter must be one character."""
        errors = ConfigValidator.validate_source_params({"delimiter": ";;"})
        assert len(errors) == 1
        assert errors[0].field == "delimiter"

    def test_invalid_group_by_sector(self) -> None:
        """group_stocks_by_sector must be a boolean."""
        errors = ConfigValidator.validate_hierarchy_params({"group_stocks_by_sector": "yes"})
        assert len(errors) == 1
        assert errors[0].message == "Must be a boolean"

    def test_unknown_section(self) -> None:
        """Unknown sections are reported."""
        errors = ConfigValidator.validate_config({"plots": {}})
        assert [err.field for err in errors] == ["plots"]
