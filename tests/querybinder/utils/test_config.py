"""Unit tests for configuration management."""

from pathlib import Path
from tempfile import TemporaryDirectory

from querybinder.utils.config import ConfigSettings, find_config_file, load_config


class TestConfigSettings:
    """Tests for ConfigSettings Pydantic model."""

    def test_empty_config_settings(self):
        """Test creating empty ConfigSettings with all None values."""
        config = ConfigSettings()
        assert config.output_format is None
        assert config.args_file is None
        assert config.consume_skipped is None
        assert config.validate_sql is None
        assert config.dialect is None

    def test_partial_config_settings(self):
        """Test ConfigSettings with some fields set."""
        config = ConfigSettings(dialect="postgres", consume_skipped=True)
        assert config.dialect == "postgres"
        assert config.consume_skipped is True
        assert config.output_format is None

    def test_unknown_fields_ignored(self):
        """Test that unknown fields are ignored (forward compatibility)."""
        config = ConfigSettings(dialect="mysql", unknown_field="value")
        assert config.dialect == "mysql"
        assert not hasattr(config, "unknown_field")


class TestFindConfigFile:
    """Tests for finding config files."""

    def test_find_config_in_directory(self):
        """Test finding querybinder.toml in the given directory."""
        with TemporaryDirectory() as tmpdir:
            tmppath = Path(tmpdir)
            config_file = tmppath / "querybinder.toml"
            config_file.write_text("[querybinder]\n")

            assert find_config_file(tmppath) == config_file

    def test_config_not_found(self):
        """Test when config file doesn't exist."""
        with TemporaryDirectory() as tmpdir:
            assert find_config_file(Path(tmpdir)) is None

    def test_config_is_directory(self):
        """Test when querybinder.toml is a directory (not a file)."""
        with TemporaryDirectory() as tmpdir:
            tmppath = Path(tmpdir)
            (tmppath / "querybinder.toml").mkdir()

            assert find_config_file(tmppath) is None

    def test_default_to_cwd(self, tmp_path, monkeypatch):
        """Test that find_config_file looks in the working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "querybinder.toml").write_text("[querybinder]\n")

        assert find_config_file().resolve() == (tmp_path / "querybinder.toml").resolve()


class TestLoadConfig:
    """Tests for loading configuration from TOML files."""

    def test_load_valid_config(self):
        """Test loading a valid config with all fields."""
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "querybinder.toml"
            config_file.write_text(
                """
[querybinder]
output_format = "json"
args_file = "args.json"
consume_skipped = true
validate_sql = true
dialect = "mysql"
"""
            )

            config = load_config(config_file)
            assert config.output_format == "json"
            assert config.args_file == "args.json"
            assert config.consume_skipped is True
            assert config.validate_sql is True
            assert config.dialect == "mysql"

    def test_missing_section(self):
        """Test a config file without a [querybinder] table."""
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "querybinder.toml"
            config_file.write_text('[other]\nkey = "value"\n')

            assert load_config(config_file) == ConfigSettings()

    def test_malformed_toml(self, capsys):
        """Test that malformed TOML warns and falls back to defaults."""
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "querybinder.toml"
            config_file.write_text("[querybinder\ndialect = ")

            config = load_config(config_file)

        assert config == ConfigSettings()
        assert "Warning" in capsys.readouterr().err

    def test_invalid_value_type(self, capsys):
        """Test that a wrongly typed value falls back to defaults."""
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "querybinder.toml"
            config_file.write_text('[querybinder]\nconsume_skipped = "maybe"\n')

            config = load_config(config_file)

        assert config == ConfigSettings()
        assert "Invalid configuration" in capsys.readouterr().err

    def test_section_not_a_table(self, capsys):
        """Test that a scalar querybinder key is rejected."""
        with TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "querybinder.toml"
            config_file.write_text('querybinder = "yes"\n')

            assert load_config(config_file) == ConfigSettings()

    def test_no_config_file(self, tmp_path, monkeypatch):
        """Test that no config file gives empty settings."""
        monkeypatch.chdir(tmp_path)
        assert load_config() == ConfigSettings()
