"""Unit tests for configuration system."""

import logging
from pathlib import Path

import pytest

from tsdiagram.config import (
    LoggingConfig,
    SourcesConfig,
    TranslationConfig,
    TsDiagramConfig,
    create_default_config,
    find_config_file,
    load_config,
    load_config_from_dict,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Tests for environment variable substitution."""

    def test_substitute_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env var in string."""
        monkeypatch.setenv("TS_ROOT", "frontend")

        assert substitute_env_vars("${TS_ROOT}/src") == "frontend/src"

    def test_substitute_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env vars in nested dicts and lists."""
        monkeypatch.setenv("EXCLUDED", "**/gen/**")

        data = {"sources": {"exclude": ["${EXCLUDED}", "static"]}}
        result = substitute_env_vars(data)

        assert result == {"sources": {"exclude": ["**/gen/**", "static"]}}

    def test_missing_env_var_raises(self) -> None:
        """Test that missing env var raises ValueError."""
        with pytest.raises(ValueError, match="Environment variable not set"):
            substitute_env_vars("${TSDIAGRAM_NONEXISTENT_VAR}")

    def test_passthrough_non_string(self) -> None:
        """Test that non-string values pass through unchanged."""
        assert substitute_env_vars(123) == 123
        assert substitute_env_vars(True) is True
        assert substitute_env_vars(None) is None


class TestFindConfigFile:
    """Tests for config file discovery."""

    def test_find_dot_directory_config(self, tmp_path: Path) -> None:
        """Test finding .tsdiagram/config.yaml."""
        config_dir = tmp_path / ".tsdiagram"
        config_dir.mkdir()
        config_file = config_dir / "config.yaml"
        config_file.write_text("translation:\n  member_associations: true\n")

        assert find_config_file(tmp_path) == config_file

    def test_find_root_config(self, tmp_path: Path) -> None:
        """Test finding tsdiagram.yaml."""
        config_file = tmp_path / "tsdiagram.yaml"
        config_file.write_text("{}")

        assert find_config_file(tmp_path) == config_file

    def test_dot_directory_takes_priority(self, tmp_path: Path) -> None:
        """Test .tsdiagram/config.yaml wins over tsdiagram.yaml."""
        (tmp_path / ".tsdiagram").mkdir()
        preferred = tmp_path / ".tsdiagram" / "config.yaml"
        preferred.write_text("{}")
        (tmp_path / "tsdiagram.yaml").write_text("{}")

        assert find_config_file(tmp_path) == preferred

    def test_no_config(self, tmp_path: Path) -> None:
        """Test discovery returns None without config files."""
        assert find_config_file(tmp_path) is None


class TestConfigValidation:
    """Tests for config dataclass validation."""

    def test_defaults(self) -> None:
        """Test default configuration."""
        config = TsDiagramConfig()

        assert config.translation.member_associations is False
        assert config.sources.root == "."
        assert config.sources.include == "**/*.ts"
        assert "**/node_modules/**" in config.sources.exclude
        assert config.logging.mode == "human"
        assert config.logging.level == "INFO"
        assert config.config_path is None

    def test_member_associations_must_be_bool(self) -> None:
        """Test non-boolean association flag is rejected."""
        with pytest.raises(ValueError, match="member_associations"):
            TranslationConfig(member_associations="yes")  # type: ignore[arg-type]

    def test_empty_include_rejected(self) -> None:
        """Test empty include glob is rejected."""
        with pytest.raises(ValueError, match="include"):
            SourcesConfig(include="")

    def test_single_exclude_string(self) -> None:
        """Test a single exclude pattern is wrapped in a list."""
        assert SourcesConfig(exclude="**/gen/**").exclude == ["**/gen/**"]  # type: ignore[arg-type]

    def test_invalid_logging_mode(self) -> None:
        """Test invalid logging mode is rejected."""
        with pytest.raises(ValueError, match="Invalid logging mode"):
            LoggingConfig(mode="xml")

    def test_logging_level_normalized(self) -> None:
        """Test logging level is upper-cased and validated."""
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValueError, match="Invalid logging level"):
            LoggingConfig(level="chatty")

    def test_logging_configure(self) -> None:
        """Test applying logging configuration sets the package level."""
        logger = logging.getLogger("tsdiagram")
        try:
            LoggingConfig(mode="json", level="WARNING").configure()

            assert logger.level == logging.WARNING
            assert len(logger.handlers) == 1
        finally:
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)


class TestLoadConfig:
    """Tests for config loading."""

    def test_load_from_dict(self) -> None:
        """Test loading every section from a dictionary."""
        config = load_config_from_dict(
            {
                "translation": {"member_associations": True},
                "sources": {"root": "web", "include": "src/**/*.ts", "exclude": ["**/gen/**"]},
                "logging": {"mode": "verbose", "level": "debug"},
            }
        )

        assert config.translation.member_associations is True
        assert config.sources.root == "web"
        assert config.sources.root_path == Path("web")
        assert config.sources.include == "src/**/*.ts"
        assert config.sources.exclude == ["**/gen/**"]
        assert config.logging.mode == "verbose"
        assert config.logging.level == "DEBUG"

    def test_partial_dict_keeps_defaults(self) -> None:
        """Test missing sections keep their defaults."""
        config = load_config_from_dict({"sources": {"root": "app"}})

        assert config.sources.include == "**/*.ts"
        assert config.translation.member_associations is False

    def test_empty_section(self) -> None:
        """Test sections present but empty keep their defaults."""
        config = load_config_from_dict({"translation": None})

        assert config.translation.member_associations is False

    def test_load_explicit_file(self, tmp_path: Path) -> None:
        """Test loading an explicit YAML file."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("translation:\n  member_associations: true\n")

        config = load_config(config_file)

        assert config.translation.member_associations is True
        assert config.config_path == config_file

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        """Test missing explicit config file raises."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_no_discovery(self) -> None:
        """Test defaults when discovery is disabled."""
        config = load_config(auto_discover=False)

        assert config.config_path is None

    def test_default_config_round_trip(self, tmp_path: Path) -> None:
        """Test the generated default config loads to the defaults."""
        config_file = tmp_path / "tsdiagram.yaml"
        config_file.write_text(create_default_config())

        config = load_config(config_file)

        assert config.translation.member_associations is False
        assert config.sources.exclude == TsDiagramConfig().sources.exclude
        assert config.logging.mode == "human"

    def test_env_vars_in_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR} references in a config file point sources at the checkout."""
        monkeypatch.setenv("WEB_ROOT", "/srv/web")
        config_file = tmp_path / "tsdiagram.yaml"
        config_file.write_text('sources:\n  root: "${WEB_ROOT}/src"\n  exclude: ["${WEB_ROOT}/gen/**"]\n')

        config = load_config(config_file)

        assert config.sources.root_path == Path("/srv/web/src")
        assert config.sources.exclude == ["/srv/web/gen/**"]

    def test_discovery_from_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test discovery finds the project config in the working directory."""
        (tmp_path / ".tsdiagram").mkdir()
        (tmp_path / ".tsdiagram" / "config.yaml").write_text(
            "translation:\n  member_associations: true\n"
        )
        monkeypatch.chdir(tmp_path)

        config = load_config()

        assert config.translation.member_associations is True
        assert config.config_path == (tmp_path / ".tsdiagram" / "config.yaml").resolve()
