"""tsdiagram configuration system.

Configuration is YAML-based. Supports environment variable substitution
(${VAR}) in config files.

Configuration file discovery (in priority order):
1. Explicit config path
2. ./.tsdiagram/config.yaml
3. ./tsdiagram.yaml
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from tsdiagram.utils.logging import LogMode, setup_logging

# =============================================================================
# Configuration Dataclasses
# =============================================================================

DEFAULT_EXCLUDES = [
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.git/**",
]


@dataclass
class TranslationConfig:
    """Translation layer configuration.

    Attributes:
        member_associations: Infer "has-a" edges between entities after translation
    """

    member_associations: bool = False

    def __post_init__(self) -> None:
        """Validate translation configuration."""
        if not isinstance(self.member_associations, bool):
            raise ValueError(
                f"translation.member_associations must be a boolean "
                f"(got {self.member_associations!r})"
            )


@dataclass
class SourcesConfig:
    """Source discovery configuration for the TypeScript frontend.

    Attributes:
        root: Directory to scan
        include: Glob selecting source files, relative to root
        exclude: Glob patterns of paths to skip
    """

    root: str = "."
    include: str = "**/*.ts"
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDES))

    def __post_init__(self) -> None:
        """Validate sources configuration."""
        if not self.include:
            raise ValueError("sources.include must not be empty")
        if isinstance(self.exclude, str):
            self.exclude = [self.exclude]

    @property
    def root_path(self) -> Path:
        """Root directory as a Path."""
        return Path(self.root)


@dataclass
class LoggingConfig:
    """Logging configuration.

    Attributes:
        mode: Output mode (human, verbose, json)
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR)
    """

    mode: str = "human"
    level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        valid_modes = {m.value for m in LogMode}
        if self.mode not in valid_modes:
            raise ValueError(f"Invalid logging mode: {self.mode}. Valid: {valid_modes}")

        self.level = self.level.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level not in valid_levels:
            raise ValueError(f"Invalid logging level: {self.level}. Valid: {valid_levels}")

    def configure(self) -> None:
        """Apply this configuration to the tsdiagram logger."""
        setup_logging(mode=LogMode(self.mode), level=logging.getLevelName(self.level))


@dataclass
class TsDiagramConfig:
    """Top-level tsdiagram configuration.

    Attributes:
        translation: Translation layer settings
        sources: Source discovery settings
        logging: Logging settings
    """

    translation: TranslationConfig = field(default_factory=TranslationConfig)
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Expand ${VAR} references in loaded YAML values.

    Lets a shared tsdiagram.yaml point sources.root or exclude globs at
    checkout-specific locations, e.g. `root: ${WEB_ROOT}/src`. Strings are
    expanded, dicts and lists are walked, anything else is returned as is.

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, dict):
        return {key: substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    if not isinstance(value, str):
        return value

    def expand(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in os.environ:
            raise ValueError(f"Environment variable not set: {name}")
        return os.environ[name]

    return ENV_VAR_PATTERN.sub(expand, value)


# =============================================================================
# Config File Discovery
# =============================================================================

# Looked up in this order below the project directory
CONFIG_FILE_NAMES = (
    Path(".tsdiagram") / "config.yaml",
    Path("tsdiagram.yaml"),
)


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Locate the tsdiagram config of a TypeScript project.

    Args:
        start_path: Project directory (defaults to the working directory)

    Returns:
        First existing candidate of CONFIG_FILE_NAMES, or None
    """
    project_dir = (start_path or Path.cwd()).resolve()
    for name in CONFIG_FILE_NAMES:
        candidate = project_dir / name
        if candidate.exists():
            return candidate
    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> TsDiagramConfig:
    """Build a TsDiagramConfig from parsed YAML.

    Missing or empty sections keep their defaults; ${VAR} references are
    expanded first.
    """
    data = substitute_env_vars(data)

    config = TsDiagramConfig()

    if "translation" in data:
        translation_data = data["translation"] or {}
        config.translation = TranslationConfig(
            member_associations=translation_data.get("member_associations", False),
        )

    if "sources" in data:
        sources_data = data["sources"] or {}
        config.sources = SourcesConfig(
            root=str(sources_data.get("root", config.sources.root)),
            include=sources_data.get("include", config.sources.include),
            exclude=sources_data.get("exclude", list(DEFAULT_EXCLUDES)),
        )

    if "logging" in data:
        logging_data = data["logging"] or {}
        config.logging = LoggingConfig(
            mode=logging_data.get("mode", "human"),
            level=str(logging_data.get("level", "INFO")),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> TsDiagramConfig:
    """Load the tsdiagram config of a run.

    An explicit path must exist. Without one, the working directory is
    searched (see find_config_file) unless auto_discover is off; with no
    file at all the defaults apply, which translate every .ts file below the
    working directory with association inference disabled.

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If the file holds invalid values or unset ${VAR}s
    """
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = config_path or (find_config_file() if auto_discover else None)
    if path is None:
        return TsDiagramConfig()

    with open(path) as f:
        config = load_config_from_dict(yaml.safe_load(f) or {})
    config._config_path = path
    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# tsdiagram configuration

# Translation settings
translation:
  member_associations: false  # infer "has-a" edges from member types

# TypeScript sources
sources:
  root: "."
  include: "**/*.ts"
  exclude:
    - "**/node_modules/**"
    - "**/dist/**"
    - "**/build/**"
    - "**/.git/**"

# Logging
logging:
  mode: "human"   # human, verbose, json
  level: "INFO"   # DEBUG, INFO, WARNING, ERROR
'''
