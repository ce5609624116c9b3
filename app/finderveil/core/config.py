"""finderveil configuration.

This module provides the configuration model and I/O functions for the
hide workflow. Every fixed value of the workflow (the applications
directory, the exclusion set, the external command paths, and the
process to restart) can be overridden here.

Configuration is stored in ~/.config/finderveil/config.toml. A missing
file is not an error: the defaults reproduce the stock behavior.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from finderveil.core.errors import ConfigError, ConfigParseError
from finderveil.core.paths import DEFAULT_REPORT_NAME, get_config_path

logger = logging.getLogger(__name__)

# Entries shipped with a standard macOS installation, plus the Finder
# bookkeeping files and Apple-supplied folders.
DEFAULT_EXCLUDED: tuple[str, ...] = (
    ".DS_Store",
    ".localized",
    "Apps",
    "Utilities",
    "GarageBand.app",
    "Keynote.app",
    "Numbers.app",
    "Pages.app",
    "Safari.app",
    "Xcode.app",
    "iBooks Author.app",
    "iMovie.app",
    "Playgrounds.app",
)


class HideConfig(BaseModel):
    """Configuration for the hide workflow.

    Attributes:
        apps_dir: Directory whose direct children are hidden.
        excluded: Entry names that are never touched.
        chflags_path: Executable used to set file flags.
        id_path: Executable used to query the process identity.
        killall_path: Executable used to signal a process by name.
        restart_target: Process restarted after a clean run.
        report_name: File name of the report in the temporary directory.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    apps_dir: Annotated[
        str,
        Field(min_length=1, description="Applications directory"),
    ] = "/Applications"
    excluded: Annotated[
        frozenset[str],
        Field(description="Entries never hidden"),
    ] = frozenset(DEFAULT_EXCLUDED)
    chflags_path: str = "/usr/bin/chflags"
    id_path: str = "/usr/bin/id"
    killall_path: str = "/usr/bin/killall"
    restart_target: Annotated[
        str,
        Field(min_length=1, description="Process name passed to killall"),
    ] = "Dock"
    report_name: Annotated[
        str,
        Field(min_length=1, description="Report file name"),
    ] = DEFAULT_REPORT_NAME

    @field_validator("report_name")
    @classmethod
    def validate_report_name(cls, v: str) -> str:
        """Ensure the report name is a plain file name."""
        if "/" in v or v in (".", ".."):
            msg = f"report_name must be a plain file name, got '{v}'"
            raise ValueError(msg)
        return v

    def with_exclusions(self, extra: list[str] | None) -> "HideConfig":
        """Return a copy with additional excluded names.

        Args:
            extra: Names to add to the exclusion set.

        Returns:
            New HideConfig, or self when there is nothing to add.
        """
        if not extra:
            return self
        return self.model_copy(update={"excluded": self.excluded | frozenset(extra)})


def load_config(path: Path | None = None) -> HideConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated HideConfig. Defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or does not match the schema.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No config at %s, using defaults", config_path)
        return HideConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = HideConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def save_config(config: HideConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The HideConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: HideConfig) -> dict[str, object]:
    """Convert HideConfig to a dictionary for TOML serialization.

    The exclusion set is written sorted so the file is stable.

    Args:
        config: The HideConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    data = config.model_dump()
    data["excluded"] = sorted(config.excluded)
    return data
