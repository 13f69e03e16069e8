"""User configuration for the dirview CLI.

Configuration is stored in ~/.config/dirview/config.toml and supplies
defaults for the ``dirview ls`` command. The library itself reads no
configuration.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dirview.core.paths import get_config_path
from dirview.entries.models import OrderBy
from dirview.exceptions import ConfigError, ConfigNotFoundError, ConfigParseError

logger = logging.getLogger(__name__)

OutputFormatName = Literal["table", "json"]


class DirviewConfig(BaseModel):
    """Defaults for listing a directory.

    Attributes:
        show_hidden: Include dotfiles unless filtered explicitly.
        order_by: Default sort key (None keeps enumeration order).
        descending: Reverse the listing after sorting.
        output_format: Default output format ("table" or "json").
    """

    model_config = ConfigDict(extra="forbid")

    show_hidden: Annotated[
        bool,
        Field(description="Include hidden entries by default"),
    ] = True
    order_by: Annotated[
        OrderBy | None,
        Field(description="Default sort key"),
    ] = None
    descending: Annotated[
        bool,
        Field(description="Reverse the listing after sorting"),
    ] = False
    output_format: Annotated[
        OutputFormatName,
        Field(description="Default output format"),
    ] = "table"


def load_config(path: Path | None = None) -> DirviewConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated DirviewConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return DirviewConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> DirviewConfig:
    """Load configuration, falling back to defaults if no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return DirviewConfig()


def save_config(config: DirviewConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory and
    then moved into place with os.replace().

    Args:
        config: The DirviewConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    # TOML has no null; unset keys are simply omitted
    data = config.model_dump(mode="json", exclude_none=True)

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
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
