"""Resolver configuration loader using TOML.

Where: config/config.py
What: Read ``vite.toml`` into validated ``ViteOptions``.
Why: Let the CLI and hosts share one declarative configuration file.
"""

from __future__ import annotations

import textwrap
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from vitetags.config.file_ops import ensure_file_with_template
from vitetags.config.paths import (
    CONFIG_PATH_ENV,
    default_config_path,
    resolve_overridable_path,
)
from vitetags.features.resolution.domain.attributes import AttributeValue
from vitetags.features.resolution.domain.options import (
    DEFAULT_ASSETS_URL,
    DEFAULT_BUILD_DIRECTORY,
    DEFAULT_HOT_FILE,
    DEFAULT_RELOAD,
    ViteOptions,
    define_config,
)
from vitetags.platform.logging import logger

_KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {
        "hot_file",
        "entrypoints",
        "assets_url",
        "build_directory",
        "reload",
        "script_attributes",
        "style_attributes",
    }
)

_TEMPLATE = textwrap.dedent(
    f"""
    # Vite asset resolution configuration (TOML)
    #
    # Relative paths are resolved against the working directory of the host.

    # Source entrypoints rendered by the application.
    # Example: entrypoints = ["resources/js/app.js", "resources/css/app.css"]
    entrypoints = []

    # File written by the dev server while it is running.
    hot_file = "{DEFAULT_HOT_FILE}"

    # Directory holding manifest.json after a production build.
    build_directory = "{DEFAULT_BUILD_DIRECTORY}"

    # Public URL of the build directory, e.g. a CDN origin.
    assets_url = "{DEFAULT_ASSETS_URL}"

    [script_attributes]
    # Example: defer = true

    [style_attributes]
    # Example: media = "all"
    """
).strip() + "\n"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


def _string(document: Mapping[str, Any], key: str, default: str) -> str:
    value = document.get(key, default)
    if not isinstance(value, str):
        raise ConfigValidationError(f"'{key}' must be a string")
    return value


def _string_list(document: Mapping[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = document.get(key, list(default))
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigValidationError(f"'{key}' must be a list of strings")
    return tuple(value)


def _attribute_table(document: Mapping[str, Any], key: str) -> dict[str, AttributeValue] | None:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ConfigValidationError(f"'{key}' must be a table")

    attributes: dict[str, AttributeValue] = {}
    for name, item in value.items():
        if not isinstance(item, (str, int, float, bool)):
            raise ConfigValidationError(
                f"'{key}.{name}' must be a string, number or boolean"
            )
        attributes[name] = item
    return attributes or None


def parse_vite_config(document: Mapping[str, Any]) -> ViteOptions:
    """Validate a decoded TOML document and build ``ViteOptions``.

    Args:
        document: Decoded TOML mapping.

    Returns:
        ViteOptions: Options with defaults applied for absent keys.

    Raises:
        ConfigValidationError: If a key holds a value of the wrong type.
    """

    unknown = sorted(set(document) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    return define_config(
        entrypoints=_string_list(document, "entrypoints", ()),
        hot_file=_string(document, "hot_file", DEFAULT_HOT_FILE),
        assets_url=_string(document, "assets_url", DEFAULT_ASSETS_URL),
        build_directory=_string(document, "build_directory", DEFAULT_BUILD_DIRECTORY),
        reload=_string_list(document, "reload", DEFAULT_RELOAD),
        script_attributes=_attribute_table(document, "script_attributes"),
        style_attributes=_attribute_table(document, "style_attributes"),
    )


def load_vite_config(
    *, path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> ViteOptions:
    """Load resolver options from the configuration file.

    A missing file is created from a commented template first.

    Args:
        path: Optional explicit path to the configuration file.
        env: Optional environment mapping used for ``VITETAGS_CONFIG_PATH``.

    Returns:
        ViteOptions: Loaded options.

    Raises:
        ConfigParseError: If the file is not valid TOML.
        ConfigValidationError: If a value has the wrong type.
    """

    config_file = resolve_overridable_path(
        explicit_path=path,
        env=env,
        env_var=CONFIG_PATH_ENV,
        default_factory=default_config_path,
    )

    if ensure_file_with_template(config_file, template_provider=lambda: _TEMPLATE):
        logger.info("Created default configuration at %s", config_file)

    try:
        with open(config_file, "rb") as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Failed to parse {config_file}: {e}") from e

    options = parse_vite_config(document)
    logger.debug("Configuration loaded from %s", config_file)
    return options


__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_vite_config",
    "parse_vite_config",
]
