# --- START OF FILE config_manager.py ---

import tomllib
from dataclasses import dataclass
from typing import Optional

from rich.color import Color, ColorParseError

import constants
from debug_logging import log
from paths import find_config_file, get_config_search_paths

LOG_PREFIX = "CONFIG"


class ConfigError(Exception):
    """The colour configuration is missing or unusable. Fatal at startup."""
    pass


@dataclass(frozen=True)
class ColorConfig:
    title: str
    normal_text: str
    cursor: str
    selected: str
    border: str
    instruction: str
    active_column_bg: str


def normalize_color(value, where: str) -> str:
    """
    Converts a configured colour to '#rrggbb'.

    Accepts anything rich understands (names, '#hex', 'rgb(r,g,b)',
    'color(N)') plus bare ANSI 256 numbers such as "205" or 205.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{where} must be a colour name, hex value or ANSI number")
    spec = value.strip()
    if spec.isdigit():
        spec = f"color({spec})"
    try:
        return Color.parse(spec).get_truecolor().hex
    except ColorParseError as e:
        raise ConfigError(f"{where} is not a valid colour: {value!r}") from e


def parse_colors(document: dict, source: str = "<config>") -> ColorConfig:
    """Validates the [colors] table of a parsed config document."""
    colors = document.get(constants.CONFIG_COLORS_TABLE)
    if not isinstance(colors, dict):
        raise ConfigError(f"{source}: missing [{constants.CONFIG_COLORS_TABLE}] table")

    values = {}
    for key in constants.COLOR_KEYS:
        value = colors.get(key)
        values[key] = normalize_color(value, f"{source}: colors.{key}")
    return ColorConfig(**values)


def load_config(explicit_path: Optional[str] = None) -> ColorConfig:
    """
    Loads the colour configuration.

    Args:
        explicit_path: Path given on the command line. When None, ./config.toml
            and then the per-user config file are tried.

    Raises:
        ConfigError: no file found, invalid TOML, or a missing/invalid colour.
    """
    config_path = find_config_file(explicit_path)
    if config_path is None:
        searched = ", ".join(get_config_search_paths(explicit_path))
        raise ConfigError(f"No configuration file found (searched: {searched})")

    log(LOG_PREFIX, f"Loading colours from {config_path}", "DEBUG")
    try:
        with open(config_path, 'rb') as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{config_path}: invalid TOML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading config file '{config_path}': {e}") from e
    return parse_colors(document, config_path)

# --- END OF FILE config_manager.py ---
