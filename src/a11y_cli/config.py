import json
import tomllib
from pathlib import Path
from typing import Any, Dict

from a11y_linter.config import A11yConfig
from pydantic import ValidationError

DEFAULT_CONFIG_FILE = ".a11yfix.toml"
TOOL_TABLE = "a11y-fix"


class ConfigError(Exception):
    """Configuration file could not be read, parsed or validated."""


def read_config_data(path: Path) -> Dict[str, Any]:
    """Raw options from a TOML (`[tool.a11y-fix]`) or JSON config file."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        try:
            document = tomllib.loads(raw.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
        data = document.get("tool", {}).get(TOOL_TABLE, document)

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a table of options")
    return data


def load_config(path: Path | None = None) -> A11yConfig:
    """Load configuration; without an explicit path, `.a11yfix.toml` is used if present."""
    if path is None:
        candidate = Path(DEFAULT_CONFIG_FILE)
        if not candidate.exists():
            return A11yConfig()
        path = candidate
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    data = read_config_data(path)
    try:
        return A11yConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}:\n{exc}") from exc
