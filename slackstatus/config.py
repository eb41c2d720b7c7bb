"""Configuration loading for slackstatus."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from slackstatus.errors import ConfigError


CONFIG_NAMES = (".slackstatus.yml", ".slackstatus.yaml")
CONFIG_OVERRIDE_VAR = "SLACKSTATUS_CONFIG"
ENV_PREFIX = "SLACKSTATUS_"
DEFAULT_ENV_FILE = Path.home() / ".config" / "slackstatus" / "slackstatus.env"
DEFAULT_TIMEOUT_SECONDS = 20.0

_ENV_KEY_RE = re.compile(r"[^A-Z0-9]+")


@dataclass(frozen=True)
class ConfigStore:
    """Dotted-key view over the parsed config file with env overrides.

    ``store.get_string("workspace_credentials.acme.token")`` first checks
    ``SLACKSTATUS_WORKSPACE_CREDENTIALS_ACME_TOKEN`` and then the file.
    """

    data: dict[str, Any] = field(default_factory=dict)
    path: Path | None = None

    def get(self, key: str, default: Any = None) -> Any:
        env_value = os.getenv(env_key(key))
        if env_value is not None:
            return env_value

        node: Any = self.data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            raise ConfigError(f"Config key {key} must be a string")
        return str(value)

    def get_list(self, key: str) -> list[str]:
        value = self.get(key)
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        if not isinstance(value, list):
            raise ConfigError(f"Config key {key} must be a list")
        return [str(item) for item in value]

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def section_keys(self, key: str) -> list[str]:
        """Return the sub-keys of a mapping section, sorted lexicographically."""

        value = self.get(key)
        if value is None:
            return []
        if not isinstance(value, dict):
            raise ConfigError(f"Config section {key} must be a mapping")
        return sorted(str(name) for name in value)


@dataclass(frozen=True)
class Settings:
    """Runtime settings derived from the config store."""

    store: ConfigStore
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def env_key(key: str) -> str:
    return ENV_PREFIX + _ENV_KEY_RE.sub("_", key.upper()).strip("_")


def _load_env_files() -> None:
    for path in (DEFAULT_ENV_FILE, Path.cwd() / ".env"):
        if path.is_file():
            load_dotenv(dotenv_path=path, override=False)


def find_config_file(explicit: str | Path | None = None) -> Path:
    """Locate the config file, honouring --config and SLACKSTATUS_CONFIG."""

    override = str(explicit or "").strip() or (
        os.getenv(CONFIG_OVERRIDE_VAR) or ""
    ).strip()
    if override:
        path = Path(override).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return path

    for directory in (Path.home(), Path.cwd()):
        for name in CONFIG_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate

    raise ConfigError(
        "No config file found. Copy the example config file to your home "
        "directory:\n  $ cp .example.slackstatus.yml ~/.slackstatus.yml"
    )


def read_config_file(path: Path) -> ConfigStore:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return ConfigStore(data=data, path=path)


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load env files, locate and parse the config file."""

    _load_env_files()
    store = read_config_file(find_config_file(config_path))

    raw_timeout = store.get("timeout")
    if raw_timeout is None:
        return Settings(store=store)
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"timeout must be a number, got {raw_timeout!r}") from exc
    if timeout <= 0:
        raise ConfigError("timeout must be greater than zero")
    return Settings(store=store, timeout_seconds=timeout)
