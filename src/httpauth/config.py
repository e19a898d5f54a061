"""Configuration management: XDG paths, atomic writes, precedence, credential sources.

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.httpauth/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- a single :class:`~httpauth.models.GlobalConfig` JSON
  file, written atomically.
* **Precedence resolution** -- :func:`resolve_config` layers the
  ``HTTPAUTH_FORMAT`` environment variable and CLI flags over the file.
* **Credential resolution** -- :func:`resolve_credential` reads a password
  from an env var, a file, an interactive prompt, or a literal.
"""

from __future__ import annotations

import getpass
import json
import os
import platform
import sys
import tempfile
from pathlib import Path
from typing import Optional

from httpauth.exceptions import ConfigError
from httpauth.models import OUTPUT_FORMATS, GlobalConfig, OutputConfig

_APP_NAME = "httpauth"
_CONFIG_FILENAME = "config.json"

ENV_FORMAT = "HTTPAUTH_FORMAT"
"""Environment variable overriding ``output.format``."""


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    return Path.home().joinpath(*default_segments)


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/httpauth/`` (default ``~/.config/httpauth/``).
    On macOS/Windows: ``~/.httpauth/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/httpauth/`` (default ``~/.local/share/httpauth/``).
    On macOS/Windows: ``~/.httpauth/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write *data* to *path* via a temp file in the same directory plus ``os.replace``."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
        encoding="utf-8",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        except BaseException:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise

    try:
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration.

    Returns:
        The deserialised :class:`~httpauth.models.GlobalConfig`, or a
        default instance if the file does not exist.

    Raises:
        ConfigError: If the file contains invalid JSON or fails validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    _atomic_write(global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Precedence resolution ---


def resolve_config(cli_format: Optional[str] = None) -> GlobalConfig:
    """Resolve the effective configuration.

    Precedence (high to low):
        1. CLI flags (``cli_format``)
        2. Environment variables (``HTTPAUTH_FORMAT``)
        3. User config (``~/.config/httpauth/config.json``)
        4. Defaults

    Raises:
        ConfigError: If the config file is invalid or an override names an
            unknown output format.
    """
    config = load_global_config()

    fmt = config.output.format
    env_format = os.environ.get(ENV_FORMAT)
    if env_format:
        fmt = env_format
    if cli_format is not None:
        fmt = cli_format

    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format '{fmt}'; expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    return config.model_copy(update={"output": OutputConfig(format=fmt)})


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a password from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- the value of an environment variable
        - ``"file:/path/to/file"`` -- file content, stripped of surrounding whitespace
        - ``"prompt"`` -- asked for interactively, without echo; needs a TTY
        - ``"literal:TEXT"`` -- ``TEXT`` itself, colons included

    Raises:
        ConfigError: If the source is unknown or cannot be read.
    """
    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigError("Cannot prompt for a password: stdin is not a TTY")
        return getpass.getpass("Password: ")

    kind, sep, target = source.partition(":")
    if not sep:
        kind = ""

    if kind == "env":
        try:
            return os.environ[target]
        except KeyError:
            raise ConfigError(f"Password variable {target} is not set") from None

    if kind == "file":
        path = Path(target).expanduser()
        if not path.is_file():
            raise ConfigError(f"Password file not found: {path}")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read password file {path}: {exc}") from exc

    if kind == "literal":
        return target

    raise ConfigError(
        f"Unknown credential source '{source}' (use env:, file:, literal: or prompt)"
    )
