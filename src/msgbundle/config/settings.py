"""Settings models shared by the resolver and scanner command-line tools."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("msgbundle.yaml")
DEFAULT_INCLUDE_EXTENSIONS: tuple[str, ...] = (
    ".swift",
    ".java",
    ".h",
    ".m",
    ".plist",
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".html",
    ".xhtml",
)
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ResolverSettings(ImmutableModel):
    """Options for the message resolver."""

    base_name: str = "messages"
    catalog_dir: Path | None = None

    @field_validator("base_name")
    @classmethod
    def _require_base_name(cls, value: str) -> str:
        if not value.strip():
            raise ConfigurationError("base_name must be a non-empty string")
        return value.strip()


class ScanSettings(ImmutableModel):
    """Options for the unused message key scanner."""

    include_extensions: tuple[str, ...] = DEFAULT_INCLUDE_EXTENSIONS
    max_workers: int = Field(default=4, ge=1)

    @field_validator("include_extensions", mode="before")
    @classmethod
    def _normalise_extensions(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)) or not value:
            raise ConfigurationError("include_extensions must be a non-empty list")

        extensions: list[str] = []
        for entry in value:
            text = str(entry).strip().lower()
            if not text:
                raise ConfigurationError("include_extensions entries must be non-empty")
            extensions.append(text if text.startswith(".") else f".{text}")
        return tuple(extensions)


class Settings(ImmutableModel):
    """Top-level settings document."""

    log_level: str = "WARNING"
    resolver: ResolverSettings = ResolverSettings()
    scan: ScanSettings = ScanSettings()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{value}'")
        return level


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise ConfigurationError(f"Invalid YAML in {path}: {error}") from error
    except (OSError, UnicodeDecodeError) as error:
        raise ConfigurationError(f"Unable to read configuration file {path}: {error}") from error
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _parse_positive_int(value: str | None, *, env: str) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring invalid value for %s: %s", env, value)
        return None
    if parsed <= 0:
        logger.warning("Ignoring non-positive value for %s: %s", env, value)
        return None
    return parsed


def _apply_environment(raw: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Overlay ``MSGBUNDLE_*`` environment variables onto raw settings."""

    merged = dict(raw)

    log_level = environ.get("MSGBUNDLE_LOG_LEVEL")
    if log_level and log_level.strip():
        if log_level.strip().upper() in _LOG_LEVELS:
            merged["log_level"] = log_level
        else:
            logger.warning("Ignoring invalid value for MSGBUNDLE_LOG_LEVEL: %s", log_level)

    catalog_dir = environ.get("MSGBUNDLE_CATALOG_DIR")
    if catalog_dir and catalog_dir.strip():
        resolver = dict(merged.get("resolver") or {})
        resolver["catalog_dir"] = Path(catalog_dir).expanduser()
        merged["resolver"] = resolver

    workers = _parse_positive_int(
        environ.get("MSGBUNDLE_SCAN_WORKERS"), env="MSGBUNDLE_SCAN_WORKERS"
    )
    if workers is not None:
        scan = dict(merged.get("scan") or {})
        scan["max_workers"] = workers
        merged["scan"] = scan

    return merged


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from ``path`` (or ``msgbundle.yaml``) plus the environment.

    An explicitly requested file must exist; the implicit default file is
    optional.
    """

    environ = os.environ if environ is None else environ

    raw: dict[str, Any] = {}
    if path is not None:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        raw = _load_yaml(path)
    elif DEFAULT_CONFIG_FILE.is_file():
        raw = _load_yaml(DEFAULT_CONFIG_FILE)

    try:
        return Settings.model_validate(_apply_environment(raw, environ))
    except ValidationError as error:
        raise ConfigurationError(f"Configuration validation failed: {error}") from error


def configure_logging(settings: Settings) -> None:
    """Route log records to stderr at the configured level."""

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = [
    "ConfigurationError",
    "DEFAULT_INCLUDE_EXTENSIONS",
    "ResolverSettings",
    "ScanSettings",
    "Settings",
    "configure_logging",
    "load_settings",
]
