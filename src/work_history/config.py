"""Application configuration loaded from work_history.yaml."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TypeVar

import yaml

CONFIG_ENV_VAR = "WORK_HISTORY_CONFIG"
DEFAULT_CONFIG_NAME = "work_history.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ReportConfig:
    default_output: str = "formatted_work_history.txt"
    input_encoding: str = "utf-8-sig"
    output_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not self.default_output.strip():
            raise ValueError("default_output must not be empty")
        for name in ("input_encoding", "output_encoding"):
            value = getattr(self, name)
            try:
                codecs.lookup(value)
            except LookupError:
                raise ValueError(f"{name}: unknown encoding {value!r}") from None

    @property
    def resolved_default_output(self) -> Path:
        return Path(self.default_output).expanduser()


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}")


@dataclass(frozen=True)
class AppConfig:
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_Section = TypeVar("_Section", ReportConfig, LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    Without an explicit path, ``$WORK_HISTORY_CONFIG`` is used if set,
    otherwise ``work_history.yaml`` in the current directory if present.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
        else:
            candidate = Path.cwd() / DEFAULT_CONFIG_NAME
            if candidate.exists():
                path = candidate

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            try:
                raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"{p}: invalid YAML: {exc}") from exc
            if not isinstance(raw, dict):
                raise ValueError(f"{p}: top level must be a mapping, got {type(raw).__name__}")

    return AppConfig(
        report=_load_section(raw, "report", ReportConfig),
        logging=_load_section(raw, "logging", LoggingConfig),
    )


def _load_section(raw: dict, name: str, section_cls: type[_Section]) -> _Section:
    values = raw.get(name) or {}
    if not isinstance(values, dict):
        raise ValueError(f"{name}: section must be a mapping, got {type(values).__name__}")
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(str(key) for key in values if key not in known)
    if unknown:
        raise ValueError(f"{name}: unknown key(s) {', '.join(unknown)}")
    for key, value in values.items():
        if not isinstance(value, str):
            raise ValueError(f"{name}.{key}: expected a string, got {type(value).__name__}")
    return section_cls(**values)
