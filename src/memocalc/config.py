"""User configuration (YAML).

Lookup order:
  --config PATH
  $MEMOCALC_CONFIG
  ~/.memocalc/config.yml

A missing default file means defaults. A path given explicitly must exist.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml


ENV_VAR = "MEMOCALC_CONFIG"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(RuntimeError):
    """Configuration file is unreadable or invalid."""


@dataclass(frozen=True)
class CalcConfig:
    prompt: str = "> "
    banner: bool = True
    log_file: Optional[Path] = None
    log_level: str = "INFO"


def default_config_path() -> Path:
    return Path.home() / ".memocalc" / "config.yml"


def _from_mapping(data: dict[str, Any], base_dir: Path) -> CalcConfig:
    defaults = CalcConfig()

    level = str(data.get("log_level", defaults.log_level)).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid log_level: {level}")

    prompt = data.get("prompt")
    if prompt is None:
        prompt = defaults.prompt
    elif not isinstance(prompt, str):
        raise ConfigError(f"Invalid prompt: {prompt!r}")

    banner = data.get("banner", defaults.banner)
    if not isinstance(banner, bool):
        raise ConfigError(f"Invalid banner: {banner!r} (expected true or false)")

    log_file = data.get("log_file")
    if log_file is not None:
        if not isinstance(log_file, str):
            raise ConfigError(f"Invalid log_file: {log_file!r}")
        log_file = Path(log_file).expanduser()
        if not log_file.is_absolute():
            log_file = base_dir / log_file

    return CalcConfig(
        prompt=prompt,
        banner=banner,
        log_file=log_file,
        log_level=level,
    )


def load_config(path: Path | None = None) -> CalcConfig:
    explicit = path is not None
    if path is None and os.environ.get(ENV_VAR):
        path = Path(os.environ[ENV_VAR])
        explicit = True
    if path is None:
        path = default_config_path()

    path = path.expanduser()
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return CalcConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    if data is None:
        return CalcConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {path}: expected a mapping")

    return _from_mapping(data, path.parent)


def configure_logging(cfg: CalcConfig) -> None:
    """Send log records to the configured file; nothing is logged otherwise."""
    if cfg.log_file is None:
        logger = logging.getLogger("memocalc")
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        return

    cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=cfg.log_file,
        level=getattr(logging, cfg.log_level),
        format=LOG_FORMAT,
    )
