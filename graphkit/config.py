"""Configuration loader: graphkit.yml parsing and defaults.

A bad config never stops a run.  Every failure is logged as a warning and
the defaults from GraphKitConfig are used instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from graphkit.logger import logger
from graphkit.model import GraphKitConfig


class _ConfigUnusable(Exception):
    """Internal: the config file cannot be used; message says why."""


def load_config(path: Path | None = None) -> GraphKitConfig:
    """Load config from YAML file, or return defaults if no path given."""
    if path is None:
        logger.debug("No config file provided, using defaults")
        return GraphKitConfig()

    try:
        raw = _read_mapping(Path(path))
        return GraphKitConfig.model_validate(raw)
    except ValidationError as e:
        logger.warning("Invalid config in %s: %s, using defaults", path, e)
    except _ConfigUnusable as e:
        logger.warning("%s, using defaults", e)
    return GraphKitConfig()


def _read_mapping(path: Path) -> dict[str, Any]:
    """YAML mapping from *path*; an empty file reads as ``{}``."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise _ConfigUnusable(f"Config file not found: {path}") from None
    except OSError as e:
        raise _ConfigUnusable(f"Cannot read config file {path}: {e}") from None
    except yaml.YAMLError as e:
        raise _ConfigUnusable(f"Malformed YAML in {path}: {e}") from None

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise _ConfigUnusable(f"Config file {path} is not a YAML mapping")
    return raw
