# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Ordertally Contributors
#
# This file is part of Ordertally.
#
# Ordertally is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Ordertally is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from ordertally.domain.money import DEFAULT_DECIMAL_PLACES
from ordertally.store.update import DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "ordertally.yaml"
OUTPUT_FORMATS = ("text", "json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    def __init__(self, code: str, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(frozen=True)
class TallyConfig:
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    output_format: str = "text"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        _require_int(self.decimal_places, "decimal_places", minimum=0)
        _require_int(self.max_attempts, "max_attempts", minimum=1)
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                code="invalid_output_format",
                message=f"'output_format' must be one of {', '.join(OUTPUT_FORMATS)}.",
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(code="invalid_log_level", message=f"'log_level' must be one of {', '.join(LOG_LEVELS)}.")

    def with_overrides(self, **overrides: Any) -> "TallyConfig":
        """Return a copy with every non-None override applied (CLI flags win over the file)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _require_int(value: Any, name: str, *, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(code=f"invalid_{name}", message=f"'{name}' must be an integer >= {minimum}.")


def load_config(path: Path | str | None = None) -> TallyConfig:
    """
    Load configuration from a YAML mapping.

    With no path, `ordertally.yaml` in the current directory is used if it
    exists; otherwise defaults apply.
    """
    if path is None:
        candidate = Path(DEFAULT_CONFIG_FILE)
        if not candidate.exists():
            return TallyConfig()
        path = candidate

    path = Path(path)
    if not path.exists():
        raise ConfigError(code="config_not_found", message=f"Config file does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(code="unreadable_config", message=f"Could not parse {path.name}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(code="invalid_config", message="Config root must be a mapping.")

    known = {f.name for f in fields(TallyConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(
            code="unknown_config_keys",
            message=f"Unknown config keys: {', '.join(unknown)}",
            details={"known": sorted(known)},
        )

    logger.debug("Loaded config from %s", path)
    return TallyConfig(**data)
