"""Preconditions settings (pydantic BaseModel) and YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import PreconditionError, PreconditionErrorCodes

_SECTION = "preconditions"


class PreconditionsConfig(BaseModel):
    """Settings of a PreconditionChecker."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # text rendered for a failure whose message is None
    absent_message: str = "null"
    log_failures: bool = True


def _read_yaml(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PreconditionError(
            code=PreconditionErrorCodes.CONFIG,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PreconditionError(
            code=PreconditionErrorCodes.CONFIG,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e


def load_config(path: Path) -> PreconditionsConfig:
    """Load a PreconditionsConfig from a YAML file.

    The settings may sit at the top level or under a ``preconditions:``
    section. An empty file yields the defaults.
    """
    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise PreconditionError(
            code=PreconditionErrorCodes.CONFIG,
            message=f"Config root must be a mapping: {path}",
        )
    if _SECTION in data:
        data = data[_SECTION] or {}
    try:
        return PreconditionsConfig.model_validate(data)
    except ValidationError as e:
        raise PreconditionError(
            code=PreconditionErrorCodes.CONFIG,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
