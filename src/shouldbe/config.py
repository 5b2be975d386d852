from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from shouldbe.formatting import formatters
from shouldbe.testable import set_label_provider

logger = logging.getLogger(__name__)


def import_object(path: str) -> Any:
    """Resolve a dotted ``module.attr`` path, e.g. ``decimal.Decimal``."""
    module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"'{path}' is not a dotted 'module.attribute' path")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module '{module_name}' for '{path}': {e}") from e
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise ValueError(f"Module '{module_name}' has no attribute '{attr}'") from e


class ShouldbeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_label: str = "subject"
    formatters: dict[str, str] = {}
    freeze_formatters: bool = True

    @field_validator("default_label")
    @classmethod
    def default_label_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_label must not be empty")
        return v

    @field_validator("formatters")
    @classmethod
    def formatters_must_resolve(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate every type and formatter path up front.

        Raises ValueError listing every bad entry so the user can fix them
        all at once.
        """
        problems: list[str] = []
        for type_path, func_path in v.items():
            try:
                target = import_object(type_path)
                if not isinstance(target, type):
                    problems.append(f"  {type_path}: not a type")
            except ValueError as e:
                problems.append(f"  {type_path}: {e}")
            try:
                func = import_object(func_path)
                if not callable(func):
                    problems.append(f"  {func_path}: not callable")
            except ValueError as e:
                problems.append(f"  {func_path}: {e}")

        if problems:
            details = "\n".join(problems)
            raise ValueError(f"Invalid formatter entries:\n{details}")
        return v


def load_config(path: Path) -> ShouldbeConfig:
    """Load and validate a shouldbe config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(raw).__name__}")

    return ShouldbeConfig(**raw)


def apply_config(config: ShouldbeConfig) -> None:
    """Install *config* process-wide. Call once at startup, before any assertion runs."""
    for type_path, func_path in config.formatters.items():
        formatters.register(import_object(type_path), import_object(func_path))

    label = config.default_label
    set_label_provider(lambda _subject: label)

    if config.freeze_formatters:
        formatters.freeze()

    logger.info(
        f"Applied config: default_label={label!r}, "
        f"{len(config.formatters)} formatter(s), frozen={formatters.frozen}"
    )
