"""
YAML-backed settings for the graph store and the triangle estimator.

A settings file holds two optional sections whose keys mirror the
dataclass fields:

    store:
      initial_capacity: 4000000
      auto_create_vertices: true
    estimator:
      tie_break: vertex_id

Missing sections and keys keep their defaults; anything unknown is
rejected so typos do not pass silently.
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from .estimator.models import EstimationConfig
from .store.base import InvalidArgumentError, StoreConfig

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Combined configuration for one store and its estimator."""

    store: StoreConfig = field(default_factory=StoreConfig)
    estimator: EstimationConfig = field(default_factory=EstimationConfig)


_SECTIONS = {
    "store": StoreConfig,
    "estimator": EstimationConfig,
}


def load_config(path: Path | str) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Path to the settings file

    Returns:
        Settings with file values applied over the defaults

    Raises:
        InvalidArgumentError: If the file has unknown sections or keys,
            or values the config dataclasses reject
        OSError: If the file cannot be read
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(
            f"{path}: expected a mapping at top level, got {type(data).__name__}"
        )

    unknown = set(data) - set(_SECTIONS)
    if unknown:
        raise InvalidArgumentError(f"{path}: unknown section(s) {sorted(unknown)}")

    sections = {}
    for name, config_cls in _SECTIONS.items():
        sections[name] = _build_section(path, name, config_cls, data.get(name))

    logger.debug("Loaded settings from %s: %s", path, sections)
    return Settings(**sections)


def _build_section(path, name: str, config_cls: type, values):
    if values is None:
        return config_cls()
    if not isinstance(values, dict):
        raise InvalidArgumentError(f"{path}: section '{name}' must be a mapping")

    allowed = {f.name for f in fields(config_cls)}
    unknown = set(values) - allowed
    if unknown:
        raise InvalidArgumentError(
            f"{path}: unknown key(s) {sorted(unknown)} in section '{name}'"
        )
    return config_cls(**values)
