"""YAML-backed configuration for profile planning and closed-loop runs.

``profile.yaml`` next to this module holds the physical limits of the axis,
the feedback gains and the simulation settings. Every value has a default,
so a missing file or a missing key is not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

CONFIG_DIR = Path(__file__).resolve().parent

log = logging.getLogger(__name__)


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping; an absent or unreadable file yields ``{}``."""
    if not path.exists():
        log.info("configuration %s not found, using defaults", path.name)
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        log.warning("could not read %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("%s does not contain a mapping, ignoring it", path)
        return {}
    log.debug("loaded %s: %s", path.name, data)
    return data


@dataclass
class ProfileConfig:
    """Limits of the axis used to plan profiles."""

    j_max: float = 500000.0     # [mm/s^3]
    a_max: float = 3600.0       # [mm/s^2]
    v_sat: float = 720.0        # [mm/s]
    t_interval: float = 0.001   # sampling step of the CSV dump [s]


@dataclass
class ControllerConfig:
    """First-order plant model K/(T1 s + 1) and PID gains."""

    K: float = 1.0
    T1: float = 0.1
    kp: float = 10.0
    ki: float = 0.0
    kd: float = 0.0


@dataclass
class SimulationConfig:
    dt: float = 0.001       # control period [s]
    method: str = "euler"   # "euler" or "rk4"


@dataclass
class AppConfig:
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    controller: ControllerConfig = field(default_factory=ControllerConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)


def _section(data: Dict[str, Any], name: str, defaults) -> Any:
    """Build a dataclass section, casting each value to the default's type."""
    raw = data.get(name) or {}
    values = {}
    for key, default in vars(defaults).items():
        if key in raw:
            values[key] = type(default)(raw[key])
        else:
            log.debug("%s.%s missing, default %r", name, key, default)
            values[key] = default
    unknown = set(raw) - set(values)
    if unknown:
        log.warning("unknown keys in section %s: %s", name, sorted(unknown))
    return type(defaults)(**values)


def load_config(path: Path | None = None) -> AppConfig:
    """Load ``profile.yaml`` (or *path*) into an :class:`AppConfig`."""
    path = Path(path) if path is not None else CONFIG_DIR / "profile.yaml"
    data = _read_yaml(path)
    return AppConfig(
        profile=_section(data, "profile", ProfileConfig()),
        controller=_section(data, "controller", ControllerConfig()),
        simulation=_section(data, "simulation", SimulationConfig()),
    )


__all__ = [
    "AppConfig",
    "ControllerConfig",
    "ProfileConfig",
    "SimulationConfig",
    "load_config",
]
