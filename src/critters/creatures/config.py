"""Creature tuning parameters with JSON overrides.

Every creature reads its geometry and motion constants from a dataclass.
The defaults reproduce the stock creatures; ``assets/config/creatures.json``
may override any field.  Angle fields are radians; a JSON key with a
``_deg`` suffix (e.g. ``"angle_constraint_deg": 22.5``) is accepted as
degrees.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from critters.constants import CONFIG_DIR, CREATURE_CONFIG_NAME
from critters.core.chain import InvalidConfiguration
from critters.core.config_loader import load_config

logger = logging.getLogger(__name__)

Color = tuple[int, ...]


@dataclass
class LimbConfig:
    """One leg: where it hangs off the spine and how it steps."""
    body_index: int
    side: int                   # +1 right, -1 left (relative to heading)
    foot_angle: float           # angular offset of the ideal foot from the spine heading
    link_size: float
    joint_count: int = 3
    reach_offset: float = 80.0  # ideal foot distance beyond the body surface
    shoulder_offset: float = -20.0
    step_threshold: float = 200.0
    foot_blend: float = 0.4
    elbow_bias: float = 0.0     # drawing only: perpendicular push of the elbow


def _default_lizard_limbs() -> list[LimbConfig]:
    return [
        LimbConfig(body_index=3, side=1, foot_angle=math.pi / 4, link_size=52),
        LimbConfig(body_index=3, side=-1, foot_angle=math.pi / 4, link_size=52),
        LimbConfig(body_index=7, side=1, foot_angle=math.pi / 3, link_size=36, elbow_bias=-30.0),
        LimbConfig(body_index=7, side=-1, foot_angle=math.pi / 3, link_size=36, elbow_bias=30.0),
    ]


@dataclass
class FishConfig:
    joint_count: int = 12
    link_size: float = 64.0
    angle_constraint: float = math.pi / 8
    body_width: list[float] = field(
        default_factory=lambda: [68, 81, 84, 83, 77, 64, 51, 38, 32, 19])
    body_color: Color = (58, 124, 165)
    fin_color: Color = (129, 195, 215)
    step: float = 16.0
    max_turn: float = math.pi / 6
    dead_zone: float = 25.0


@dataclass
class SnakeConfig:
    joint_count: int = 48
    link_size: float = 64.0
    angle_constraint: float = math.pi / 8
    # First entries are explicit; the rest taper as ``taper_base - i``
    head_widths: list[float] = field(default_factory=lambda: [76, 80])
    taper_base: float = 64.0
    body_color: Color = (172, 57, 49)
    step: float = 8.0


@dataclass
class LizardConfig:
    joint_count: int = 14
    link_size: float = 64.0
    angle_constraint: float = math.pi / 8
    body_width: list[float] = field(
        default_factory=lambda: [52, 58, 40, 60, 68, 71, 65, 50, 28, 15, 11, 9, 7, 7])
    body_color: Color = (82, 121, 111)
    step: float = 12.0
    limbs: list[LimbConfig] = field(default_factory=_default_lizard_limbs)


@dataclass
class CreatureConfigs:
    fish: FishConfig = field(default_factory=FishConfig)
    snake: SnakeConfig = field(default_factory=SnakeConfig)
    lizard: LizardConfig = field(default_factory=LizardConfig)


def _coerce(name: str, default: Any, value: Any) -> Any:
    if isinstance(default, bool):
        return bool(value)
    if isinstance(default, int):
        return int(value)
    if isinstance(default, float):
        return float(value)
    if isinstance(default, tuple):
        return tuple(int(c) for c in value)
    if isinstance(default, list) and name != "limbs":
        return [float(v) for v in value]
    return value


def config_from_dict(cls, data: dict[str, Any]):
    """Build a config dataclass from *data*, defaults filling the gaps."""
    obj = cls()
    known = {f.name for f in fields(cls)}
    for key, value in data.items():
        name = key
        if key.endswith("_deg") and key[:-4] in known:
            name = key[:-4]
            value = math.radians(value)
        if name not in known:
            logger.debug("Ignoring unknown %s key %r", cls.__name__, key)
            continue
        try:
            if name == "limbs":
                value = [limb_from_dict(d) for d in value]
            else:
                value = _coerce(name, getattr(obj, name), value)
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"{cls.__name__}.{name}: {e}") from e
        setattr(obj, name, value)
    return obj


def limb_from_dict(data: dict[str, Any]) -> LimbConfig:
    values = dict(data)
    if "foot_angle_deg" in values:
        values["foot_angle"] = math.radians(values.pop("foot_angle_deg"))
    try:
        return LimbConfig(
            body_index=int(values.pop("body_index")),
            side=1 if int(values.pop("side")) >= 0 else -1,
            foot_angle=float(values.pop("foot_angle")),
            link_size=float(values.pop("link_size")),
            **{k: (int(v) if k == "joint_count" else float(v)) for k, v in values.items()},
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidConfiguration(f"Bad limb config {data!r}: {e}") from e


def load_creature_configs(config_dir: Optional[Path] = None) -> CreatureConfigs:
    """Load creature overrides.  Falls back to defaults if the file is missing or unreadable."""
    configs = CreatureConfigs()
    try:
        data = load_config(CREATURE_CONFIG_NAME, config_dir or CONFIG_DIR)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Creature config unavailable, using defaults: %s", e)
        return configs

    for name, cls in (("fish", FishConfig), ("snake", SnakeConfig), ("lizard", LizardConfig)):
        section = data.get(name)
        if section:
            setattr(configs, name, config_from_dict(cls, section))
    logger.info("Loaded creature config (%s)", ", ".join(k for k in data if not k.startswith("_")))
    return configs
