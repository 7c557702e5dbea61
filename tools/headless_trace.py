"""Drive a creature along a scripted pointer path and check the solver.

No Qt imports: the creature is resolved frame by frame exactly as the app
would, and after every frame the spine and limb chains are measured.

Usage::

    python -m tools.headless_trace --creature lizard --path circle --frames 600
    python -m tools.headless_trace --creature fish --path reverse
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from critters.core.angle_math import relative_angle_diff
from critters.core.chain import Chain
from critters.creatures.config import load_creature_configs
from critters.coordination.scene_builder import build_creatures

logger = logging.getLogger(__name__)

PATHS = ("circle", "figure8", "reverse")
CENTER = (640.0, 400.0)


def make_path(kind: str, frames: int, center=CENTER, radius: float = 300.0) -> np.ndarray:
    """Pointer positions, one row per frame."""
    t = np.linspace(0.0, 2.0 * math.pi, frames, endpoint=False)
    cx, cy = center
    if kind == "circle":
        return np.column_stack([cx + radius * np.cos(t), cy + radius * np.sin(t)])
    if kind == "figure8":
        return np.column_stack([cx + radius * np.sin(t), cy + radius * np.sin(t) * np.cos(t)])
    if kind == "reverse":
        # Out to the right for half the run, then straight back: a 180 degree turn
        half = frames // 2
        xs = np.concatenate([np.full(half, cx + radius), np.full(frames - half, cx - radius)])
        return np.column_stack([xs, np.full(frames, cy)])
    raise ValueError(f"Unknown path {kind!r}, expected one of {PATHS}")


@dataclass
class TraceReport:
    creature: str
    path: str
    frames: int
    max_link_error: float = 0.0     # spine, |distance - link_size|
    max_bend_excess: float = 0.0    # spine, radians beyond the angle constraint
    max_limb_anchor_error: float = 0.0
    nan_frames: int = 0
    steps: int = 0

    @property
    def ok(self) -> bool:
        return (self.nan_frames == 0 and self.max_link_error < 1e-6
                and self.max_bend_excess < 1e-9 and self.max_limb_anchor_error < 1e-9)


def link_error(chain: Chain) -> float:
    d = np.linalg.norm(np.diff(chain.joints, axis=0), axis=1)
    return float(np.max(np.abs(d - chain.link_size)))


def bend_excess(chain: Chain) -> float:
    a = chain.angles
    worst = max(abs(relative_angle_diff(a[i], a[i - 1])) for i in range(1, len(a)))
    return max(0.0, worst - chain.angle_constraint)


def trace(creature_name: str, path_kind: str, frames: int) -> TraceReport:
    configs = load_creature_configs()
    pointer_path = make_path(path_kind, frames)
    creatures = {c.name.lower(): c for c in build_creatures(CENTER, configs)}
    creature = creatures[creature_name.lower()]

    logger.info("Tracing %s along %s for %d frames", creature.name, path_kind, frames)
    report = TraceReport(creature.name, path_kind, frames)
    for pointer in pointer_path:
        creature.resolve(pointer)
        spine = creature.spine.chain
        if not np.all(np.isfinite(spine.joints)):
            report.nan_frames += 1
            continue
        report.max_link_error = max(report.max_link_error, link_error(spine))
        report.max_bend_excess = max(report.max_bend_excess, bend_excess(spine))
        for limb in creature.limbs:
            anchor = limb.anchor(creature.spine)
            err = float(np.linalg.norm(limb.chain.joints[-1] - anchor))
            report.max_limb_anchor_error = max(report.max_limb_anchor_error, err)
            if not np.all(np.isfinite(limb.chain.joints)):
                report.nan_frames += 1
    report.steps = getattr(creature, "steps_taken", 0)
    return report


def format_report(report: TraceReport) -> str:
    lines = [
        f"{report.creature} on {report.path} path, {report.frames} frames",
        f"  max link error     : {report.max_link_error:.3e}",
        f"  max bend excess    : {report.max_bend_excess:.3e} rad",
        f"  max limb anchor err: {report.max_limb_anchor_error:.3e}",
        f"  NaN frames         : {report.nan_frames}",
        f"  leg steps          : {report.steps}",
        f"  result             : {'OK' if report.ok else 'FAIL'}",
    ]
    return "\n".join(lines)


def main():
    import argparse
    parser = argparse.ArgumentParser(description="Headless creature solver trace")
    parser.add_argument("--creature", default="lizard", choices=["fish", "snake", "lizard"])
    parser.add_argument("--path", default="circle", choices=PATHS)
    parser.add_argument("--frames", type=int, default=600)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(message)s")
    report = trace(args.creature, args.path, args.frames)
    print(format_report(report))
    raise SystemExit(0 if report.ok else 1)


if __name__ == "__main__":
    main()
