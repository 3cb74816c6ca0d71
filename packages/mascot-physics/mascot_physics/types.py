"""Body state, dimensions, and step results shared across the package."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Expression = Literal["idle", "happy", "surprised", "dizzy", "love"]


@dataclass
class Body:
    """Kinematic state of the mascot. Mutated in place by the engine.

    Position is the top-left corner of the bounding box, in container pixels.
    Velocities are per simulated step. ``angle`` accumulates without wrapping.
    """

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    angle: float = 0.0
    angular_velocity: float = 0.0


@dataclass(frozen=True)
class Dimensions:
    """Width and height in pixels, measured by the driver each frame."""

    width: float
    height: float


@dataclass(frozen=True)
class StepResult:
    bounced: bool


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, missing fields)."""
