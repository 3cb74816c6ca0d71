"""mascot-physics - Frame-stepped 2D physics for a draggable, throwable mascot."""
from __future__ import annotations

from mascot_physics.config import DEFAULT_PHYSICS_CONFIG, MascotConfig, PhysicsConfig
from mascot_physics.engine import PhysicsEngine
from mascot_physics.mascot import Mascot, MascotState
from mascot_physics.types import Body, Dimensions, Expression, SnapshotError, StepResult

__all__ = [
    "Body",
    "DEFAULT_PHYSICS_CONFIG",
    "Dimensions",
    "Expression",
    "Mascot",
    "MascotConfig",
    "MascotState",
    "PhysicsConfig",
    "PhysicsEngine",
    "SnapshotError",
    "StepResult",
]
