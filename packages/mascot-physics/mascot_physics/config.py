"""Configuration dataclasses for the physics kernel and the mascot driver."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsConfig:
    """Immutable tuning for :class:`~mascot_physics.engine.PhysicsEngine`.

    Attributes:
        gravity: Added to ``vy`` every step.
        friction: Multiplier applied to ``vx`` and ``vy`` every step.
        bounce_damping: Multiplier applied to reflected velocity on impact.
        angular_damping: Multiplier applied to ``angular_velocity`` every step.
        ground_level: Inset of the resting surface from the container bottom.

    Ranges are not checked. A damping factor above 1 amplifies motion.
    """

    gravity: float = 0.5
    friction: float = 0.98
    bounce_damping: float = 0.6
    angular_damping: float = 0.95
    ground_level: float = 0.0

    def merged(self, **overrides: float) -> PhysicsConfig:
        """Return a copy with only the supplied fields replaced.

        Raises TypeError for a name that is not a config field.
        """
        if not overrides:
            return self
        return dataclasses.replace(self, **overrides)


DEFAULT_PHYSICS_CONFIG = PhysicsConfig()


@dataclass(frozen=True)
class MascotConfig:
    """Immutable settings for the gesture and animation layer.

    Attributes:
        width: Mascot bounding box width in pixels.
        height: Mascot bounding box height in pixels.
        start_x: Initial top-left x.
        start_y: Initial top-left y.
        throw_scale: Multiplier from pointer speed (px/ms) to body velocity.
        max_throw_speed: Per-axis clamp on release velocity.
        throw_threshold: Release speed on either axis that counts as a throw.
        release_spin: Width of the uniform spin range assigned on release.
        sample_window: Number of pointer samples kept while dragging.
        pet_duration: Seconds the "love" expression lasts after a pet.
        toss_angle: (low, high) launch angle in degrees for a toss.
        toss_power: (low, high) launch power for a toss.
    """

    width: float = 120.0
    height: float = 120.0
    start_x: float = 100.0
    start_y: float = 100.0
    throw_scale: float = 20.0
    max_throw_speed: float = 30.0
    throw_threshold: float = 5.0
    release_spin: float = 20.0
    sample_window: int = 5
    pet_duration: float = 2.0
    toss_angle: tuple[float, float] = (-60.0, -30.0)
    toss_power: tuple[float, float] = (15.0, 25.0)
