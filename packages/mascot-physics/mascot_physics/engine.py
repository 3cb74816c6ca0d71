"""PhysicsEngine - per-frame gravity, damping, boundary bounce, and throws.

Every operation mutates the caller's Body in place and nothing else. The
engine keeps no reference to a body between calls and validates no input:
NaN, infinite velocities, or a container smaller than the body produce
literal (possibly negative) results rather than errors.
"""
from __future__ import annotations

import logging
import math
import os
import random

from mascot_physics.config import DEFAULT_PHYSICS_CONFIG, PhysicsConfig
from mascot_physics.types import Body, Dimensions, StepResult

logger = logging.getLogger(__name__)

# Impact speed above which a ground contact bounces instead of settling.
_BOUNCE_SPEED = 1.0
# Spin retained per frame while resting on the ground.
_GROUND_SPIN_DECAY = 0.9
_IMPACT_SPIN = 10.0
_THROW_SPIN = 20.0


class PhysicsEngine:
    def __init__(
        self,
        config: PhysicsConfig | None = None,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
        **overrides: float,
    ) -> None:
        base = config if config is not None else DEFAULT_PHYSICS_CONFIG
        self._config = base.merged(**overrides)

        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng

    @property
    def config(self) -> PhysicsConfig:
        return self._config

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def seed(self) -> int | None:
        """Seed the RNG was built from, or None when an RNG was injected."""
        return self._seed

    def update_config(self, **overrides: float) -> None:
        """Merge overrides into the current config. Applies from the next call."""
        self._config = self._config.merged(**overrides)
        logger.debug("physics config updated: %s", self._config)

    # ── Forces and integration ─────────────────────────────────

    def apply_gravity(self, body: Body) -> None:
        body.vy += self._config.gravity

    def apply_friction(self, body: Body) -> None:
        cfg = self._config
        body.vx *= cfg.friction
        body.vy *= cfg.friction
        body.angular_velocity *= cfg.angular_damping

    def update_position(self, body: Body, delta_time: float = 1.0) -> None:
        body.x += body.vx * delta_time
        body.y += body.vy * delta_time
        body.angle += body.angular_velocity * delta_time

    # ── Boundaries ─────────────────────────────────────────────

    def _impact_spin(self) -> float:
        return (self._rng.random() - 0.5) * _IMPACT_SPIN

    def handle_ground_collision(
        self, body: Body, container_height: float, body_height: float
    ) -> bool:
        """Clamp to the ground line, then bounce or settle.

        Returns True only for a bounce. A contact at or below the bounce speed
        settles: vertical velocity is zeroed and residual spin decays.
        """
        ground_y = container_height - self._config.ground_level - body_height
        # Written as a negated >= so a NaN position never counts as contact.
        if not body.y >= ground_y:
            return False

        body.y = ground_y
        if abs(body.vy) > _BOUNCE_SPEED:
            body.vy = -body.vy * self._config.bounce_damping
            body.angular_velocity = self._impact_spin()
            return True

        body.vy = 0.0
        body.angular_velocity *= _GROUND_SPIN_DECAY
        return False

    def handle_wall_collision(
        self, body: Body, container_width: float, body_width: float
    ) -> bool:
        """Bounce off the left wall, then the right wall. No settle branch.

        The checks are independent: when the body is wider than the container
        the right wall still fires after a left-wall clamp.
        """
        damping = self._config.bounce_damping
        bounced = False

        if body.x <= 0:
            body.x = 0.0
            body.vx = abs(body.vx) * damping
            body.angular_velocity = self._impact_spin()
            bounced = True

        right = container_width - body_width
        if body.x >= right:
            body.x = right
            body.vx = -abs(body.vx) * damping
            body.angular_velocity = self._impact_spin()
            bounced = True

        return bounced

    # ── Gestures ───────────────────────────────────────────────

    def apply_impulse(self, body: Body, impulse_x: float, impulse_y: float) -> None:
        body.vx += impulse_x
        body.vy += impulse_y

    def apply_drag(self, body: Body, x: float, y: float) -> None:
        """Teleport the body and kill its motion. Angle is left as is."""
        body.x = x
        body.y = y
        body.vx = 0.0
        body.vy = 0.0
        body.angular_velocity = 0.0

    def throw_object(self, body: Body, throw_power: float, angle_degrees: float) -> None:
        """Launch along a screen-space angle: 0 is right, +90 is down, -90 is up."""
        radians = angle_degrees * math.pi / 180
        body.vx = math.cos(radians) * throw_power
        body.vy = math.sin(radians) * throw_power
        body.angular_velocity = (self._rng.random() - 0.5) * _THROW_SPIN

    def is_at_rest(self, body: Body, threshold: float = 0.1) -> bool:
        return (
            abs(body.vx) < threshold
            and abs(body.vy) < threshold
            and abs(body.angular_velocity) < threshold
        )

    # ── Composite ──────────────────────────────────────────────

    def step(self, body: Body, container: Dimensions, size: Dimensions) -> StepResult:
        """Advance one frame: gravity → friction → position → ground → walls.

        Collisions resolve after integration, so a fast body may cross a
        boundary within the frame before it is clamped back.
        """
        self.apply_gravity(body)
        self.apply_friction(body)
        self.update_position(body)
        hit_ground = self.handle_ground_collision(body, container.height, size.height)
        hit_wall = self.handle_wall_collision(body, container.width, size.width)
        return StepResult(bounced=hit_ground or hit_wall)
