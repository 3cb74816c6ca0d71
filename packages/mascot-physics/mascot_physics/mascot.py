"""Mascot - drives one Body through drag, throw, toss, pet, and free flight.

The mascot is the frame driver and gesture layer around a PhysicsEngine.
A host (pygame loop, GUI timer, test) calls ``tick()`` once per frame and
forwards pointer events to ``drag_start`` / ``drag_move`` / ``drag_end``.
Physics is suspended while a drag is active and stops being stepped once the
body comes to rest; ``start()`` (or a throw/toss) resumes it.
"""
from __future__ import annotations

import dataclasses
import logging
import random
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from mascot_physics.config import MascotConfig, PhysicsConfig
from mascot_physics.engine import PhysicsEngine
from mascot_physics.types import Body, Dimensions, Expression, SnapshotError, StepResult

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


@dataclass
class MascotState:
    """What a renderer reads each frame."""

    x: float
    y: float
    angle: float = 0.0
    is_dragging: bool = False
    is_animating: bool = False
    expression: Expression = "idle"


@dataclass(frozen=True)
class _Sample:
    x: float
    y: float
    t: float


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


class Mascot:
    def __init__(
        self,
        container: Dimensions,
        *,
        config: MascotConfig | None = None,
        engine: PhysicsEngine | None = None,
        on_bounce: Callable[[], None] | None = None,
        on_throw: Callable[[], None] | None = None,
    ) -> None:
        self._config = config if config is not None else MascotConfig()
        self._engine = engine if engine is not None else PhysicsEngine()
        self._container = container
        self._size = Dimensions(self._config.width, self._config.height)
        self._on_bounce = on_bounce
        self._on_throw = on_throw

        self._body = Body(x=self._config.start_x, y=self._config.start_y)
        self._state = MascotState(x=self._body.x, y=self._body.y)

        self._grab_offset: tuple[float, float] | None = None
        self._samples: deque[_Sample] = deque(maxlen=self._config.sample_window)
        self._pet_until: float | None = None

    @property
    def body(self) -> Body:
        return self._body

    @property
    def engine(self) -> PhysicsEngine:
        return self._engine

    @property
    def state(self) -> MascotState:
        return self._state

    @property
    def config(self) -> MascotConfig:
        return self._config

    @property
    def container(self) -> Dimensions:
        return self._container

    @property
    def size(self) -> Dimensions:
        return self._size

    def resize(self, width: float, height: float) -> None:
        self._container = Dimensions(width, height)

    # ── Animation ──────────────────────────────────────────────

    def start(self) -> None:
        if not self._state.is_animating and not self._state.is_dragging:
            self._state.is_animating = True

    def tick(self, now: float | None = None) -> StepResult | None:
        """Advance one frame. Returns None when no physics step ran."""
        if now is None:
            now = time.monotonic()
        if self._pet_until is not None and now >= self._pet_until:
            self._pet_until = None
            self._state.expression = "idle"

        state = self._state
        if state.is_dragging or not state.is_animating:
            return None

        result = self._engine.step(self._body, self._container, self._size)
        if result.bounced and self._on_bounce is not None:
            self._on_bounce()

        at_rest = self._engine.is_at_rest(self._body)
        state.x = self._body.x
        state.y = self._body.y
        state.angle = self._body.angle
        state.is_animating = not at_rest
        if result.bounced:
            state.expression = "dizzy"
        elif at_rest:
            state.expression = "idle"
            logger.debug("mascot settled at (%.1f, %.1f)", state.x, state.y)
        return result

    # ── Gestures ───────────────────────────────────────────────

    def drag_start(self, pointer_x: float, pointer_y: float) -> None:
        """Grab the mascot. Pointer coordinates are container-relative."""
        self._grab_offset = (pointer_x - self._body.x, pointer_y - self._body.y)
        self._samples.clear()
        self._state.is_dragging = True
        self._state.expression = "surprised"

    def drag_move(
        self, pointer_x: float, pointer_y: float, now: float | None = None
    ) -> None:
        if self._grab_offset is None:
            return
        if now is None:
            now = time.monotonic()

        x = pointer_x - self._grab_offset[0]
        y = pointer_y - self._grab_offset[1]
        self._engine.apply_drag(self._body, x, y)
        self._samples.append(_Sample(x, y, now))

        self._state.x = x
        self._state.y = y
        self._state.angle = 0.0

    def drag_end(self) -> None:
        """Release the mascot, throwing it with the recent pointer velocity."""
        if self._grab_offset is None:
            return
        self._grab_offset = None
        self._state.is_dragging = False

        if len(self._samples) >= 2:
            prev, last = self._samples[-2], self._samples[-1]
            elapsed_ms = (last.t - prev.t) * 1000.0
            if elapsed_ms > 0:
                self._release(
                    (last.x - prev.x) / elapsed_ms,
                    (last.y - prev.y) / elapsed_ms,
                )

        self.start()

    def _release(self, speed_x: float, speed_y: float) -> None:
        cfg = self._config
        body = self._body
        body.vx = _clamp(speed_x * cfg.throw_scale, cfg.max_throw_speed)
        body.vy = _clamp(speed_y * cfg.throw_scale, cfg.max_throw_speed)
        body.angular_velocity = (self._engine.rng.random() - 0.5) * cfg.release_spin

        if abs(body.vx) > cfg.throw_threshold or abs(body.vy) > cfg.throw_threshold:
            logger.debug("mascot thrown with velocity (%.2f, %.2f)", body.vx, body.vy)
            self._state.expression = "happy"
            if self._on_throw is not None:
                self._on_throw()

    def toss(self) -> None:
        """Throw the mascot up and to the right with a random angle and power."""
        rng = self._engine.rng
        lo_angle, hi_angle = self._config.toss_angle
        lo_power, hi_power = self._config.toss_power
        angle = lo_angle + rng.random() * (hi_angle - lo_angle)
        power = lo_power + rng.random() * (hi_power - lo_power)

        self._engine.throw_object(self._body, power, angle)
        logger.debug("mascot tossed at %.1f degrees, power %.1f", angle, power)
        self._state.expression = "happy"
        self.start()

    def pet(self, now: float | None = None) -> None:
        if now is None:
            now = time.monotonic()
        self._state.expression = "love"
        self._pet_until = now + self._config.pet_duration

    # ── Snapshot ───────────────────────────────────────────────

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible capture of body, physics config, state, and RNG."""
        return {
            "version": _SNAPSHOT_VERSION,
            "body": dataclasses.asdict(self._body),
            "physics": dataclasses.asdict(self._engine.config),
            "state": dataclasses.asdict(self._state),
            "rng_state": _serialize_rng_state(self._engine.rng.getstate()),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        try:
            body = Body(**data["body"])
            physics = PhysicsConfig(**data["physics"])
            state = MascotState(**data["state"])
            rng_state = _deserialize_rng_state(data["rng_state"])
            # setstate is the only full check of the state vector.
            random.Random().setstate(rng_state)
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed snapshot: {exc}") from exc

        self._engine.update_config(**dataclasses.asdict(physics))
        self._engine.rng.setstate(rng_state)
        self._body = body
        self._state = state
        self._grab_offset = None
        self._samples.clear()
        self._pet_until = None
        if state.is_dragging:
            # A drag cannot survive a restore; hand the body back to physics.
            state.is_dragging = False
            state.is_animating = True
        logger.debug("mascot restored at (%.1f, %.1f)", body.x, body.y)


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    """Convert Random.getstate() tuple to a JSON-compatible list.

    The state (version, internalstate, gauss_next) is CPython's Mersenne
    Twister layout. It round-trips across CPython versions but a snapshot
    taken on another implementation (PyPy, etc.) may not restore here.
    """
    version, internalstate, gauss_next = state
    return [version, list(internalstate), gauss_next]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    """Convert a serialized list back to a Random.setstate() tuple."""
    version, internalstate, gauss_next = data
    return (version, tuple(internalstate), gauss_next)
