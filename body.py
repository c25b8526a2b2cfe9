# body.py
"""
The circular bodies of the carrom demo and the arena they are drawn in.

A Body owns its position and velocity, advances itself once per frame
against the rest of the bodies, and carries the drag gesture that lets the
user flick it.
"""
import logging
import math
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from collision import overlaps, resolve_collision
from vector import distance
from constants import (
    ENERGY_LOSS, IMPULSE_DIVISOR, DEFAULT_MASS, DEFAULT_FRICTION,
    ARENA_RADIUS_RATIO, MAX_PLACEMENT_ATTEMPTS,
    BODY_IDLE_COLOR, BODY_SELECTED_COLOR, BODY_RELEASED_COLOR
)

# --- Data Contracts ---
#
# class Body:
#   - __init__(self, x, y, radius, velocity=(0, 0), mass=1.0, friction=0.6)
#     - Invariants: radius > 0, mass > 0, 0 < friction <= 1.
#       position and velocity are float64 arrays of shape (2,).
#
#   - update(self, bodies, width, height, energy_loss) -> None:
#     - Side Effects: May change the velocity of self and of any overlapping
#       body, then moves self by velocity * friction.
#
#   - begin_drag(self, point) -> bool / release(self, point) -> Optional[ndarray]:
#     - Invariants: At most one drag is active per body. A drag produces
#       exactly one impulse, on release.


def drag_impulse(origin: Sequence[float], release: Sequence[float], mass: float,
                 divisor: float = IMPULSE_DIVISOR) -> np.ndarray:
    """
    Velocity change produced by dragging from `origin` and letting go at `release`.

    The impulse points from the release point back towards the origin, like
    pulling back a slingshot, with magnitude proportional to the drag length.
    """
    d = distance(origin, release)
    angle = math.atan2(origin[1] - release[1], origin[0] - release[0])
    force_magnitude = d / divisor
    force = np.array([force_magnitude * math.cos(angle), force_magnitude * math.sin(angle)])
    return force / mass


class Body:
    """
    A circular body with mass, moved by collisions, walls and user impulses.
    """
    def __init__(self, x: float, y: float, radius: float,
                 velocity: Sequence[float] = (0.0, 0.0),
                 mass: float = DEFAULT_MASS, friction: float = DEFAULT_FRICTION):
        assert radius > 0, "radius must be positive"
        assert mass > 0, "mass must be positive"
        assert 0 < friction <= 1, "friction must be in (0, 1]"

        self.position = np.array([x, y], dtype=np.float64)
        self.velocity = np.array(velocity, dtype=np.float64)
        self.radius = float(radius)
        self.mass = float(mass)
        self.friction = float(friction)
        self.color = BODY_IDLE_COLOR
        self.drag_origin: Optional[np.ndarray] = None

    def __repr__(self) -> str:
        return (
            f"Body(pos=({self.position[0]:.1f}, {self.position[1]:.1f}), "
            f"vel=({self.velocity[0]:.2f}, {self.velocity[1]:.2f}), r={self.radius:.1f})"
        )

    @property
    def is_dragging(self) -> bool:
        return self.drag_origin is not None

    @property
    def speed(self) -> float:
        return float(np.hypot(self.velocity[0], self.velocity[1]))

    @property
    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * float(np.dot(self.velocity, self.velocity))

    def update(self, bodies: List["Body"], width: float, height: float,
               energy_loss: float = ENERGY_LOSS) -> None:
        """
        Advances this body by one frame.

        Collisions are resolved against every other body first, then the
        walls reflect the velocity, then the position is integrated. Since
        collisions also change the velocity of bodies not yet updated this
        frame, the outcome depends on the order of `bodies`.

        Args:
            bodies (List[Body]): Every body in the simulation, self included.
            width (float): Width of the canvas.
            height (float): Height of the canvas.
            energy_loss (float): Velocity scale applied after each collision.
        """
        for other in bodies:
            if other is self:
                continue
            if overlaps(self, other):
                resolve_collision(self, other, energy_loss)

        x, y = self.position
        if x + self.radius >= width or x - self.radius <= 0:
            self.velocity[0] = -self.velocity[0]
        if y + self.radius >= height or y - self.radius <= 0:
            self.velocity[1] = -self.velocity[1]

        # Friction only shortens the step; the stored velocity keeps its size.
        self.position += self.velocity * self.friction

    def contains(self, point: Sequence[float]) -> bool:
        return distance(point, self.position) < self.radius

    def begin_drag(self, point: Sequence[float]) -> bool:
        """Starts a drag if `point` lands on this body. Returns True if it did."""
        if self.is_dragging or not self.contains(point):
            return False
        self.drag_origin = self.position.copy()
        self.color = BODY_SELECTED_COLOR
        logging.debug(f"Drag started on {self!r}.")
        return True

    def release(self, point: Sequence[float],
                divisor: float = IMPULSE_DIVISOR) -> Optional[np.ndarray]:
        """
        Ends an active drag at `point` and applies the resulting impulse.

        Returns:
            Optional[np.ndarray]: The velocity added, or None if no drag was
            in progress.
        """
        if not self.is_dragging:
            return None
        impulse = drag_impulse(self.drag_origin, point, self.mass, divisor)
        self.velocity += impulse
        self.drag_origin = None
        self.color = BODY_RELEASED_COLOR
        logging.debug(f"Drag released; added velocity ({impulse[0]:.2f}, {impulse[1]:.2f}).")
        return impulse


@dataclass(frozen=True)
class Arena:
    """Circular outline drawn around the play area. It does not confine bodies."""
    x: float
    y: float
    radius: float

    @classmethod
    def for_canvas(cls, width: float, height: float) -> "Arena":
        return cls(width / 2, height / 2, height / ARENA_RADIUS_RATIO)

    def random_point(self, rng: np.random.Generator, margin: float = 0.0) -> Tuple[float, float]:
        """
        Uniformly distributed point inside the arena disc, at least `margin`
        away from its rim.
        """
        angle = rng.uniform(0, 2 * np.pi)
        r = np.sqrt(rng.uniform()) * max(self.radius - margin, 0.0)
        return self.x + r * np.cos(angle), self.y + r * np.sin(angle)


def place_bodies(rng: np.random.Generator, count: int, width: float, height: float,
                 radius_min: float, radius_max: float,
                 mass: float = DEFAULT_MASS, friction: float = DEFAULT_FRICTION,
                 initial_speed: float = 0.0, arena: Optional[Arena] = None,
                 max_attempts: int = MAX_PLACEMENT_ATTEMPTS) -> List[Body]:
    """
    Creates `count` bodies that do not overlap each other.

    Each radius is drawn from [radius_min, radius_max). Centers are drawn so
    the body fits inside the canvas (and, if `arena` is given, inside the
    arena disc too) and are re-drawn until they clear every body already
    placed.

    Raises:
        RuntimeError: If a body cannot be placed within `max_attempts` draws.
    """
    bodies: List[Body] = []
    for i in range(count):
        radius = rng.uniform(radius_min, radius_max)
        for _ in range(max_attempts):
            if arena is not None:
                x, y = arena.random_point(rng, margin=radius)
            else:
                x = rng.uniform(radius, width - radius)
                y = rng.uniform(radius, height - radius)
            # Bodies never start inside a wall.
            if not (radius <= x <= width - radius and radius <= y <= height - radius):
                continue
            candidate = np.array([x, y])
            if all(distance(candidate, b.position) - radius - b.radius >= 0 for b in bodies):
                break
        else:
            msg = (
                f"Could not place body {i} of {count} (radius {radius:.1f}) "
                f"inside the canvas without overlap after {max_attempts} attempts."
            )
            logging.critical(msg)
            raise RuntimeError(msg)

        velocity = rng.uniform(-initial_speed, initial_speed, size=2) if initial_speed > 0 else (0.0, 0.0)
        bodies.append(Body(x, y, radius, velocity, mass=mass, friction=friction))

    logging.info(f"Placed {len(bodies)} non-overlapping bodies.")
    return bodies
