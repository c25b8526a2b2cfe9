# simulation.py
"""
Drives the carrom demo.

This module defines the CarromSimulation class, which owns the bodies, the
arena and the last known pointer position. It advances every body once per
frame and routes pointer gestures to the bodies they land on.
"""
import logging
import numpy as np
from typing import Dict, Any, List, Optional, Tuple
from body import Body, Arena, place_bodies
from utils import make_rng
from constants import ENERGY_LOSS, IMPULSE_DIVISOR, DEFAULT_MASS, DEFAULT_FRICTION

# --- Data Contracts ---
#
# class CarromSimulation:
#   - __init__(self, params: Dict[str, Any], width: int, height: int,
#              bodies: Optional[List[Body]] = None):
#     - Inputs:
#       - params: The "carrom" section of config.json.
#         - "seed": Optional[int]
#         - "body_count": int
#         - "radius_min" / "radius_max": float
#         - "mass", "friction", "energy_loss", "impulse_divisor",
#           "initial_speed": float
#         - "placement": "canvas" | "arena"
#       - width, height: Size of the canvas the bodies bounce in.
#       - bodies: Pre-built bodies, bypassing random placement.
#     - Side Effects: Validates params, places bodies.
#
#   - step(self) -> None:
#     - Side Effects: Calls Body.update on every body in list order.
#     - Invariants: Body count never changes.

PLACEMENT_MODES = ("canvas", "arena")


class CarromSimulation:
    """
    Owns the carrom state and advances it one frame at a time.
    """
    def __init__(self, params: Dict[str, Any], width: int, height: int,
                 bodies: Optional[List[Body]] = None):
        """
        Initializes the simulation.

        Args:
            params (Dict[str, Any]): Carrom parameters from config.
            width (int): The width of the canvas.
            height (int): The height of the canvas.
            bodies (Optional[List[Body]]): Bodies to simulate instead of
                randomly placed ones.
        """
        self.width = width
        self.height = height
        self.energy_loss = float(params.get('energy_loss', ENERGY_LOSS))
        self.impulse_divisor = float(params.get('impulse_divisor', IMPULSE_DIVISOR))
        self._validate(params)

        self.arena = Arena.for_canvas(width, height)
        self.pointer = np.zeros(2, dtype=np.float64)
        self.step_count = 0

        self.rng = make_rng(params.get('seed'))
        if bodies is not None:
            self.bodies = list(bodies)
        else:
            self.bodies = place_bodies(
                self.rng,
                count=params['body_count'],
                width=width,
                height=height,
                radius_min=params['radius_min'],
                radius_max=params['radius_max'],
                mass=params.get('mass', DEFAULT_MASS),
                friction=params.get('friction', DEFAULT_FRICTION),
                initial_speed=params.get('initial_speed', 0.0),
                arena=self.arena if params.get('placement', 'canvas') == 'arena' else None,
            )

        logging.info(
            f"CarromSimulation initialized with {len(self.bodies)} bodies "
            f"on a {width}x{height} canvas."
        )

    def _validate(self, params: Dict[str, Any]) -> None:
        errors = []
        if params.get('body_count', 1) < 0:
            errors.append("body_count must not be negative")
        if not 0 < params.get('radius_min', 1) <= params.get('radius_max', 1):
            errors.append("radii must satisfy 0 < radius_min <= radius_max")
        if params.get('mass', DEFAULT_MASS) <= 0:
            errors.append("mass must be positive")
        if not 0 < params.get('friction', DEFAULT_FRICTION) <= 1:
            errors.append("friction must be in (0, 1]")
        if self.impulse_divisor <= 0:
            errors.append("impulse_divisor must be positive")
        if params.get('placement', 'canvas') not in PLACEMENT_MODES:
            errors.append(f"placement must be one of {PLACEMENT_MODES}")
        if errors:
            msg = "Configuration error in 'carrom': " + "; ".join(errors) + "."
            logging.critical(msg)
            raise ValueError(msg)

    def step(self) -> None:
        """
        Executes one frame: every body updates once, in list order.
        """
        for body in self.bodies:
            body.update(self.bodies, self.width, self.height, self.energy_loss)
        self.step_count += 1

    # --- Pointer input ---

    def pointer_move(self, x: float, y: float) -> None:
        self.pointer[:] = (x, y)

    def pointer_down(self, x: float, y: float) -> int:
        """Offers a press to every body. Returns how many started a drag."""
        self.pointer_move(x, y)
        started = sum(1 for body in self.bodies if body.begin_drag(self.pointer))
        if started:
            logging.info(f"Pointer down at ({x:.0f}, {y:.0f}) grabbed {started} body(s).")
        return started

    def pointer_up(self, x: float, y: float) -> int:
        """Releases every body being dragged. Returns how many were released."""
        self.pointer_move(x, y)
        released = 0
        for body in self.bodies:
            if body.release(self.pointer, self.impulse_divisor) is not None:
                released += 1
        if released:
            logging.info(f"Pointer up at ({x:.0f}, {y:.0f}) released {released} body(s).")
        return released

    def trajectories(self) -> List[Tuple[np.ndarray, np.ndarray]]:
        """Aiming lines, from drag origin to pointer, for every dragged body."""
        return [(body.drag_origin, self.pointer.copy()) for body in self.bodies if body.is_dragging]

    # --- Metrics ---

    def mean_speed(self) -> float:
        if not self.bodies:
            return 0.0
        return float(np.mean([body.speed for body in self.bodies]))

    def kinetic_energy(self) -> float:
        return sum(body.kinetic_energy for body in self.bodies)
