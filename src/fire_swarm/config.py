"""Simulation configuration and validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from . import constants as c

logger = logging.getLogger(__name__)

IgnitionStrategy = Literal["center", "uniform"]


class ConfigurationError(ValueError):
    """Raised when a simulation is configured with unusable values."""


@dataclass(frozen=True)
class PSOParams:
    """Particle swarm coefficients, adjustable between ticks."""

    omega: float = c.OMEGA
    phi_personal: float = c.PHI_PERSONAL
    phi_global: float = c.PHI_GLOBAL


@dataclass(frozen=True)
class SimulationConfig:
    """
    Everything needed to build one simulation run.

    Attributes:
        width, height: Grid size in cells.
        agent_count: Number of firefighting agents deployed on activation.
        initial_fires: How many ignitions are attempted at start.
        ignition_strategy: "center" picks cells in the middle third of the
            grid, "uniform" picks anywhere. Ignored when ignition_points is set.
        ignition_points: Explicit (x, y) cells to ignite at start.
        water_blobs: Upper bound on the number of random-walk lakes.
        max_elevation: Elevation is drawn uniformly from [0, max_elevation).
        wind: Wind direction (dx, dy), each in {-1, 0, 1}. (0, 0) disables it.
        legacy_burnout_cover: Count naturally burnt cells as forested in
            cover statistics, as the first version of the model did.
        legacy_dry_fire_fitness: Score fire cells as unreachable (infinite
            fitness) when the map has no water, as the first version did.
        seed: Seed for the model's random stream.
    """

    width: int = c.GRID_WIDTH
    height: int = c.GRID_HEIGHT
    agent_count: int = c.AGENT_COUNT
    initial_fires: int = c.INITIAL_FIRES
    ignition_strategy: IgnitionStrategy = "center"
    ignition_points: Optional[tuple[tuple[int, int], ...]] = None
    water_blobs: int = c.WATER_BLOBS
    max_elevation: float = c.MAX_ELEVATION
    wind: tuple[int, int] = c.WIND
    pso: PSOParams = PSOParams()

    water_capacity: int = c.MAX_WATER_CAPACITY
    refill_time: int = c.REFILL_TIME
    agent_speed: float = c.AGENT_SPEED
    cell_size: float = c.CELL_SIZE
    extinguish_time: float = c.EXTINGUISH_TIME

    swarm_start_tick: int = c.SWARM_START_TICK
    reignition_interval: int = c.REIGNITION_INTERVAL
    reignition_probability: float = c.REIGNITION_PROBABILITY
    min_ticks_before_stop: int = c.MIN_TICKS_BEFORE_STOP

    legacy_burnout_cover: bool = False
    legacy_dry_fire_fitness: bool = False
    seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        """Check every field, raising ConfigurationError on the first bad one."""
        positive = {
            "width": self.width,
            "height": self.height,
            "agent_count": self.agent_count,
            "water_capacity": self.water_capacity,
            "refill_time": self.refill_time,
            "agent_speed": self.agent_speed,
            "cell_size": self.cell_size,
            "reignition_interval": self.reignition_interval,
        }
        for name, value in positive.items():
            if value <= 0:
                _fail(f"{name} must be positive, got {value!r}")

        non_negative = {
            "initial_fires": self.initial_fires,
            "water_blobs": self.water_blobs,
            "max_elevation": self.max_elevation,
            "extinguish_time": self.extinguish_time,
            "swarm_start_tick": self.swarm_start_tick,
            "min_ticks_before_stop": self.min_ticks_before_stop,
        }
        for name, value in non_negative.items():
            if value < 0:
                _fail(f"{name} must not be negative, got {value!r}")

        if not 0.0 <= self.reignition_probability <= 1.0:
            _fail(f"reignition_probability must be within [0, 1], got {self.reignition_probability!r}")

        if len(self.wind) != 2 or any(d not in (-1, 0, 1) for d in self.wind):
            _fail(f"wind must be a pair of values in {{-1, 0, 1}}, got {self.wind!r}")

        if self.ignition_strategy not in ("center", "uniform"):
            _fail(f"Unknown ignition_strategy: {self.ignition_strategy!r}")

        for point in self.ignition_points or ():
            if len(point) != 2:
                _fail(f"Ignition point {point!r} must be an (x, y) pair")
            x, y = point
            if not (0 <= x < self.width and 0 <= y < self.height):
                _fail(f"Ignition point {point!r} lies outside the {self.width}x{self.height} grid")

        return self


def _fail(message: str) -> None:
    logger.error(message)
    raise ConfigurationError(message)
