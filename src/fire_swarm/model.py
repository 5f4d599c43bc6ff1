"""Fire spread and swarm suppression model."""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

import numpy as np
from mesa import Model

from .cell import CellState
from .config import PSOParams, SimulationConfig
from .fire import FireEngine, SimulationClock
from .swarm import SwarmController
from .terrain import Terrain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickReport:
    """Outcome of one tick, as consumed by rendering and statistics."""

    tick: int
    active_fire_count: int
    suppressed_this_tick: int
    cumulative_suppressed: int
    forested_count: int
    burnt_count: int
    elapsed_clock_seconds: float
    agent_positions: tuple[tuple[int, int], ...]
    swarm_active: bool
    should_stop: bool

    @property
    def efficiency(self) -> float:
        """Share of cover still forested, in percent."""
        total = self.forested_count + self.burnt_count
        return 0.0 if total == 0 else self.forested_count / total * 100.0


@dataclass(frozen=True)
class GridSnapshot:
    """Read-only view of the grid. Arrays are indexed [y, x]."""

    tick: int
    states: np.ndarray
    extinguished_by_agent: np.ndarray
    elevation: np.ndarray
    agent_positions: tuple[tuple[float, float], ...] = field(default_factory=tuple)

    @property
    def forest(self) -> np.ndarray:
        return (self.states == CellState.Forest.value) | self.burning

    @property
    def burning(self) -> np.ndarray:
        return self.states == CellState.Burning.value

    @property
    def burnt(self) -> np.ndarray:
        return self.states == CellState.Burnt.value

    @property
    def water(self) -> np.ndarray:
        return self.states == CellState.Water.value


class FireSwarmModel(Model):
    """
    Tick orchestrator.

    Each tick advances the fire, deploys the swarm once the configured
    start tick is reached, runs one swarm step while it is active and
    occasionally starts a new fire somewhere on the grid.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the model.

        Args:
            config: Simulation configuration, defaults to SimulationConfig().

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        config = (config or SimulationConfig()).validate()
        super().__init__(seed=config.seed)
        self.config = config
        self._build()

    def _build(self) -> None:
        config = self.config
        self.terrain = Terrain(self, config.width, config.height, config.max_elevation)
        self.terrain.add_water_blobs(config.water_blobs)

        self.fire = FireEngine(
            self,
            self.terrain,
            wind=config.wind,
            agent_speed=config.agent_speed,
            cell_size=config.cell_size,
            extinguish_time=config.extinguish_time,
            legacy_burnout_cover=config.legacy_burnout_cover,
        )
        self.swarm = SwarmController(
            self,
            self.fire,
            params=config.pso,
            water_capacity=config.water_capacity,
            refill_time=config.refill_time,
            legacy_dry_fire_fitness=config.legacy_dry_fire_fitness,
        )
        self.clock = SimulationClock()
        self.tick = 0
        self.cumulative_suppressed = 0
        self.last_report: Optional[TickReport] = None
        self.running = True

        points = config.ignition_points
        if points is None:
            points = self.terrain.ignition_points(config.initial_fires, config.ignition_strategy)
        for x, y in points:
            self.fire.ignite(x, y)

        logger.info(
            f"Model created: {config.width}x{config.height} grid, "
            f"{self.fire.active_fire_count} initial fires, wind {config.wind}"
        )

    def reset(self) -> None:
        """Start a fresh run with the same configuration."""
        for agent in list(self.agents):
            agent.remove()
        self._build()

    def set_pso_params(self, params: PSOParams) -> None:
        self.swarm.params = params

    def step(self):
        """Execute one tick of the simulation."""
        config = self.config
        self.fire.advance()

        if self.tick == config.swarm_start_tick:
            self.swarm.activate(config.agent_count, self.swarm.params)

        suppressed = 0
        if self.swarm.active:
            suppressed = self.swarm.step(self.clock)
            self.cumulative_suppressed += suppressed

        if self.tick % config.reignition_interval == 0 and self.random.random() < config.reignition_probability:
            x = self.random.randrange(config.width)
            y = self.random.randrange(config.height)
            if self.fire.ignite(x, y):
                logger.debug(f"Spontaneous ignition at ({x}, {y}) on tick {self.tick}")

        self.tick += 1
        should_stop = self.fire.active_fire_count == 0 and self.tick > config.min_ticks_before_stop
        if should_stop and self.running:
            logger.info(f"No active fires left after {self.tick} ticks")
        self.running = not should_stop

        forested, burnt = self.fire.count_cover()
        self.last_report = TickReport(
            tick=self.tick,
            active_fire_count=self.fire.active_fire_count,
            suppressed_this_tick=suppressed,
            cumulative_suppressed=self.cumulative_suppressed,
            forested_count=forested,
            burnt_count=burnt,
            elapsed_clock_seconds=self.clock.elapsed,
            agent_positions=tuple(self.swarm.cell_positions()),
            swarm_active=self.swarm.active,
            should_stop=should_stop,
        )

    def advance_tick(self, pso_params: Optional[PSOParams] = None) -> TickReport:
        """
        Run one tick and report on it.

        Args:
            pso_params: New PSO coefficients, applied before the swarm moves.
        """
        if pso_params is not None:
            self.set_pso_params(pso_params)
        self.step()
        return self.last_report

    def tune(self, **coefficients) -> PSOParams:
        """Change individual PSO coefficients, e.g. tune(omega=0.4)."""
        params = replace(self.swarm.params, **coefficients)
        self.set_pso_params(params)
        return params

    def snapshot(self) -> GridSnapshot:
        flags = np.zeros((self.terrain.height, self.terrain.width), dtype=bool)
        for cell in self.terrain.cells():
            if cell.is_burnt and cell.extinguished_by_agent:
                x, y = cell.pos
                flags[y, x] = True
        return GridSnapshot(
            tick=self.tick,
            states=self.terrain.state_matrix(),
            extinguished_by_agent=flags,
            elevation=self.terrain.elevation_matrix(),
            agent_positions=tuple(self.swarm.positions()),
        )
