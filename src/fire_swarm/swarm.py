"""Particle-swarm controller for the firefighting agents."""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
from mesa import Agent
from mesa.space import ContinuousSpace

from . import constants as c
from .cell import Attraction
from .config import PSOParams
from .fire import FireEngine, SimulationClock

logger = logging.getLogger(__name__)


class FirefighterAgent(Agent):
    """One swarm member: a PSO particle carrying a limited water load."""

    def __init__(self, model, velocity: tuple[float, float], water_capacity: int):
        super().__init__(model)
        self.velocity = np.asarray(velocity, dtype=float)
        self.personal_best_position: Optional[np.ndarray] = None
        self.personal_best_value = math.inf
        self.water_capacity = water_capacity
        self.water_remaining = water_capacity
        self.refill_progress = 0

    @property
    def position(self) -> np.ndarray:
        return np.asarray(self.pos, dtype=float)

    @property
    def cell_index(self) -> tuple[int, int]:
        """Grid cell under the agent (floored, never rounded)."""
        return math.floor(self.pos[0]), math.floor(self.pos[1])

    @property
    def is_grounded(self) -> bool:
        return self.water_remaining == 0


class SwarmController:
    """
    Moves agents with one PSO iteration per tick and lets them suppress
    fire in their 3x3 neighbourhood.

    The swarm minimises fitness: fires are attractive, water moderately
    so, burnt ground strongly repulsive.
    """

    def __init__(
        self,
        model,
        engine: FireEngine,
        params: PSOParams = PSOParams(),
        water_capacity: int = c.MAX_WATER_CAPACITY,
        refill_time: int = c.REFILL_TIME,
        legacy_dry_fire_fitness: bool = False,
    ):
        self.model = model
        self.engine = engine
        self.terrain = engine.terrain
        self.params = params
        self.water_capacity = water_capacity
        self.refill_time = refill_time
        self.legacy_dry_fire_fitness = legacy_dry_fire_fitness

        self.space = ContinuousSpace(self.terrain.width, self.terrain.height, torus=False)
        self.agents: list[FirefighterAgent] = []
        self.global_best_position: Optional[np.ndarray] = None
        self.global_best_value = math.inf

    @property
    def active(self) -> bool:
        return bool(self.agents)

    def activate(self, agent_count: int = c.AGENT_COUNT, params: Optional[PSOParams] = None) -> None:
        """Deploy the whole swarm at random positions and seed the bests."""
        if self.active:
            logger.warning("Swarm already active, ignoring activation")
            return
        if params is not None:
            self.params = params

        rng = self.model.random
        spread = c.INITIAL_VELOCITY_RANGE
        summary = self.engine.attraction_summary()
        positions = [
            (rng.random() * (self.terrain.width - 1), rng.random() * (self.terrain.height - 1))
            for _ in range(agent_count)
        ]
        velocities = [
            ((rng.random() - 0.5) * 2 * spread, (rng.random() - 0.5) * 2 * spread)
            for _ in range(agent_count)
        ]
        for pos, velocity in zip(positions, velocities):
            self.deploy(pos, velocity, summary)

        logger.info(
            f"Swarm of {agent_count} agents activated, global best {self.global_best_value:.2f} "
            f"at ({self.global_best_position[0]:.2f}, {self.global_best_position[1]:.2f})"
        )

    def deploy(
        self,
        pos: tuple[float, float],
        velocity: tuple[float, float] = (0.0, 0.0),
        summary: Optional[np.ndarray] = None,
    ) -> FirefighterAgent:
        """Place one agent, seed its personal best and fold it into the global best."""
        agent = FirefighterAgent(self.model, velocity, self.water_capacity)
        self.space.place_agent(agent, (float(pos[0]), float(pos[1])))
        agent.personal_best_position = agent.position
        agent.personal_best_value = self.fitness(agent.pos, summary)
        self.agents.append(agent)

        if self.global_best_position is None or agent.personal_best_value < self.global_best_value:
            self.global_best_position = agent.position
            self.global_best_value = agent.personal_best_value
        return agent

    def fitness(self, position, summary: Optional[np.ndarray] = None) -> float:
        """
        Score a position; lower is better.

        Args:
            position: Continuous (x, y) position
            summary: Attraction summary to evaluate against. Computed from
                the current grid when omitted.
        """
        x, y = math.floor(position[0]), math.floor(position[1])
        if not self.terrain.in_bounds(x, y):
            return c.OUT_OF_BOUNDS_PENALTY
        if summary is None:
            summary = self.engine.attraction_summary()

        value = summary[y, x]
        if value == Attraction.FIRE:
            dry = math.inf if self.legacy_dry_fire_fitness else 0.0
            return c.FIRE_FITNESS + _nearest_distance(summary, Attraction.WATER, x, y, default=dry)
        if value == Attraction.WATER:
            return c.WATER_FITNESS
        if value == Attraction.BURNT:
            return c.BURNT_FITNESS
        return _nearest_distance(summary, Attraction.FIRE, x, y, default=c.NO_FIRE_FITNESS)

    def step(self, clock: SimulationClock) -> int:
        """
        Run one PSO iteration followed by the suppression pass.

        Returns:
            Number of cells suppressed during this tick
        """
        origins = [agent.cell_index for agent in self.agents]
        self._move()
        self._update_bests()
        return self._suppress(origins, clock)

    def _move(self) -> None:
        rng = self.model.random
        omega, phi_p, phi_g = self.params.omega, self.params.phi_personal, self.params.phi_global
        upper = np.array([self.terrain.width - 1, self.terrain.height - 1], dtype=float)

        for agent in self.agents:
            r_p = rng.random()
            r_g = rng.random()
            pos = agent.position
            agent.velocity = (
                omega * agent.velocity
                + phi_p * r_p * (agent.personal_best_position - pos)
                + phi_g * r_g * (self.global_best_position - pos)
            )
            new_pos = np.clip(pos + agent.velocity, 0.0, upper)
            self.space.move_agent(agent, (float(new_pos[0]), float(new_pos[1])))

    def _update_bests(self) -> None:
        summary = self.engine.attraction_summary()
        for agent in self.agents:
            value = self.fitness(agent.pos, summary)
            if value < agent.personal_best_value:
                agent.personal_best_position = agent.position
                agent.personal_best_value = value
                if value < self.global_best_value:
                    self.global_best_position = agent.position
                    self.global_best_value = value

    def _suppress(self, origins: list[tuple[int, int]], clock: SimulationClock) -> int:
        suppressed = 0
        for agent, origin in zip(self.agents, origins):
            x, y = agent.cell_index
            if agent.is_grounded:
                self._refill(agent, x, y)
                continue

            local = 0
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    if local >= c.MAX_SUPPRESSIONS_PER_TICK or agent.water_remaining <= 0:
                        break
                    if self.engine.extinguish(x + dx, y + dy, origin, clock):
                        local += 1
                        agent.water_remaining -= 1
            suppressed += local
        return suppressed

    def _refill(self, agent: FirefighterAgent, x: int, y: int) -> None:
        cell = self.terrain.cell(x, y)
        if cell is None or not cell.is_water:
            return
        agent.refill_progress += 1
        if agent.refill_progress >= self.refill_time:
            agent.water_remaining = agent.water_capacity
            agent.refill_progress = 0
            logger.debug(f"Agent {agent.unique_id} refilled at ({x}, {y})")

    def positions(self) -> list[tuple[float, float]]:
        return [tuple(agent.pos) for agent in self.agents]

    def cell_positions(self) -> list[tuple[int, int]]:
        return [agent.cell_index for agent in self.agents]


def _nearest_distance(summary: np.ndarray, kind: Attraction, x: int, y: int, default: float) -> float:
    rows, cols = np.nonzero(summary == kind)
    if rows.size == 0:
        return default
    return float(np.min(np.hypot(cols - x, rows - y)))
