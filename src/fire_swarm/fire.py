"""Fire propagation: ignition, spread, natural burnout and suppression."""

import logging
import math
from typing import Optional

import numpy as np

from . import constants as c
from .cell import Attraction, CellState
from .terrain import Terrain

logger = logging.getLogger(__name__)

NEIGHBOUR_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


class SimulationClock:
    """In-world elapsed time, advanced only by suppression work."""

    def __init__(self, elapsed: float = 0.0):
        self.elapsed = elapsed

    def advance(self, seconds: float) -> None:
        self.elapsed += seconds

    def __repr__(self) -> str:
        return f"SimulationClock(elapsed={self.elapsed:.2f})"


class FireEngine:
    """
    Stochastic cellular automaton for fire spread.

    Only burning cells are visited on each tick: the engine keeps an
    insertion-ordered active set keyed by (x, y) and rebuilds it from the
    surviving fires plus the ones ignited during the tick.
    """

    def __init__(
        self,
        model,
        terrain: Terrain,
        wind: tuple[int, int] = c.WIND,
        agent_speed: float = c.AGENT_SPEED,
        cell_size: float = c.CELL_SIZE,
        extinguish_time: float = c.EXTINGUISH_TIME,
        legacy_burnout_cover: bool = False,
    ):
        self.model = model
        self.terrain = terrain
        self.wind = tuple(wind)
        self.agent_speed = agent_speed
        self.cell_size = cell_size
        self.extinguish_time = extinguish_time
        self.legacy_burnout_cover = legacy_burnout_cover

        self.active_fires: dict[tuple[int, int], None] = {}
        self._spawned: dict[tuple[int, int], None] = {}

    def ignite(self, x: int, y: int) -> bool:
        """Set an eligible forest cell on fire. Returns False when nothing happened."""
        cell = self.terrain.cell(x, y)
        if cell is None or not cell.ignite(c.IGNITION_COOLDOWN):
            return False
        self.active_fires[(x, y)] = None
        logger.debug(f"Ignited cell ({x}, {y})")
        return True

    def advance(self) -> int:
        """
        Run one tick of the automaton.

        Returns:
            Number of cells ignited by spread during this tick
        """
        rng = self.model.random
        spawned = self._spawned
        spawned.clear()

        for pos in list(self.active_fires):
            x, y = pos
            cell = self.terrain.grid[x][y]
            if cell.cooldown > 0:
                cell.cooldown -= 1

            if rng.random() < c.BURNOUT_PROBABILITY:
                cell.burn_out(by_agent=False)
                del self.active_fires[pos]
                logger.debug(f"Cell ({x}, {y}) burnt out")
                continue

            if cell.cooldown == 0:
                for dx, dy in NEIGHBOUR_OFFSETS:
                    neighbour = self.terrain.cell(x + dx, y + dy)
                    if neighbour is None or not neighbour.is_burnable():
                        continue
                    if rng.random() < self.spread_probability(cell, neighbour, (dx, dy)):
                        neighbour.ignite(c.SPREAD_COOLDOWN)
                        spawned[(x + dx, y + dy)] = None
                cell.cooldown = c.SPREAD_COOLDOWN

        self.active_fires.update(spawned)
        return len(spawned)

    def spread_probability(self, source, target, direction: tuple[int, int]) -> float:
        prob = c.BASE_SPREAD_PROBABILITY + (target.elevation - source.elevation) * c.ELEVATION_FACTOR
        if direction == self.wind:
            prob += c.WIND_BONUS
        return min(max(prob, c.MIN_SPREAD_PROBABILITY), c.MAX_SPREAD_PROBABILITY)

    def extinguish(
        self,
        x: int,
        y: int,
        requester_position: Optional[tuple[float, float]] = None,
        clock: Optional[SimulationClock] = None,
    ) -> bool:
        """
        Suppress a burning cell.

        Args:
            x, y: Target cell
            requester_position: Where the suppressing agent comes from
            clock: Advanced by travel and suppression time when given
                together with requester_position

        Returns:
            True if the cell was burning and is now burnt
        """
        cell = self.terrain.cell(x, y)
        if cell is None or not cell.is_burning:
            return False

        if requester_position is not None and clock is not None:
            distance = math.hypot(x - requester_position[0], y - requester_position[1])
            travel_time = distance * self.cell_size / self.agent_speed
            clock.advance(travel_time + self.extinguish_time)

        cell.burn_out(by_agent=True)
        self.active_fires.pop((x, y), None)
        logger.debug(f"Cell ({x}, {y}) extinguished by agent")
        return True

    def attraction_summary(self) -> np.ndarray:
        """Attraction class of every cell as a (height, width) int array."""
        summary = np.full((self.terrain.height, self.terrain.width), Attraction.NEUTRAL, dtype=np.int8)
        for cell in self.terrain.cells():
            x, y = cell.pos
            summary[y, x] = cell.attraction()
        return summary

    def count_cover(self) -> tuple[int, int]:
        """
        Count (forested, burnt) cells.

        With legacy_burnout_cover, naturally burnt cells still count as
        forested and only agent-suppressed cells count as burnt.
        """
        forested = burnt = 0
        for cell in self.terrain.cells():
            if cell.is_forest:
                forested += 1
            elif cell.state == CellState.Burnt:
                if self.legacy_burnout_cover and not cell.extinguished_by_agent:
                    forested += 1
                else:
                    burnt += 1
        return forested, burnt

    @property
    def active_fire_count(self) -> int:
        return len(self.active_fires)
