"""Forest cell agent implementation for fire spread simulation."""

from enum import Enum, IntEnum

from mesa import Agent


class CellState(Enum):
    """Possible states of a terrain cell."""
    Empty = 0
    Forest = 1
    Burning = 2
    Burnt = 3
    Water = 4


class Attraction(IntEnum):
    """Per-cell classification used by the swarm fitness function."""
    NEUTRAL = 0
    WATER = 3
    BURNT = 4
    FIRE = 5


class ForestCell(Agent):
    """Agent representing a single cell of the terrain grid."""

    def __init__(
        self,
        model,
        elevation: float,
        state: CellState = CellState.Forest
    ):
        """
        Initialize a terrain cell.

        Args:
            model: The model this cell belongs to
            elevation: Fixed cell elevation, biases fire spread uphill
            state: Initial CellState of the cell
        """
        super().__init__(model)
        self.elevation = float(elevation)
        self.state = state
        self.cooldown = 0
        self.extinguished_by_agent = False

    @property
    def is_forest(self) -> bool:
        """Fuel is present (standing or burning forest)."""
        return self.state in (CellState.Forest, CellState.Burning)

    @property
    def is_burning(self) -> bool:
        return self.state == CellState.Burning

    @property
    def is_burnt(self) -> bool:
        return self.state == CellState.Burnt

    @property
    def is_water(self) -> bool:
        return self.state == CellState.Water

    def is_burnable(self) -> bool:
        """
        Check if the cell can catch fire.

        Returns:
            True if the cell holds standing forest
        """
        return self.state == CellState.Forest

    def make_water(self) -> None:
        """Turn the cell into a water source. Only used while building terrain."""
        self.state = CellState.Water
        self.cooldown = 0

    def ignite(self, cooldown: int) -> bool:
        if not self.is_burnable():
            return False
        self.state = CellState.Burning
        self.cooldown = cooldown
        return True

    def burn_out(self, by_agent: bool) -> None:
        self.state = CellState.Burnt
        self.cooldown = 0
        self.extinguished_by_agent = by_agent

    def attraction(self) -> Attraction:
        if self.state == CellState.Burning:
            return Attraction.FIRE
        if self.state == CellState.Burnt:
            return Attraction.BURNT
        if self.state == CellState.Water:
            return Attraction.WATER
        return Attraction.NEUTRAL

    def __str__(self) -> str:
        return f"Cell {self.pos}: {self.state.name}, elevation: {self.elevation:.1f}"
