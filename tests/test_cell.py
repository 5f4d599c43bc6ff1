"""Unit tests for ForestCell class."""

import pytest
from fire_swarm.cell import ForestCell, CellState, Attraction


class TestForestCell:
    """Test cases for ForestCell class."""

    @pytest.fixture
    def cell(self, flat_model):
        """A standing forest cell taken from the grid."""
        return flat_model.terrain.cell(2, 2)

    def test_cell_creation(self, flat_model):
        """Test creating a cell."""
        cell = ForestCell(flat_model, elevation=42.5)
        assert cell.state == CellState.Forest
        assert cell.elevation == 42.5
        assert cell.cooldown == 0
        assert cell.extinguished_by_agent is False

    def test_forest_is_burnable(self, cell):
        assert cell.is_burnable() is True
        assert cell.is_forest is True

    def test_ignite_sets_cooldown(self, cell):
        assert cell.ignite(3) is True
        assert cell.is_burning
        assert cell.is_forest
        assert cell.cooldown == 3

    def test_burning_cell_cannot_reignite(self, cell):
        cell.ignite(3)
        assert cell.ignite(2) is False
        assert cell.cooldown == 3

    def test_water_never_ignites(self, cell):
        cell.make_water()
        assert cell.ignite(3) is False
        assert cell.is_water
        assert not cell.is_burning
        assert not cell.is_forest

    def test_burn_out_naturally(self, cell):
        cell.ignite(3)
        cell.burn_out(by_agent=False)
        assert cell.is_burnt
        assert not cell.is_forest
        assert cell.cooldown == 0
        assert cell.extinguished_by_agent is False

    def test_burnt_cell_cannot_reignite(self, cell):
        cell.ignite(3)
        cell.burn_out(by_agent=True)
        assert cell.ignite(3) is False
        assert cell.extinguished_by_agent is True

    def test_attraction(self, cell):
        assert cell.attraction() == Attraction.NEUTRAL
        cell.ignite(3)
        assert cell.attraction() == Attraction.FIRE
        cell.burn_out(by_agent=True)
        assert cell.attraction() == Attraction.BURNT

    def test_water_attraction(self, cell):
        cell.make_water()
        assert cell.attraction() == Attraction.WATER

    def test_str(self, cell):
        assert str(cell) == "Cell (2, 2): Forest, elevation: 0.0"


class TestCellState:
    """Test cases for CellState enum."""

    def test_cell_state_values(self):
        """Test cell state values."""
        assert CellState.Empty.value == 0
        assert CellState.Forest.value == 1
        assert CellState.Burning.value == 2
        assert CellState.Burnt.value == 3
        assert CellState.Water.value == 4
