"""
Wildfire suppression with a particle swarm.

A stochastic cellular automaton spreads fire over a terrain grid while a
swarm of firefighting agents, steered by particle-swarm optimization,
flies to the fires and puts them out with a limited water supply.
"""

from .cell import ForestCell, CellState, Attraction
from .config import ConfigurationError, PSOParams, SimulationConfig
from .fire import FireEngine, SimulationClock
from .model import FireSwarmModel, GridSnapshot, TickReport
from .swarm import FirefighterAgent, SwarmController

__version__ = "0.1.0"

__all__ = [
    "ForestCell",
    "CellState",
    "Attraction",
    "ConfigurationError",
    "PSOParams",
    "SimulationConfig",
    "FireEngine",
    "SimulationClock",
    "FireSwarmModel",
    "GridSnapshot",
    "TickReport",
    "FirefighterAgent",
    "SwarmController",
]
