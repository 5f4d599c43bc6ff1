"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `fire_swarm.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ScriptedRandom:
    """Stand-in for `Model.random` returning scripted draws.

    Values from `script` are consumed first, then `default` forever.
    Integer draws always return the lowest admissible value.
    """

    def __init__(self, default, script=()):
        self.default = default
        self.script = list(script)
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.script:
            return self.script.pop(0)
        return self.default

    def randrange(self, start, stop=None):
        return 0 if stop is None else start

    def randint(self, a, b):
        return a


@pytest.fixture
def sample_grid_size():
    """Provide a standard grid size for tests."""
    return (10, 10)


@pytest.fixture
def flat_config(sample_grid_size):
    """Windless, flat, lake-free terrain with no initial fires."""
    from fire_swarm.config import SimulationConfig

    width, height = sample_grid_size
    return SimulationConfig(
        width=width,
        height=height,
        initial_fires=0,
        water_blobs=0,
        max_elevation=0.0,
        wind=(0, 0),
        seed=7,
    )


@pytest.fixture
def flat_model(flat_config):
    from fire_swarm.model import FireSwarmModel

    return FireSwarmModel(flat_config)


@pytest.fixture
def scripted():
    return ScriptedRandom
