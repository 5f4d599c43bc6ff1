import logging
from typing import Iterator, Optional

import numpy as np
from mesa.space import SingleGrid

from . import constants as c
from .cell import ForestCell, CellState

logger = logging.getLogger(__name__)


class Terrain:
    """Fixed-size grid of ForestCell agents with random elevation."""

    def __init__(self, model, width: int, height: int, max_elevation: float = c.MAX_ELEVATION):
        self.model = model
        self.width = width
        self.height = height
        self.grid = SingleGrid(width, height, torus=False)

        for _, (x, y) in self.grid.coord_iter():
            elevation = model.random.random() * max_elevation
            self.grid.place_agent(ForestCell(model, elevation), (x, y))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Optional[ForestCell]:
        if not self.in_bounds(x, y):
            return None
        return self.grid[x][y]

    def cells(self) -> Iterator[ForestCell]:
        for content, _ in self.grid.coord_iter():
            yield content

    def add_water_blobs(self, count: int) -> int:
        """
        Carve random-walk lakes into the forest.

        Between 2 and `count` blobs are drawn (exactly `count` when it is
        below 2). Each blob starts away from the border and turns every cell
        its walk visits into water.

        Returns:
            Number of cells that are water afterwards
        """
        rng = self.model.random
        if count <= 0:
            return 0
        num_blobs = count if count < 2 else rng.randint(2, count)

        border = c.BLOB_BORDER
        for _ in range(num_blobs):
            x = self._blob_start(self.width, border)
            y = self._blob_start(self.height, border)
            steps = rng.randint(c.BLOB_MIN_STEPS, c.BLOB_MAX_STEPS)
            for _ in range(steps):
                if self.in_bounds(x, y):
                    self.grid[x][y].make_water()
                x += rng.randint(-1, 1)
                y += rng.randint(-1, 1)

        water = sum(1 for cell in self.cells() if cell.is_water)
        logger.debug(f"Placed {num_blobs} water blobs covering {water} cells")
        return water

    def _blob_start(self, size: int, border: int) -> int:
        if size > 2 * border:
            return self.model.random.randint(border, size - border - 1)
        return self.model.random.randrange(size)

    def ignition_points(self, count: int, strategy: str = "center") -> list[tuple[int, int]]:
        """Draw `count` candidate ignition cells, eligible or not."""
        rng = self.model.random
        points = []
        for _ in range(count):
            if strategy == "center":
                x = int(rng.random() * (self.width / 3)) + self.width // 3
                y = int(rng.random() * (self.height / 3)) + self.height // 3
            else:
                x = rng.randrange(self.width)
                y = rng.randrange(self.height)
            points.append((x, y))
        return points

    def state_matrix(self) -> np.ndarray:
        """CellState values as a (height, width) int array."""
        out = np.empty((self.height, self.width), dtype=np.int8)
        for cell in self.cells():
            x, y = cell.pos
            out[y, x] = cell.state.value
        return out

    def elevation_matrix(self) -> np.ndarray:
        out = np.empty((self.height, self.width), dtype=float)
        for cell in self.cells():
            x, y = cell.pos
            out[y, x] = cell.elevation
        return out

    def count_state(self, state: CellState) -> int:
        return sum(1 for cell in self.cells() if cell.state == state)
