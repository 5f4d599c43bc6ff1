#!/usr/bin/env python3
"""Main script to run the fire suppression simulation."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_swarm.config import SimulationConfig
from fire_swarm.model import FireSwarmModel, GridSnapshot


def print_grid(snapshot: GridSnapshot) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        snapshot: Grid snapshot to draw
    """
    agents = {(int(x), int(y)) for x, y in snapshot.agent_positions}
    height, width = snapshot.states.shape
    grid_str = ""
    for y in range(height):
        for x in range(width):
            if (x, y) in agents:
                grid_str += "🚁"
            elif snapshot.burning[y, x]:
                grid_str += "🔥"
            elif snapshot.burnt[y, x]:
                grid_str += "🟩" if snapshot.extinguished_by_agent[y, x] else "⬛"
            elif snapshot.water[y, x]:
                grid_str += "🔷"
            else:
                grid_str += "🌲"
        grid_str += "\n"
    print(grid_str)


def main():
    """Run the fire suppression simulation."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # Simulation parameters
    MAX_STEPS = 200
    config = SimulationConfig(seed=42)

    print("--- CREATING MODEL ---")
    model = FireSwarmModel(config)
    print_grid(model.snapshot())

    for i in range(MAX_STEPS):
        report = model.advance_tick()
        print(f"\n--- STEP {report.tick} ---")
        print_grid(model.snapshot())
        print(
            f"Fires: {report.active_fire_count} | Extinguished: {report.cumulative_suppressed} | "
            f"Efficiency: {report.efficiency:.1f}% | Elapsed: {report.elapsed_clock_seconds:.2f}s"
        )

        if report.should_stop:
            print("\nFire has been extinguished.")
            break


if __name__ == "__main__":
    main()
