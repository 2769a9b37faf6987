"""
Planar Boids Simulation
=======================

A flock of boids steering by cohesion, separation, alignment, and wall
avoidance on a bounded ground plane, with a camera that keeps the whole
flock in frame.

Usage:
    python main.py                        # Windowed, settings from config/boids.py
    python main.py --count 400 --seed 7   # Override flock size and seed
    python main.py --no-cone              # Neighbors visible in every direction
    python main.py --headless --ticks 600 # Run without a window

Controls:
    - SPACE: Pause/Resume simulation
    - R: Reset flock
    - F: Toggle flocking (walls only)
    - H: Toggle help text
    - ESC: Quit
"""

import argparse
import sys

from config import boids as config
from boids import FatalSimulationError, Simulation, SimulationConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Planar boids flocking simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--count", type=int, help=f"Number of boids (default: {config.BOIDS['count']})")
    parser.add_argument("--view-range", type=float,
                        help=f"Neighbor perception radius (default: {config.BOIDS['view_range']})")
    parser.add_argument("--seed", type=int, help="Random seed for spawning")
    parser.add_argument("--no-cone", action="store_true", help="Disable the forward view cone")

    # Headless mode
    parser.add_argument("--headless", action="store_true", help="Run without opening a window")
    parser.add_argument("--ticks", type=int, default=config.HEADLESS["ticks"],
                        help=f"Ticks to run in headless mode (default: {config.HEADLESS['ticks']})")
    parser.add_argument("--dt", type=float, default=config.HEADLESS["dt"],
                        help="Seconds per tick in headless mode (default: 1/60)")
    return parser.parse_args(argv)


def build_config(args) -> SimulationConfig:
    return SimulationConfig.from_dict(
        config.BOIDS,
        agent_count=args.count,
        view_range=args.view_range,
        seed=args.seed,
        use_view_cone=False if args.no_cone else None,
    )


def run_headless(sim_config: SimulationConfig, ticks: int, dt: float) -> int:
    """Run the simulation without a window, printing periodic status."""
    report_every = config.HEADLESS["report_every"]
    simulation = Simulation(sim_config)

    def report(sim):
        if sim.tick_count % report_every == 0 or sim.tick_count == ticks:
            print(
                f"[Headless] tick {sim.tick_count:5d} | "
                f"speed {sim.flock.mean_speed():6.3f} | "
                f"radius {sim.camera.radius:7.3f} | "
                f"camera distance {sim.camera.distance:7.3f}"
            )

    print(f"[Headless] {sim_config.agent_count} boids, {ticks} ticks at dt={dt:.4f}")
    try:
        simulation.run(ticks, dt, callback=report)
    except FatalSimulationError as e:
        print(f"[Boids] Fatal: {e}")
        print(f"[Boids] Halted at tick {simulation.tick_count}")
        return 1
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        sim_config = build_config(args)
    except ValueError as e:
        print(f"[Boids] Invalid configuration: {e}")
        return 2

    if args.headless:
        return run_headless(sim_config, args.ticks, args.dt)

    # Imported here so headless runs need no display or OpenGL
    from core import Application

    app = Application(sim_config)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
