"""Main entry point for the Evolving Organisms simulation."""

import argparse
import logging

from .config import Config, RunConfig, WorldConfig
from .simulation import World


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = Config.default()
    p = argparse.ArgumentParser(
        prog="evolving-organisms",
        description="Run a headless evolving organisms simulation.",
    )
    p.add_argument("--ticks", type=int, default=defaults.run.ticks,
                   help="Number of ticks to simulate")
    p.add_argument("--population", type=int, default=defaults.world.initial_population,
                   help="Initial number of organisms")
    p.add_argument("--max-population", type=int, default=defaults.world.max_population,
                   help="Offspring beyond this population are dropped")
    p.add_argument("--width", type=int, default=defaults.world.width)
    p.add_argument("--height", type=int, default=defaults.world.height)
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (random if omitted)")
    p.add_argument("--report-every", type=int, default=defaults.run.report_every,
                   help="Print a progress line every N ticks")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log every birth and death")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        world=WorldConfig(
            width=args.width,
            height=args.height,
            initial_population=args.population,
            max_population=args.max_population,
            seed=args.seed,
        ),
        run=RunConfig(ticks=args.ticks, report_every=args.report_every),
    )


def run(config: Config) -> World:
    """Run the world for the configured number of ticks and return it."""
    world = World(config.world)
    world.initialize()

    print("Starting Evolving Organisms simulation...")
    print(f"  Seed: {world.seed}")
    print(f"  Population: {config.world.initial_population}")
    print(f"  World size: {config.world.width}x{config.world.height}")
    print()

    for _ in range(config.run.ticks):
        world.step()

        if world.stats.tick % config.run.report_every == 0:
            print(
                f"  Tick {world.stats.tick}: {world.stats.organisms_alive} alive, "
                f"avg energy {world.stats.avg_energy:.1f}, "
                f"avg age {world.stats.avg_age:.1f}"
            )

        if world.stats.organisms_alive == 0:
            print(f"All organisms have died after {world.stats.tick} ticks.")
            break

    print()
    print("Simulation ended.")
    print(f"  Ticks: {world.stats.tick}")
    print(f"  Alive: {world.stats.organisms_alive}")
    print(f"  Total births: {world.stats.total_births}")
    print(f"  Total deaths: {world.stats.total_deaths}")
    return world


def main(argv: list[str] | None = None) -> None:
    """Run the evolving organisms simulation."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(build_config(args))


if __name__ == "__main__":
    main()
