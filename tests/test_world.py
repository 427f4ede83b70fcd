import pytest

from evolving_organisms.config import Config, RunConfig, WorldConfig
from evolving_organisms.main import build_config, parse_args, run
from evolving_organisms.simulation import (
    AttributeType,
    Body,
    Gene,
    Genome,
    OrganismState,
    World,
)


def single_square_genome():
    body = Body.from_points([(0, 0)])
    return Genome(genes=[Gene(1, "gait", 1, AttributeType.with_body_states([body]))])


def test_initialize_spawns_founders_with_unique_ids():
    world = World(WorldConfig(width=50, height=40, initial_population=10, seed=1))
    world.initialize()

    assert len(world.organisms) == 10
    assert len({o.id for o in world.organisms}) == 10
    assert world.stats.organisms_alive == 10
    assert list(world.stats_history.population) == [10]
    for organism in world.organisms:
        assert 0 <= organism.location[0] < 50
        assert 0 <= organism.location[1] < 40
    assert world.size == (50, 40)


def test_same_seed_gives_same_run():
    worlds = []
    for _ in range(2):
        world = World(WorldConfig(initial_population=5, seed=123))
        world.initialize()
        for _ in range(20):
            world.step()
        worlds.append(world)

    first, second = worlds
    assert [o.location for o in first.organisms] == [o.location for o in second.organisms]
    assert [o.energy for o in first.organisms] == [o.energy for o in second.organisms]


def test_dead_organisms_are_removed_after_the_tick():
    world = World(WorldConfig(initial_population=0, seed=2))
    doomed = world.spawn_organism(single_square_genome(), location=(5, 5))
    survivor = world.spawn_organism(single_square_genome(), location=(6, 6))
    doomed.age = doomed.attributes.max_age - 1
    survivor.attributes.reproduction_rate = 0.0

    dead = world.step()

    assert dead == [doomed]
    assert world.organisms == [survivor]
    assert world.stats.deaths_this_tick == 1
    assert world.stats.total_deaths == 1


def test_offspring_are_appended():
    world = World(WorldConfig(initial_population=0, seed=3))
    parent = world.spawn_organism(single_square_genome(), location=(5, 5))
    parent.attributes.reproduction_rate = 1.0
    parent.attributes.mutation_rate = 0.0

    world.step()

    assert len(world.organisms) == 2
    assert world.organisms[0] is parent
    assert world.organisms[1].age == 0
    assert world.stats.births_this_tick == 1
    assert world.stats.total_births == 1


def test_offspring_are_capped_by_max_population():
    world = World(WorldConfig(initial_population=0, max_population=1, seed=4))
    parent = world.spawn_organism(single_square_genome())
    parent.attributes.reproduction_rate = 1.0
    parent.attributes.mutation_rate = 0.0

    world.step()

    assert world.organisms == [parent]
    assert world.stats.births_this_tick == 0


def test_locations_wrap_around_the_grid():
    world = World(WorldConfig(width=10, height=10, initial_population=0, seed=5))
    organism = world.spawn_organism(single_square_genome(), location=(0, 0))
    organism.attributes.reproduction_rate = 0.0
    organism.attributes.mutation_rate = 0.0
    organism.attributes.body_states = [Body.from_points([(1, 1)])]

    world.step()

    assert organism.location == (8, 8)


def test_stats_history_tracks_each_tick():
    world = World(WorldConfig(initial_population=3, seed=6))
    world.initialize()
    for _ in range(4):
        world.step()

    assert world.stats.tick == 4
    assert len(world.stats_history.population) == 5
    assert world.stats_history.population[-1] == world.stats.organisms_alive


def test_world_never_advances_dead_organisms():
    world = World(WorldConfig(initial_population=0, seed=7))
    organism = world.spawn_organism(single_square_genome())
    organism.energy = 0

    world.step()
    assert world.organisms == []

    # a dead organism reports dead again if someone does advance it
    state, _ = organism.next_frame()
    assert state == OrganismState.DEAD


def test_invalid_config_is_rejected():
    with pytest.raises(ValueError):
        WorldConfig(width=0)
    with pytest.raises(ValueError):
        WorldConfig(initial_population=10, max_population=5)
    with pytest.raises(ValueError):
        RunConfig(report_every=0)


def test_cli_run(capsys):
    args = parse_args(["--ticks", "5", "--population", "4", "--seed", "9", "--report-every", "5"])
    config = build_config(args)
    assert config.world.seed == 9

    world = run(config)

    out = capsys.readouterr().out
    assert "Seed: 9" in out
    assert "Tick 5" in out
    assert world.stats.tick == 5


def test_default_config():
    config = Config.default()
    assert config.world.initial_population <= config.world.max_population
    assert config.run.ticks > 0
