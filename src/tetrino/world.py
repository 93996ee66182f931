import random

from esper import World
from .events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> World:
    """Create the ECS world with a shared random source attached as ``world.random``.

    ``rng`` wins over ``seed``; with neither, an unseeded generator is used.
    """
    world = World()
    setattr(world, "random", rng or random.Random(seed))
    setattr(world, "event_bus", event_bus)
    return world
