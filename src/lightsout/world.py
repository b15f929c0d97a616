import random

from esper import World

from lightsout.components.game_state import GameMode, GameState


def create_world(
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the ECS world holding the global game state.

    The board entity itself is created by ``GameBoardSystem`` so that the
    system owning the grid also owns its lifecycle.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    return world
