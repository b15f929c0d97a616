"""Arcade window and console entry point for Lights Out.

Sets up the ECS world, event bus and systems, then hands control to Arcade.
"""
from __future__ import annotations

import logging
import random
from typing import Sequence

from arcade import Window, run, set_background_color

from lightsout.cli import parse_config
from lightsout.config import BoardConfig
from lightsout.constants import (
    BACKGROUND_COLOR,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from lightsout.events.bus import EventBus, EVENT_MOUSE_PRESS
from lightsout.systems.game_board import GameBoardSystem
from lightsout.systems.input import InputSystem
from lightsout.systems.render import RenderSystem
from lightsout.world import create_world

logger = logging.getLogger(__name__)


class LightsOutWindow(Window):
    def __init__(
        self,
        config: BoardConfig,
        *,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        rng: random.Random | None = None,
    ):
        super().__init__(width, height, WINDOW_TITLE, resizable=True)
        self.event_bus = EventBus()
        self.world = create_world(rng=rng)
        self.board_system = GameBoardSystem(self.world, self.event_bus, config)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.board_system)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)


def main(argv: Sequence[str] | None = None) -> None:
    args, config = parse_config(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    rng = random.Random(args.seed) if args.seed is not None else None
    logger.info("starting %dx%d board, chance %.2f", config.nrows, config.ncols, config.chance_light_starts_on)
    LightsOutWindow(config, width=args.width, height=args.height, rng=rng)
    run()


if __name__ == "__main__":
    main()
