"""Terminal screen shown instead of the grid once every light is on."""
from __future__ import annotations

from typing import TYPE_CHECKING

from lightsout.constants import HINT_TEXT_COLOR, NEW_GAME_HINT, WIN_MESSAGE, WIN_TEXT_COLOR

if TYPE_CHECKING:
    from lightsout.rendering.context import RenderContext


class WinRenderer:
    def __init__(self, message: str = WIN_MESSAGE, hint: str = NEW_GAME_HINT) -> None:
        self.message = message
        self.hint = hint

    def render(self, arcade, ctx: RenderContext, moves: int, headless: bool) -> None:
        if headless:
            return
        center_x = ctx.window_width / 2
        center_y = ctx.window_height / 2
        arcade.draw_text(
            self.message,
            center_x,
            center_y + 24,
            WIN_TEXT_COLOR,
            40,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        noun = "move" if moves == 1 else "moves"
        arcade.draw_text(
            f"Solved in {moves} {noun}. {self.hint}",
            center_x,
            center_y - 28,
            HINT_TEXT_COLOR,
            16,
            anchor_x="center",
            anchor_y="center",
        )
