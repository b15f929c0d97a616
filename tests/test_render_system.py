from lightsout.config import BoardConfig
from lightsout.systems.render import RenderSystem
from tests.helpers import grid_of, make_board


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


def test_headless_frame_lays_out_every_cell():
    world, bus, board_system = make_board(grid_of("O.. .O. ..O"))
    render_system = RenderSystem(world, bus, DummyWindow(), board_system)

    ctx = render_system.build_frame(None, headless=True)

    assert set(ctx.cell_positions) == {(r, c) for r in range(3) for c in range(3)}
    x, y = ctx.cell_positions[(1, 1)][1:]
    entry = render_system.get_cell_at_point(x, y)
    assert entry is not None
    assert (entry["view"].row, entry["view"].col) == (1, 1)
    assert entry["view"].is_lit


def test_win_screen_has_no_clickable_cells():
    world, bus, board_system = make_board(grid_of("O.O ... O.O"))
    render_system = RenderSystem(world, bus, DummyWindow(), board_system)
    ctx = render_system.build_frame(None, headless=True)
    x, y = ctx.cell_positions[(0, 0)][1:]
    assert render_system.get_cell_at_point(x, y) is not None

    board_system.flip_cells_around(1, 1)

    assert render_system.get_cell_at_point(x, y) is None
    render_system.build_frame(None, headless=True)
    assert render_system.get_cell_at_point(x, y) is None


def test_frame_tracks_window_resize():
    world, bus, board_system = make_board(config=BoardConfig(nrows=4, ncols=4))
    window = DummyWindow()
    render_system = RenderSystem(world, bus, window, board_system)
    small = render_system.build_frame(None, headless=True).tile_size
    window.width, window.height = 1600, 1200
    large = render_system.build_frame(None, headless=True).tile_size
    assert large > small
