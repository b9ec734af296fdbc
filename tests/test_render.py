import pytest

from tictactoe.config import Settings
from tictactoe.game.actions import place_marker
from tictactoe.game.state import GameState
from tictactoe.ui.render import board_lines, render

PLAIN = Settings(use_color=False, clear_screen=False, show_cell_numbers=True)
COLOR = Settings(use_color=True, clear_screen=False, show_cell_numbers=True)


def test_empty_3x3():
    assert board_lines((None,) * 9, 3, settings=PLAIN) == [
        " 1 | 2 | 3 ",
        "---+---+---",
        " 4 | 5 | 6 ",
        "---+---+---",
        " 7 | 8 | 9 ",
    ]


def test_markers_and_cursor():
    snap = ("X", None, None, None, "O", None, None, None, None)
    lines = board_lines(snap, 3, cursor=4, settings=PLAIN)
    assert lines[0] == " X | 2 | 3 "
    assert lines[2] == " 4 |[O]| 6 "


def test_cursor_on_empty_cell():
    lines = board_lines((None,) * 4, 2, cursor=0, settings=PLAIN)
    assert lines[0] == "[ ]| 2 "
    assert lines[1] == "---+---"


def test_wide_cells_on_large_board():
    lines = board_lines((None,) * 16, 4, settings=PLAIN)
    assert lines[0] == " 1  | 2  | 3  | 4  "
    assert lines[-1] == " 13 | 14 | 15 | 16 "
    assert lines[1] == "----+----+----+----"


def test_single_cell():
    assert board_lines(("X",), 1, settings=PLAIN) == [" X "]


def test_hidden_numbers():
    s = Settings(use_color=False, show_cell_numbers=False)
    assert board_lines((None,) * 4, 2, settings=s)[0] == "   |   "


def test_color_marks_cursor_with_reverse_video():
    lines = board_lines((None,) * 9, 3, cursor=0, settings=COLOR)
    assert "\033[7m" in lines[0]
    assert "\033[7m" not in lines[2]


def test_default_settings_use_color():
    assert "\033[" in board_lines((None,) * 4, 2)[0]


def test_highlight_winning_line():
    snap = ("X", "O", None, "X", "O", None, "X", None, None)
    lines = board_lines(snap, 3, highlight=[0, 3, 6], settings=COLOR)
    assert lines[0].startswith("\033[32m")
    assert not lines[0].split("|")[1].startswith("\033[32m")


def test_highlight_winning_line_without_color():
    snap = ("X", "O", None, "X", "O", None, "X", None, None)
    lines = board_lines(snap, 3, highlight=[0, 3, 6], settings=PLAIN)
    assert lines != board_lines(snap, 3, settings=PLAIN)
    assert lines[0] == ">X<| O | 3 "
    assert lines[2] == ">X<| O | 6 "
    assert lines[4] == ">X<| 8 | 9 "


def test_winning_cell_under_cursor_shows_the_line():
    snap = ("X", "X", "X", "O", "O", None, None, None, None)
    lines = board_lines(snap, 3, cursor=2, highlight=[0, 1, 2], settings=PLAIN)
    assert lines[0] == ">X<|>X<|>X<"


def test_no_ansi_codes_without_color():
    snap = ("X", "O", None, None, None, None, None, None, None)
    lines = board_lines(snap, 3, cursor=1, highlight=[0], settings=PLAIN)
    assert not any("\033" in line for line in lines)


def test_snapshot_size_checked():
    with pytest.raises(ValueError):
        board_lines((None,) * 8, 3, settings=PLAIN)


def test_render_prints_board_and_status(capsys):
    state = GameState.new(3, PLAIN)
    place_marker(state)
    render(state)
    out = capsys.readouterr().out
    assert "TIC-TAC-TOE" in out
    assert "Player O's turn." in out
    assert "[X]| 2 | 3 " in out
    assert "\033" not in out


def test_render_clears_screen_when_asked(capsys):
    state = GameState.new(2, Settings(use_color=False, clear_screen=True))
    render(state)
    assert capsys.readouterr().out.startswith("\033[2J\033[H")
