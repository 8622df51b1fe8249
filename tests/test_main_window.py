"""Widget tests for the board and main window, run on the offscreen platform."""

from __future__ import annotations

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from tictactoe.game_logic import EMPTY, O, X, Draw, InProgress, Won
from tictactoe.ui.main_window import TicTacToeWindow


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow()
    win.show()
    yield win
    win.close()
    win.deleteLater()


def _cells(window):
    return window.board_widget.cells


def _click(window, *indices: int) -> None:
    for index in indices:
        _cells(window)[index].click()


def test_initial_render(window) -> None:
    assert window.status_label.text() == "Turn: X"
    assert not window.status_dot.isHidden()
    assert window.win_badge.isHidden()
    assert window.draw_badge.isHidden()
    assert window.reset_button.accessibleName() == "Restart game"
    for index, cell in enumerate(_cells(window)):
        assert cell.isEnabled()
        assert cell.mark == EMPTY
        assert cell.accessibleName() == f"Cell {index + 1}, empty"


def test_click_places_mark_and_disables_cell(window) -> None:
    _click(window, 4)

    cell = _cells(window)[4]
    assert cell.mark == X
    assert not cell.isEnabled()
    assert cell.accessibleName() == "Cell 5, X"
    assert window.status_label.text() == "Turn: O"
    assert window.game_logic.turn == O


def test_clicking_filled_cell_does_nothing(window) -> None:
    _click(window, 0)
    _click(window, 0)

    assert window.game_logic.board[0] == X
    assert window.game_logic.turn == O


@pytest.mark.parametrize("key", [Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space])
def test_keyboard_activation_plays_cell(window, key) -> None:
    QTest.keyClick(_cells(window)[2], key)

    assert window.game_logic.board[2] == X
    assert _cells(window)[2].mark == X
    assert window.status_label.text() == "Turn: O"


def test_other_keys_do_not_play(window) -> None:
    QTest.keyClick(_cells(window)[2], Qt.Key_A)

    assert window.game_logic.board[2] == EMPTY


def test_win_disables_board_and_shows_badge(window) -> None:
    _click(window, 0, 1, 4, 2, 8)

    assert window.game_logic.get_status() == Won(X)
    assert window.status_label.text() == "Winner: X"
    assert not window.win_badge.isHidden()
    assert window.win_badge.accessibleName() == "Game won"
    assert window.draw_badge.isHidden()
    assert window.status_dot.isHidden()
    assert all(not cell.isEnabled() for cell in _cells(window))
    assert [c.index for c in _cells(window) if c.highlighted] == [0, 4, 8]

    # disabled cells swallow both clicks and keys
    _click(window, 3)
    QTest.keyClick(_cells(window)[3], Qt.Key_Return)
    assert window.game_logic.board[3] == EMPTY


def test_draw_shows_draw_badge(window) -> None:
    _click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert window.game_logic.get_status() == Draw()
    assert window.status_label.text() == "It's a draw!"
    assert not window.draw_badge.isHidden()
    assert window.draw_badge.accessibleName() == "Game draw"
    assert window.win_badge.isHidden()
    assert not any(cell.highlighted for cell in _cells(window))


def test_restart_returns_to_initial_render(window) -> None:
    _click(window, 0, 1, 4, 2, 8)
    window.reset_button.click()

    assert window.game_logic.get_status() == InProgress()
    assert window.game_logic.turn == X
    assert window.status_label.text() == "Turn: X"
    assert window.win_badge.isHidden()
    assert not window.status_dot.isHidden()
    for cell in _cells(window):
        assert cell.isEnabled()
        assert cell.mark == EMPTY
        assert not cell.highlighted


def test_out_of_range_intent_is_ignored(window) -> None:
    window.board_widget.cell_clicked.emit(12)

    assert window.game_logic.board == (EMPTY,) * 9
    assert window.status_label.text() == "Turn: X"
