import logging

from ..game_logic import GameLogic, Won, Draw
from ..ui.board_widget import BoardWidget
from . import theme

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, game_logic=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic or GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)

        self._setup_ui()
        self.render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(theme.WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: %s; }
            QPushButton { padding: 6px 14px; }
        """ % theme.TEXT_COLOR)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + subtitle
        self.main_layout.addWidget(self.header_widget)
        self._create_status_bar()          # dot + text + badge
        self.main_layout.addWidget(self.status_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # restart
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        # title + subtitle
        self.header_widget = QWidget()
        vl = QVBoxLayout(self.header_widget)
        self.title_label = QLabel(theme.WINDOW_TITLE)
        f = QFont(); f.setPointSize(20); f.setBold(True); self.title_label.setFont(f)
        self.subtitle_label = QLabel(theme.SUBTITLE)
        for w in (self.title_label, self.subtitle_label):
            w.setAlignment(Qt.AlignCenter)
            vl.addWidget(w)

    def _create_status_bar(self):
        # turn dot, status text, win/draw badge
        self.status_widget = QWidget()
        hl = QHBoxLayout(self.status_widget)
        self.status_dot = QLabel("●")
        self.status_dot.setStyleSheet(f"color: {theme.TURN_COLOR};")
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.win_badge = QLabel("Winner")
        self.win_badge.setAccessibleName("Game won")
        self.win_badge.setStyleSheet(f"color: {theme.WIN_COLOR}; font-weight: bold;")
        self.draw_badge = QLabel("Draw")
        self.draw_badge.setAccessibleName("Game draw")
        self.draw_badge.setStyleSheet(f"color: {theme.DRAW_COLOR}; font-weight: bold;")
        for w in (self.status_dot, self.status_label, self.win_badge, self.draw_badge):
            hl.addWidget(w)

    def _create_bottom_controls(self):
        # restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.reset_button = QPushButton("Restart")
        self.reset_button.setAccessibleName("Restart game")
        self.reset_button.clicked.connect(self.reset_game)
        hl.addStretch(1); hl.addWidget(self.reset_button); hl.addStretch(1)

    def render(self):
        """
        redraw everything from the engine state
        """
        status = self.game_logic.get_status()
        if isinstance(status, Won):
            style = f"color: {theme.WIN_COLOR}; font-weight: bold;"
        elif isinstance(status, Draw):
            style = f"color: {theme.DRAW_COLOR}; font-weight: bold;"
        else:
            style = f"color: {theme.TURN_COLOR}; font-weight: bold;"
        self.status_label.setStyleSheet(style)
        self.status_label.setText(self.game_logic.status_text())
        self.status_dot.setHidden(status.is_over)
        self.win_badge.setHidden(not isinstance(status, Won))
        self.draw_badge.setHidden(not isinstance(status, Draw))
        self.board_widget.refresh()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # engine ignores illegal moves, re-render either way
        logger.debug("cell %d activated", index)
        self.game_logic.play_at(index)
        self.render()

    @Slot()
    def reset_game(self):
        # back to empty board, X to move
        logger.debug("restart requested")
        self.game_logic.reset()
        self.render()
        if self.board_widget.cells:
            self.board_widget.cells[0].setFocus()
