from PySide6.QtWidgets import QWidget, QSizePolicy, QPushButton, QGridLayout
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import X, BOARD_SIZE, CELL_COUNT
from . import theme

# keys that activate a focused cell, same as a click
ACTIVATE_KEYS = (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space)


class CellButton(QPushButton):
    """
    one board cell: paints its mark, emits its index when activated
    """
    activated = Signal(int)

    def __init__(self, index, parent=None):
        super().__init__(parent)
        self.index = index
        self.mark = ''
        self.highlighted = False
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(50, 50))
        self.setFocusPolicy(Qt.StrongFocus)
        self.clicked.connect(lambda: self.activated.emit(self.index))

    def set_state(self, mark, label, disabled, highlighted=False):
        # everything comes from the engine, nothing kept between renders
        self.mark = mark
        self.highlighted = highlighted
        self.setEnabled(not disabled)
        self.setAccessibleName(label)
        self.setToolTip(label)
        self.update()

    def keyPressEvent(self, event):
        """
        enter/space activate the cell
        """
        if event.key() in ACTIVATE_KEYS and not event.isAutoRepeat():
            event.accept()
            self.activated.emit(self.index)
            return
        super().keyPressEvent(event)

    def paintEvent(self, event):
        """
        draw cell background and X/O mark
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            bg = theme.CELL_HIGHLIGHT_COLOR if self.highlighted else theme.CELL_BG_COLOR
            painter.fillRect(self.rect(), QColor(bg))
            painter.setPen(QPen(QColor(theme.CELL_BORDER_COLOR), 2))
            painter.drawRect(self.rect().adjusted(1, 1, -1, -1))
            if self.hasFocus():
                painter.setPen(QPen(QColor(theme.TURN_COLOR), 2, Qt.DashLine))
                painter.drawRect(self.rect().adjusted(4, 4, -4, -4))
            if not self.mark:
                return
            w, h = self.width(), self.height()
            cx, cy = w / 2, h / 2
            rad = min(w, h) / 2 * theme.MARK_SCALE
            if self.mark == X:
                painter.setPen(QPen(QColor(theme.X_COLOR), theme.MARK_PEN_WIDTH))
                # two crossing lines
                painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
            else:
                painter.setPen(QPen(QColor(theme.O_COLOR), theme.MARK_PEN_WIDTH))
                painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()


class BoardWidget(QWidget):
    """
    3x3 grid of cells rendered from the game logic
    """
    cell_clicked = Signal(int)  # emits cell index on click or key

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(150, 150))
        self.setAccessibleName("Tic Tac Toe board")
        self.setStyleSheet(f"background-color: {theme.BOARD_BG_COLOR};")

        layout = QGridLayout(self)
        layout.setSpacing(4)
        self.cells = []
        for index in range(CELL_COUNT):
            cell = CellButton(index, self)
            cell.activated.connect(self.cell_clicked)
            row, col = divmod(index, BOARD_SIZE)
            layout.addWidget(cell, row, col)
            self.cells.append(cell)
        self.refresh()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def refresh(self):
        """
        re-read board, disabled flags, labels and winning line
        """
        logic = self.game_logic
        board = logic.board
        line = logic.winning_line() or ()
        for cell in self.cells:
            i = cell.index
            cell.set_state(board[i], logic.cell_label(i),
                           logic.is_cell_disabled(i), i in line)
