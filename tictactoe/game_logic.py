import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

X, O, EMPTY = 'X', 'O', ''
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, then columns, then diagonals; checked in this order
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass(frozen=True)
class InProgress:
    """
    game still running
    """
    is_over = False


@dataclass(frozen=True)
class Won:
    """
    a triple is filled with one mark
    """
    mark: str
    is_over = True


@dataclass(frozen=True)
class Draw:
    """
    board full, no triple
    """
    is_over = True


def winning_line(board):
    """
    first triple holding three equal marks, or None
    """
    for a, b, c in WIN_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def get_status(board):
    """
    classify a board: Won(mark), Draw or InProgress
    """
    line = winning_line(board)
    # win wins over a full board
    if line is not None:
        return Won(board[line[0]])
    if all(cell != EMPTY for cell in board):
        return Draw()
    return InProgress()


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        init board and turn
        """
        self._board = [EMPTY] * CELL_COUNT   # row-major, index = row*3+col
        self._turn = X                       # X always moves first

    @property
    def board(self):
        # snapshot, callers can't mutate it
        return tuple(self._board)

    @property
    def turn(self):
        return self._turn

    @property
    def is_over(self):
        return self.get_status().is_over

    def get_status(self):
        """
        derived from the board on every call, never cached
        """
        return get_status(self._board)

    def play_at(self, index):
        """
        place the current mark at index and flip the turn
        returns True if applied; illegal moves are ignored
        """
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < CELL_COUNT:
            logger.debug("ignored move at %r: out of range", index)
            return False
        if self.is_over:
            logger.debug("ignored move at %d: game over", index)
            return False
        if self._board[index] != EMPTY:
            logger.debug("ignored move at %d: cell taken by %s",
                         index, self._board[index])
            return False

        mark = self._turn
        self._board[index] = mark
        self._turn = O if mark == X else X
        logger.info("%s played cell %d", mark, index)

        status = self.get_status()
        if isinstance(status, Won):
            logger.info("game won by %s", status.mark)
        elif isinstance(status, Draw):
            logger.info("game ended in a draw")
        return True

    def reset(self):
        """
        clear board, X to move
        """
        self._board = [EMPTY] * CELL_COUNT
        self._turn = X
        logger.info("game reset")

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if 0 <= index < CELL_COUNT:
            return self._board[index] == EMPTY
        return False

    def is_cell_disabled(self, index):
        # filled cells and every cell after the game ends
        return self.is_over or not self.is_cell_empty(index)

    def winning_line(self):
        return winning_line(self._board)

    def status_text(self):
        """
        one-line status for the status bar
        """
        status = self.get_status()
        if isinstance(status, Won):
            return f"Winner: {status.mark}"
        if isinstance(status, Draw):
            return "It's a draw!"
        return f"Turn: {self._turn}"

    def cell_label(self, index):
        # accessible name, one-based for screen readers
        value = self._board[index] or 'empty'
        return f"Cell {index + 1}, {value}"
