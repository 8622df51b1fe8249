# -----------------------------------------------------------------------------
# WINDOW STRINGS
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic Tac Toe"
SUBTITLE = "Two players. One device. Classic fun."

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BG_COLOR = "#333"
CELL_BG_COLOR = "#2b2b2b"
CELL_BORDER_COLOR = "#555"
CELL_HIGHLIGHT_COLOR = "#3d5a3d"   # cells of the winning line
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
MARK_PEN_WIDTH = 4
MARK_SCALE = 0.7                   # mark radius relative to half a cell

# -----------------------------------------------------------------------------
# STATUS COLORS
# -----------------------------------------------------------------------------

TEXT_COLOR = "#eee"
TURN_COLOR = "#8acaff"
WIN_COLOR = "lime"
DRAW_COLOR = "#f0c674"
