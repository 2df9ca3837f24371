"""Window layout and colors for the overlay."""

WINDOW_TITLE = "Vale Guardian Timer"

SCREEN_W = 150
SCREEN_H = 190
WINDOW_POS = (10, 800)

FPS = 30

LINE_H = 30
MARGIN_X = 10
# Strike lines sit under their timer, indented.
STRIKE_INDENT = 10

BG_COLOR = (238, 238, 238)
TEXT_COLOR = (20, 20, 20)
STOPPED_COLOR = (140, 140, 140)
