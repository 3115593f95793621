#!/usr/bin/env python3
"""
Frogger — Terminal road-crossing game with curses.
Features:
- Arrow keys / WASD move the frog one cell at a time
- Cars drive right across the road and wrap around the board
- One point for every crossing to the far bank, then the frog starts over
- Game over on contact with a car; the board stays frozen until you quit
- Fixed 200 ms tick: input, update, redraw, then sleep out the frame
"""

import curses
import enum
import time

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

WIDTH = 20
HEIGHT = 10

FROG_CHAR = "@"
CAR_CHAR = ">"
ROAD_CHAR = "-"
WATER_CHAR = "~"

FROG_START = (WIDTH // 2, HEIGHT - 1)
CAR_START = [(0, 2), (5, 4), (10, 6)]  # (x, y), one car per lane

TICK_RATE = 0.2  # seconds per frame

GAME_OVER_MSG = "GAME OVER! Press 'q' to quit."

# Board, score line, game over line
MIN_ROWS = HEIGHT + 2
MIN_COLS = max(WIDTH, len(GAME_OVER_MSG)) + 1

# Color pair IDs
COLOR_FROG = 1
COLOR_CAR = 2
COLOR_ROAD = 3
COLOR_WATER = 4
COLOR_HUD = 5
COLOR_GAMEOVER = 6


class Intent(enum.Enum):
    """What a key press asks the game to do."""
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    QUIT = enum.auto()


class Status(enum.Enum):
    ACTIVE = enum.auto()
    TERMINAL = enum.auto()


# Directions: (dx, dy)
MOVES = {
    Intent.UP: (0, -1),
    Intent.DOWN: (0, 1),
    Intent.LEFT: (-1, 0),
    Intent.RIGHT: (1, 0),
}

KEY_MAP = {
    curses.KEY_UP: Intent.UP, ord('w'): Intent.UP, ord('W'): Intent.UP,
    curses.KEY_DOWN: Intent.DOWN, ord('s'): Intent.DOWN, ord('S'): Intent.DOWN,
    curses.KEY_LEFT: Intent.LEFT, ord('a'): Intent.LEFT, ord('A'): Intent.LEFT,
    curses.KEY_RIGHT: Intent.RIGHT, ord('d'): Intent.RIGHT, ord('D'): Intent.RIGHT,
    ord('q'): Intent.QUIT, ord('Q'): Intent.QUIT,
}


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

class Game:
    """Frog, cars, score and status for one run."""

    def __init__(self):
        self.frog_x, self.frog_y = FROG_START
        self.cars = [{"x": x, "y": y} for x, y in CAR_START]
        self.score = 0
        self.status = Status.ACTIVE

    @property
    def frog(self):
        return (self.frog_x, self.frog_y)

    @property
    def game_over(self):
        return self.status is Status.TERMINAL

    def reset_frog(self):
        self.frog_x, self.frog_y = FROG_START

    def car_at(self, x, y):
        """Return True if any car occupies cell (x, y)."""
        return any(car["x"] == x and car["y"] == y for car in self.cars)

    def advance(self):
        """Run one tick of the world.

        Every car moves before any collision check, so a car driving
        into the frog's cell this tick is caught. The crossing check runs
        last and on its own: a frog on the top row scores even if a car
        hit it on the same tick.
        """
        for car in self.cars:
            car["x"] = (car["x"] + 1) % WIDTH

        if self.car_at(self.frog_x, self.frog_y):
            self.status = Status.TERMINAL

        if self.frog_y == 0:
            self.score += 1
            self.reset_frog()

    def apply_movement(self, intent):
        """Move the frog one cell; moves off the board are ignored.

        Does not look at status, callers skip it once the game is over.
        """
        if intent not in MOVES:
            return
        dx, dy = MOVES[intent]
        new_x = self.frog_x + dx
        new_y = self.frog_y + dy
        if 0 <= new_x < WIDTH and 0 <= new_y < HEIGHT:
            self.frog_x = new_x
            self.frog_y = new_y


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def poll_intent(win):
    """Read at most one pending key without blocking.

    The window must be in nodelay mode. Returns an Intent, or None when
    no key is waiting or the key has no binding.
    """
    key = win.getch()
    if key == -1:
        return None
    return KEY_MAP.get(key)


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------

def step(game, intent):
    """Apply one frame of input and simulation. Returns False on quit."""
    if intent is Intent.QUIT:
        return False
    if intent is not None and not game.game_over:
        game.apply_movement(intent)
    if not game.game_over:
        game.advance()
    return True


# ---------------------------------------------------------------------------
# Draw functions
# ---------------------------------------------------------------------------

def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_FROG, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_CAR, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_ROAD, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_WATER, curses.COLOR_BLUE, -1)
    curses.init_pair(COLOR_HUD, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_GAMEOVER, curses.COLOR_RED, -1)


def cell_glyph(game, x, y):
    """Pick the character for one board cell. The frog draws over cars."""
    glyph = WATER_CHAR if y < HEIGHT // 2 else ROAD_CHAR
    if game.car_at(x, y):
        glyph = CAR_CHAR
    if (x, y) == game.frog:
        glyph = FROG_CHAR
    return glyph


def draw(stdscr, game):
    """Redraw the whole board, the score and, once over, the game over line."""
    attrs = {
        FROG_CHAR: curses.color_pair(COLOR_FROG) | curses.A_BOLD,
        CAR_CHAR: curses.color_pair(COLOR_CAR) | curses.A_BOLD,
        ROAD_CHAR: curses.color_pair(COLOR_ROAD),
        WATER_CHAR: curses.color_pair(COLOR_WATER),
    }
    for y in range(HEIGHT):
        for x in range(WIDTH):
            glyph = cell_glyph(game, x, y)
            stdscr.addch(y, x, glyph, attrs[glyph])

    stdscr.addstr(HEIGHT, 0, f"Score: {game.score}", curses.color_pair(COLOR_HUD))

    if game.game_over:
        stdscr.addstr(HEIGHT + 1, 0, GAME_OVER_MSG,
                      curses.color_pair(COLOR_GAMEOVER) | curses.A_BOLD)

    stdscr.refresh()


def draw_too_small(stdscr, max_y, max_x):
    """Tell the player the terminal can't fit the board and wait for 'q'.

    The game never starts in this case; quitting here ends the program.
    """
    stdscr.nodelay(False)
    stdscr.erase()
    stdscr.addstr(0, 0, "Terminal too small!", curses.color_pair(COLOR_GAMEOVER))
    stdscr.addstr(1, 0, f"Need at least {MIN_ROWS}x{MIN_COLS}, got {max_y}x{max_x}",
                  curses.color_pair(COLOR_GAMEOVER))
    stdscr.addstr(2, 0, "Press 'q' to quit", curses.color_pair(COLOR_GAMEOVER))
    stdscr.refresh()
    while True:
        ch = stdscr.getch()
        if ch == ord('q') or ch == ord('Q'):
            return


# ---------------------------------------------------------------------------
# Main game
# ---------------------------------------------------------------------------

def main(stdscr):
    """Main game loop — called by curses.wrapper()."""
    curses.raw()
    curses.set_escdelay(25)  # a lone ESC would otherwise stall a frame
    curses.curs_set(0)
    stdscr.nodelay(True)
    init_colors()

    max_y, max_x = stdscr.getmaxyx()
    if max_y < MIN_ROWS or max_x < MIN_COLS:
        draw_too_small(stdscr, max_y, max_x)
        return

    stdscr.erase()
    game = Game()

    while True:
        frame_start = time.time()

        intent = poll_intent(stdscr)
        if not step(game, intent):
            break

        draw(stdscr, game)

        # No catch-up: a slow frame just makes the next one start late
        elapsed = time.time() - frame_start
        if elapsed < TICK_RATE:
            time.sleep(TICK_RATE - elapsed)


def run():
    curses.wrapper(main)


if __name__ == "__main__":
    run()
