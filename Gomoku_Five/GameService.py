"""Turn management and terminal-state tracking for a five-in-a-row game."""

import logging
from enum import Enum

from .Board import Stone
from .engine import referee, rules
from .engine.errors import GomokuError


LOGGER = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameService:
    """Owns turn and result state for exactly one bound Board.

    Callers serialize attempt_move/reset/rebind per instance; the bound board and
    the turn fields change together.
    """

    FIRST_PLAYER = Stone.PLAYER_A

    def __init__(self, board):
        self._board = board
        self._reset_state()
        LOGGER.info("New game service created with %dx%d board", board.rows, board.columns)

    def _reset_state(self):
        self._current_player = self.FIRST_PLAYER
        self._state = GameState.IN_PROGRESS
        self._winner = None
        self._move_count = 0
        self._last_move = None

    @property
    def board(self):
        return self._board

    @property
    def current_player(self):
        return self._current_player

    @property
    def state(self):
        return self._state

    @property
    def game_over(self):
        return self._state is not GameState.IN_PROGRESS

    @property
    def winner(self):
        """Winning stone, or None while in progress and after a draw."""
        return self._winner

    @property
    def move_count(self):
        return self._move_count

    @property
    def last_move(self):
        return self._last_move

    def attempt_move(self, row, col):
        """Place the current player's stone. Returns False (state untouched) if rejected."""
        try:
            referee.check_move(self._board, row, col, game_over=self.game_over)
        except GomokuError as exc:
            LOGGER.warning("Rejected move (%r, %r) by %s: %s", row, col, self._current_player.name, exc)
            return False

        player = self._current_player
        self._board.set(row, col, player)
        self._move_count += 1
        self._last_move = (row, col)
        LOGGER.info("Move %d: %s placed at (%d, %d)", self._move_count, player.value, row, col)

        if rules.is_win_after_move(self._board, row, col):
            self._state = GameState.WON
            self._winner = player
            LOGGER.info("Player %s wins", player.value)
        elif rules.is_board_full(self._board):
            self._state = GameState.DRAW
            LOGGER.info("Game ended in a draw (board full)")
        else:
            self._current_player = player.opponent
        return True

    def reset(self):
        """Clear the bound board and start over with PLAYER_A to move."""
        self._board.clear()
        self._reset_state()
        LOGGER.info("Game reset")

    def rebind(self, board):
        """Attach a different board (e.g. a loaded one) keeping its stones, and restart turns."""
        self._board = board
        self._reset_state()
        LOGGER.info("Game service rebound to %dx%d board", board.rows, board.columns)
