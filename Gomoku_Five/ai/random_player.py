"""Computer opponent: uniform random choice among empty cells."""

import logging
import random

from ..Player import Player


LOGGER = logging.getLogger(__name__)


class RandomPlayer(Player):
    def __init__(self, stone=None, seed=None):
        super().__init__(stone)
        # Per-instance generator so sessions stay independent and seedable.
        self.rng = random.Random(seed)

    def next_move(self, board):
        moves = list(board.empty_cells())
        if not moves:
            LOGGER.warning("No available moves for computer player")
            return None
        move = self.rng.choice(moves)
        LOGGER.info("Computer selected move at (%d, %d)", *move)
        return move
