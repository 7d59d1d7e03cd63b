"""Move validation: terminal state, bounds and occupancy."""

from .errors import IllegalMove, OutOfBounds


def check_move(board, row, col, game_over=False):
    """
    Validate a move against the game state, bounds and occupancy.
    Raises IllegalMove/OutOfBounds on invalid moves.
    """
    if game_over:
        raise IllegalMove("Game is already over")
    if not board.is_valid_position(row, col):
        raise OutOfBounds(row, col, board.rows, board.columns)
    if not board.is_empty(row, col):
        raise IllegalMove(f"Cell ({row}, {col}) already occupied")
    return True
