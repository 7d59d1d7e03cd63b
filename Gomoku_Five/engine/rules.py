"""Five-in-a-row win detection and board-full (draw) detection."""

WIN_LENGTH = 5

# (d_row, d_col): horizontal, vertical, diagonal, anti-diagonal
AXES = ((0, 1), (1, 0), (1, 1), (1, -1))


def count_direction(board, row, col, d_row, d_col, stone):
    """Count contiguous `stone` cells from (row, col) (exclusive) along (d_row, d_col)."""
    count = 0
    r, c = row + d_row, col + d_col
    while board.is_valid_position(r, c) and board.cells[r][c] is stone:
        count += 1
        r += d_row
        c += d_col
    return count


def run_length(board, row, col, d_row, d_col):
    """Length of the run through (row, col) on one axis, counting the stone itself."""
    stone = board.get(row, col)
    forward = count_direction(board, row, col, d_row, d_col, stone)
    backward = count_direction(board, row, col, -d_row, -d_col, stone)
    return 1 + forward + backward


def is_win_after_move(board, row, col):
    """Assumes the stone is already placed. Overlines (6+) also win."""
    if board.is_empty(row, col):
        return False
    for d_row, d_col in AXES:
        if run_length(board, row, col, d_row, d_col) >= WIN_LENGTH:
            return True
    return False


def is_board_full(board):
    return board.is_full()
