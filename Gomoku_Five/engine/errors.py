"""Exception types raised by the board and the move referee."""


class GomokuError(Exception):
    """Base class for engine errors."""


class OutOfBounds(GomokuError, IndexError):
    def __init__(self, row, col, rows=None, columns=None):
        self.row = row
        self.col = col
        if rows is None:
            msg = f"Position ({row}, {col}) is out of bounds"
        else:
            msg = f"Position ({row}, {col}) is outside a {rows}x{columns} board"
        super().__init__(msg)


class IllegalMove(GomokuError, ValueError):
    pass


class InvalidDimension(GomokuError, ValueError):
    pass


class MalformedSerialization(GomokuError, ValueError):
    pass
