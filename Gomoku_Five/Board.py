"""Board state container: cell storage, serialization and text rendering."""

from enum import Enum

from .engine.errors import InvalidDimension, MalformedSerialization, OutOfBounds


ROW_DELIMITER = "|"


class Stone(Enum):
    EMPTY = "."
    PLAYER_A = "X"
    PLAYER_B = "O"

    @classmethod
    def from_symbol(cls, symbol):
        try:
            return cls(symbol)
        except ValueError as exc:
            raise MalformedSerialization(f"Unknown cell symbol: {symbol!r}") from exc

    @property
    def opponent(self):
        if self is Stone.PLAYER_A:
            return Stone.PLAYER_B
        if self is Stone.PLAYER_B:
            return Stone.PLAYER_A
        raise ValueError("EMPTY has no opponent")

    def __str__(self):
        return self.value


class Board:
    def __init__(self, rows=15, columns=None, *, strict=True):
        """Create an all-empty rows x columns grid (square when columns is omitted).

        With strict=True every dimension must be a positive int; strict=False
        only refuses sizes no grid can be built from (negative or non-int).
        """
        if columns is None:
            columns = rows
        for name, value in (("rows", rows), ("columns", columns)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimension(f"{name} must be an int, got {value!r}")
            if value < 0 or (strict and value == 0):
                raise InvalidDimension(f"{name} must be positive, got {value}")
        self._rows = rows
        self._columns = columns
        self.cells = [[Stone.EMPTY] * columns for _ in range(rows)]

    @property
    def rows(self):
        return self._rows

    @property
    def columns(self):
        return self._columns

    def is_valid_position(self, row, col):
        if isinstance(row, bool) or isinstance(col, bool):
            return False
        if not isinstance(row, int) or not isinstance(col, int):
            return False
        return 0 <= row < self._rows and 0 <= col < self._columns

    def _require(self, row, col):
        if not self.is_valid_position(row, col):
            raise OutOfBounds(row, col, self._rows, self._columns)

    def get(self, row, col):
        self._require(row, col)
        return self.cells[row][col]

    def set(self, row, col, stone):
        """Overwrite a cell without any rule checks (used by board editors)."""
        self._require(row, col)
        if not isinstance(stone, Stone):
            stone = Stone.from_symbol(stone)
        self.cells[row][col] = stone

    def is_empty(self, row, col):
        return self.get(row, col) is Stone.EMPTY

    def empty_cells(self):
        for row in range(self._rows):
            for col in range(self._columns):
                if self.cells[row][col] is Stone.EMPTY:
                    yield row, col

    def is_full(self):
        return all(stone is not Stone.EMPTY for line in self.cells for stone in line)

    def clear(self):
        for line in self.cells:
            for col in range(self._columns):
                line[col] = Stone.EMPTY

    def serialize(self):
        """Encode the grid row-major: one symbol per cell, rows joined by '|'."""
        return ROW_DELIMITER.join("".join(stone.value for stone in line) for line in self.cells)

    def deserialize(self, data, *, strict=False):
        """
        Load cells from serialize() output.
        Lenient mode ignores surplus rows/symbols, leaves cells without data untouched
        and skips unknown symbols. Strict mode raises MalformedSerialization instead.
        """
        if not data:
            return
        row_data = data.split(ROW_DELIMITER)
        if strict:
            # Validate everything first so a bad string never half-loads.
            self.cells = self._parse_strict(row_data)
            return
        for row, line in enumerate(row_data[: self._rows]):
            for col, symbol in enumerate(line[: self._columns]):
                try:
                    self.cells[row][col] = Stone.from_symbol(symbol)
                except MalformedSerialization:
                    continue

    def _parse_strict(self, row_data):
        if len(row_data) != self._rows:
            raise MalformedSerialization(f"Expected {self._rows} rows, got {len(row_data)}")
        parsed = []
        for row, line in enumerate(row_data):
            if len(line) != self._columns:
                raise MalformedSerialization(
                    f"Row {row} has {len(line)} cells, expected {self._columns}"
                )
            parsed.append([Stone.from_symbol(symbol) for symbol in line])
        return parsed

    @classmethod
    def from_serialized(cls, rows, columns, data, *, strict=False):
        board = cls(rows, columns)
        board.deserialize(data, strict=strict)
        return board

    def render(self):
        """Plain-text grid with row and column indices, for display only."""
        width = max(len(str(max(self._rows, self._columns) - 1)), 1)
        header = " " * (width + 1) + " ".join(str(col).rjust(width) for col in range(self._columns))
        lines = [header]
        for row, line in enumerate(self.cells):
            cells = " ".join(stone.value.rjust(width) for stone in line)
            lines.append(f"{str(row).rjust(width)} {cells}")
        return "\n".join(lines)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Board(rows={self._rows}, columns={self._columns})"
