"""Move sources for the game: abstract player and text-input human."""


class Player:
    def __init__(self, stone=None):
        self.stone = stone

    def next_move(self, board):
        """Return (row, col) for the next move, or None if no move is available."""
        raise NotImplementedError


def parse_move(raw):
    """Parse 'row col' into a pair of ints; raise ValueError on anything else."""
    parts = raw.split()
    if len(parts) != 2:
        raise ValueError("Invalid input format; expected two integers (e.g. 2 2)")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError("Invalid input format; numbers only") from exc


class HumanPlayer(Player):
    def __init__(self, stone=None, input_fn=input):
        super().__init__(stone)
        self.input_fn = input_fn

    def next_move(self, board):
        label = self.stone.value if self.stone else "?"
        raw = self.input_fn(f"Player {label} -> enter row col: ").strip()
        return parse_move(raw)
