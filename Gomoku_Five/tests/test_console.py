"""Scripted sessions through the text menu."""

import pytest

from Gomoku_Five.Board import Board, Stone
from Gomoku_Five.Console import GomokuConsole
from Gomoku_Five.GameService import GameState
from Gomoku_Five.storage.board_store import BoardStore


class Script:
    """Feeds canned answers to input(); raises EOFError when exhausted like stdin."""

    def __init__(self, *answers):
        self._answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


class ScriptedComputer:
    def __init__(self, moves):
        self._moves = list(moves)

    def next_move(self, board):
        return self._moves.pop(0) if self._moves else None


@pytest.fixture
def store(tmp_path):
    s = BoardStore(f"sqlite:///{tmp_path / 'console.db'}")
    s.initialize()
    return s


def make_console(store, *answers, **kwargs):
    out = []
    console = GomokuConsole(store, input_fn=Script(*answers), output_fn=out.append, **kwargs)
    return console, out


def test_exit_option(store):
    console, out = make_console(store, "8")
    console.run()
    assert out[-1] == "Thanks for playing! Goodbye!"
    assert console.service is None


def test_end_of_input_leaves_menu(store):
    console, out = make_console(store, "6")
    console.run()
    assert out[-1] == "Thanks for playing! Goodbye!"


def test_actions_require_a_board(store):
    console, out = make_console(store, "3", "4", "5", "9", "8")
    console.run()
    assert out.count("No board! Create one (1) or load one (2) first.") == 3
    assert "Invalid choice! Please enter 1-8" in out


def test_two_player_game_to_a_win(store):
    moves = ["0 0", "1 0", "0 1", "1 1", "0 2", "1 2", "0 3", "1 3", "0 4"]
    console, out = make_console(store, "1", "5", "3", "n", *moves, "n", "8")
    console.run()
    assert "New 5x5 board created!" in out
    assert "PLAYER X WINS!" in out
    assert console.service.winner is Stone.PLAYER_A
    assert store.list_names() == []


def test_bad_input_during_play_reprompts(store):
    console, out = make_console(store, "1", "5", "3", "n", "a b", "7", "99 99", "2 2", "quit", "8")
    console.run()
    assert "Invalid input format; numbers only" in out
    assert "Invalid input format; expected two integers (e.g. 2 2)" in out
    assert "Invalid! Try again." in out
    assert console.service.board.get(2, 2) is Stone.PLAYER_A
    assert console.service.current_player is Stone.PLAYER_B
    assert console.service.state is GameState.IN_PROGRESS


def test_board_size_below_minimum_uses_default(store):
    console, out = make_console(store, "1", "3", "8", default_size=7)
    console.run()
    assert "Minimum size is 5x5! Using 7x7." in out
    assert console.service.board.rows == 7


def test_blank_board_size_uses_default(store):
    console, out = make_console(store, "1", "", "1", "abc", "8", default_size=9)
    console.run()
    assert out.count("New 9x9 board created!") == 2
    assert "Not a number! Using 9x9." in out


def test_human_beats_scripted_computer(store):
    console, out = make_console(store, "1", "5", "3", "y", "0 0", "0 1", "0 2", "0 3", "0 4", "n", "8")
    console.computer = ScriptedComputer([(4, 0), (4, 1), (4, 2), (4, 3)])
    console.run()
    assert "Computer played: 4 0" in out
    assert "PLAYER X WINS!" in out


def test_computer_win_message(store):
    console, out = make_console(store, "1", "7", "3", "y", "0 0", "2 2", "0 6", "6 0", "6 6", "n", "8")
    console.computer = ScriptedComputer([(3, c) for c in range(5)])
    console.run()
    assert console.service.winner is Stone.PLAYER_B
    assert "COMPUTER WINS!" in out


def test_edit_then_save_and_reload(store):
    answers = ["1", "5", "4", "0 0 x", "1 1 O", "9 9 X", "a b X", "0 1 Q", "1 1 .", "3 3", "done", "5", "edited", "8"]
    console, out = make_console(store, *answers)
    console.run()
    assert "Game saved as: edited" in out
    assert "Format: row col X/O/." in out
    assert "Invalid input! row and col must be numbers." in out
    assert sum(1 for line in out if line.startswith("Invalid input! ")) == 3

    loaded = store.load("edited")
    assert loaded.get(0, 0) is Stone.PLAYER_A
    assert loaded.is_empty(1, 1)
    assert loaded.is_empty(0, 1)


def test_blank_save_name_gets_generated(store):
    console, out = make_console(store, "1", "5", "5", "", "8")
    console.run()
    names = store.list_names()
    assert len(names) == 1
    assert names[0].startswith("save_")
    assert f"Game saved as: {names[0]}" in out


def test_load_rebinds_and_restarts_turns(store):
    saved = Board(5, 5)
    saved.set(2, 2, Stone.PLAYER_A)
    saved.set(2, 3, Stone.PLAYER_B)
    store.save("mid", saved)

    console, out = make_console(store, "1", "6", "2", "missing", "2", "mid", "8")
    console.run()
    assert "No board found with name: missing" in out
    assert "Board 'mid' loaded successfully!" in out
    service = console.service
    assert service.board.rows == 5
    assert service.board.get(2, 3) is Stone.PLAYER_B
    assert service.current_player is Stone.PLAYER_A


def test_play_on_full_loaded_board_stops(store):
    full = Board(5, 5)
    full.deserialize("XXOOX|OOXXO|XXOOX|OOXXO|XOOXX")
    store.save("full", full)
    console, out = make_console(store, "2", "full", "3", "n", "8")
    console.run()
    assert "Board is full; no moves left." in out


def test_play_after_finished_game_starts_over(store):
    moves = ["0 0", "1 0", "0 1", "1 1", "0 2", "1 2", "0 3", "1 3", "0 4"]
    console, out = make_console(store, "1", "5", "3", "n", *moves, "n", "3", "n", "quit", "8")
    console.run()
    assert "Previous game finished; board cleared for a new game." in out
    assert console.service.state is GameState.IN_PROGRESS
    assert console.service.board.is_empty(0, 0)


def test_list_and_delete(store):
    store.save("alpha", Board(5, 5))
    console, out = make_console(store, "6", "7", "alpha", "7", "alpha", "6", "8")
    console.run()
    assert "Saved Boards (1):" in out
    assert "   1. alpha" in out
    assert "Board 'alpha' deleted." in out
    assert "No board found with name: alpha" in out
    assert "Saved Boards (0):" in out
    assert "   (none)" in out


def test_edit_after_finished_game_is_kept_for_next_play(store):
    moves = ["0 0", "1 0", "0 1", "1 1", "0 2", "1 2", "0 3", "1 3", "0 4"]
    answers = ["1", "5", "3", "n", *moves, "n", "4", "3 3 O", "done", "3", "n", "quit", "8"]
    console, out = make_console(store, *answers)
    console.run()
    assert "Board edited after the game ended; a new game starts from this position." in out
    assert "Previous game finished; board cleared for a new game." not in out
    board = console.service.board
    assert board.get(3, 3) is Stone.PLAYER_B
    assert board.get(0, 4) is Stone.PLAYER_A
    assert console.service.state is GameState.IN_PROGRESS
    assert console.service.current_player is Stone.PLAYER_A
