"""Text menu front end: create/load/edit/save boards and play against a human or the computer."""

import logging
import time

from .Board import Board, Stone
from .GameService import GameService, GameState
from .Player import parse_move
from .ai.random_player import RandomPlayer
from .engine.errors import GomokuError


LOGGER = logging.getLogger(__name__)

MENU = """   MAIN MENU
1. Create New Board
2. Load Saved Board
3. Play Game{ready}
4. Edit Board (place stones manually)
5. Save Current Board
6. List Saved Boards
7. Delete Saved Board
8. Exit"""

QUIT_WORDS = ("quit", "exit", "q")


class GomokuConsole:
    def __init__(self, store, input_fn=input, output_fn=print, seed=None, default_size=15, min_size=5):
        self.store = store
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.default_size = default_size
        self.min_size = min_size
        self.computer = RandomPlayer(Stone.PLAYER_B, seed=seed)
        self.service = None
        self.vs_computer = False

    def _ask(self, prompt):
        return self.input_fn(prompt).strip()

    def _say(self, message=""):
        self.output_fn(message)

    def run(self):
        """Main menu loop. Returns when the user exits or input runs out."""
        self._say("WELCOME TO GO-MOKU - Five in a Row")
        actions = {
            "1": self.create_new_board,
            "2": self.load_board,
            "3": self.play_game,
            "4": self.edit_board,
            "5": self.save_board,
            "6": self.list_boards,
            "7": self.delete_board,
        }
        needs_board = {"3", "4", "5"}
        try:
            while True:
                self._say(MENU.format(ready=" (ready)" if self.service else ""))
                choice = self._ask("Choose (1-8): ")
                if choice == "8":
                    break
                action = actions.get(choice)
                if action is None:
                    self._say("Invalid choice! Please enter 1-8")
                elif choice in needs_board and self.service is None:
                    self._say("No board! Create one (1) or load one (2) first.")
                else:
                    action()
        except EOFError:
            LOGGER.info("Input closed; leaving menu")
        self._say("Thanks for playing! Goodbye!")

    def _attach(self, board):
        if self.service is None:
            self.service = GameService(board)
        else:
            self.service.rebind(board)
        self.vs_computer = False

    def create_new_board(self):
        raw = self._ask(f"Enter board size (default {self.default_size}): ")
        size = self.default_size
        if raw:
            try:
                size = int(raw)
            except ValueError:
                self._say(f"Not a number! Using {self.default_size}x{self.default_size}.")
        if size < self.min_size:
            self._say(f"Minimum size is {self.min_size}x{self.min_size}! Using {self.default_size}x{self.default_size}.")
            size = self.default_size
        board = Board(size, size)
        self._attach(board)
        self._say(f"New {size}x{size} board created!")
        self._say(board.render())

    def load_board(self):
        name = self._ask("Enter saved game name: ")
        if not name:
            return
        board = self.store.load(name)
        if board is None:
            self._say(f"No board found with name: {name}")
            return
        self._attach(board)
        self._say(f"Board '{name}' loaded successfully!")
        self._say(board.render())

    def play_game(self):
        service = self.service
        if service.game_over:
            self._say("Previous game finished; board cleared for a new game.")
            service.reset()
        self.vs_computer = self._ask("Play against Computer? (y/n): ").lower() == "y"

        while not service.game_over:
            board = service.board
            if board.is_full():
                self._say("Board is full; no moves left.")
                return
            self._say(board.render())
            player = service.current_player
            if self.vs_computer and player is Stone.PLAYER_B:
                self._say(f"Computer ({player.value}) is thinking...")
                move = self.computer.next_move(board)
                if move is None:
                    return
                service.attempt_move(*move)
                self._say(f"Computer played: {move[0]} {move[1]}")
                continue

            raw = self._ask(f"Player {player.value} -> enter row col: ")
            if raw.lower() in QUIT_WORDS:
                self._say("Leaving game; progress is kept on the board.")
                return
            try:
                row, col = parse_move(raw)
            except ValueError as exc:
                self._say(str(exc))
                continue
            if not service.attempt_move(row, col):
                self._say("Invalid! Try again.")

        self._say(service.board.render())
        self._say(self.result_message())

        if self._ask("Save this game? (y/n): ").lower() == "y":
            self.save_board()

    def result_message(self):
        service = self.service
        if service.state is GameState.DRAW:
            return "IT'S A DRAW!"
        if service.winner is Stone.PLAYER_B and self.vs_computer:
            return "COMPUTER WINS!"
        if service.winner is not None:
            return f"PLAYER {service.winner.value} WINS!"
        return "Game in progress."

    def edit_board(self):
        """Place or remove stones directly, bypassing the rules."""
        board = self.service.board
        edited = False
        self._say("Edit Mode - type: row col X   or   row col O   or   row col .   (or 'done')")
        while True:
            line = self._ask("> ")
            if line.lower() == "done":
                break
            parts = line.split()
            if len(parts) != 3:
                self._say("Format: row col X/O/.")
                continue
            try:
                row, col = int(parts[0]), int(parts[1])
                board.set(row, col, parts[2].upper())
            except GomokuError as exc:
                self._say(f"Invalid input! {exc}")
                continue
            except ValueError:
                self._say("Invalid input! row and col must be numbers.")
                continue
            edited = True
            self._say(board.render())

        if edited and self.service.game_over:
            # Edited finished position becomes the start of a new game.
            self.service.rebind(board)
            self._say("Board edited after the game ended; a new game starts from this position.")

    def save_board(self):
        name = self._ask("Save as (name): ")
        if not name:
            name = f"save_{int(time.time() * 1000)}"
        if self.store.save(name, self.service.board):
            self._say(f"Game saved as: {name}")
        else:
            self._say("Save failed!")

    def list_boards(self):
        names = self.store.list_names()
        self._say(f"Saved Boards ({len(names)}):")
        if not names:
            self._say("   (none)")
        for i, name in enumerate(names, start=1):
            self._say(f"   {i}. {name}")

    def delete_board(self):
        name = self._ask("Delete which saved board? ")
        if not name:
            return
        if self.store.delete(name):
            self._say(f"Board '{name}' deleted.")
        else:
            self._say(f"No board found with name: {name}")
