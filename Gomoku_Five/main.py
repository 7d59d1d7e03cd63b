"""Entry point for the Gomoku console. Load config, open the board store, start the menu."""

import logging
from pathlib import Path

import yaml

from .Console import GomokuConsole
from .storage.board_store import DEFAULT_DATABASE_URL, BoardStore
from .utils.cli import parse_args
from .utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent
LOGGER = logging.getLogger(__name__)


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Five/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_console(args, settings, input_fn=input, output_fn=print):
    board_size = args.board_size or settings.get("board_size", 15)
    min_size = settings.get("min_board_size", 5)
    db_url = args.db_url or settings.get("database_url", DEFAULT_DATABASE_URL)
    seed = args.seed if args.seed is not None else settings.get("seed")

    store = BoardStore(db_url)
    store.initialize()
    return GomokuConsole(
        store,
        input_fn=input_fn,
        output_fn=output_fn,
        seed=seed,
        default_size=board_size,
        min_size=min_size,
    )


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    configure_logging(args.log_level or settings.get("log_level", "WARNING"))

    console = build_console(args, settings)
    log_event("Gomoku console started")
    console.run()


if __name__ == "__main__":
    main()
