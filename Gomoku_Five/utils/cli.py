"""CLI options for board size, storage and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku five-in-a-row console game")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--board-size", type=int, help="Default board size for new boards")
    parser.add_argument("--db-url", help="SQLAlchemy database URL for saved boards")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer opponent")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default from settings or WARNING)",
    )
    return parser.parse_args(argv)
