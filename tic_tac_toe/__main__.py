import argparse
import logging
from collections.abc import Iterable, Sequence

from tic_tac_toe.factories import UI_CHOICES, create_match, create_ui

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(UI_CHOICES, argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    match = create_match()
    ui = create_ui(args.ui, match, args.player1, args.player2)
    ui.run()


def _parse_args(ui_choices: Iterable[str], argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tic-tac-toe")

    parser.add_argument("--ui", choices=tuple(ui_choices), default="terminal")
    parser.add_argument("--player1", default="", help="name of the first player (plays X)")
    parser.add_argument("--player2", default="", help="name of the second player (plays O)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", type=str.upper)

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
