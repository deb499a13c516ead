"""Allow running SimpleTimer as a module: python -m simpletimer."""

from __future__ import annotations

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import SimpleTimerApp
from .settings import load_settings
from .timer.durations import is_valid_hhmm


def _duration_arg(value: str) -> str:
    if not is_valid_hhmm(value):
        raise argparse.ArgumentTypeError(f"{value!r} is not HH:MM (minutes 00-59)")
    return value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simpletimer", description="A very simple countdown timer.")
    parser.add_argument(
        "--duration", type=_duration_arg, metavar="HH:MM",
        help="preselect a duration instead of the last one used",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    if args.duration:
        settings.last_label = args.duration

    app = QApplication(sys.argv[:1])
    app.setApplicationName("SimpleTimer")
    app.setOrganizationName("SimpleTimer")

    window = SimpleTimerApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
