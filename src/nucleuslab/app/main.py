"""
Run with: python -m nucleuslab
"""
from __future__ import annotations

import argparse
import sys

import pyqtgraph as pg

from nucleuslab.app.application import create_app
from nucleuslab.logging_config import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="nucleuslab",
        description="Interactive lab: protons, neutrons and the mass number of a nucleus",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    logger = setup_logging(level=args.log_level, log_file=args.log_file)

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOption("antialias", True)

    app = create_app([sys.argv[0]])

    # Imported late: widgets need the QApplication and the pyqtgraph options first
    from nucleuslab.app.ui.main_window import MainWindow

    win = MainWindow()
    win.show()
    logger.info("Nucleus Lab started.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
