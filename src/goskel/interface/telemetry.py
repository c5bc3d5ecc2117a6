"""
Visual telemetry: console output mirrored to the ``goskel`` logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from goskel.domain.constants import GOSKEL_BANNER
from goskel.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Prints progress through rich and records every message in logging."""

    def __init__(self, project_name: str, color: str, welcome_message: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_message = welcome_message
        self.console = Console(highlight=False)
        self.logger = logging.getLogger("goskel")

    def handshake(self) -> None:
        """Print the banner (interactive terminals only) and the welcome line."""
        if self.console.is_terminal:
            self.console.print(GOSKEL_BANNER, markup=False)
        self.console.print(f"[bold {self.color}]\\[{self.project_name}][/] {escape(self.welcome_message)}")
        self.logger.info("%s: %s", self.project_name, self.welcome_message)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>>[/] {escape(message)}")
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]WARNING:[/] {escape(message)}")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR:[/] {escape(message)}")
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)


def configure_logging(verbose: bool = False) -> None:
    """
    Wire the ``goskel`` logger.

    - verbose: DEBUG records go to stderr through a RichHandler.
    - otherwise: records are dropped; the console lines are the only output.
    """
    logger = logging.getLogger("goskel")
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    else:
        logger.setLevel(logging.WARNING)
        logger.addHandler(logging.NullHandler())
