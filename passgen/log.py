"""
passgen.log
Logging setup shared by the CLI and the GUI.
"""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
