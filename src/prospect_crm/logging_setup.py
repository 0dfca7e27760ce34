# ABOUTME: Logging configuration with Rich console output and an optional log file.
# ABOUTME: Called once by the CLI callback; library modules only use module-level loggers.

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

NOISY_LOGGERS = ("google", "urllib3", "httpx", "httpcore", "sqlalchemy.engine")


def setup_logging(level: str | int = "WARNING", log_file: Path | None = None) -> None:
    """Configure the root logger for the application.

    Args:
        level: Logging level name or number.
        log_file: Optional path of a plain-text log file.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured (level=%s, file=%s)", level, log_file if log_file else "-"
    )
