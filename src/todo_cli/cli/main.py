# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the TodosManager, then runs the console loop
in the main thread until `exit`.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_manager
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import StoragePathError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> None:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(
        log_dir=settings.log_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        manager = create_manager(settings=settings)
    except StoragePathError:
        logger.critical("Cannot start: no usable location for the todos file.", exc_info=True)
        raise SystemExit(1)
    except ValueError:
        logger.critical("Cannot start: invalid storage configuration.", exc_info=True)
        raise SystemExit(1)

    run_console_loop(manager)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
