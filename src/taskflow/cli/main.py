# src/taskflow/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the
main thread. All tasks live in memory and are gone when the loop ends.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye. (%d task(s) discarded)", len(state.registry))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
