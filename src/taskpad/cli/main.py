# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the session (which starts the initial fetch), then either
runs the interactive console or prints the list once and exits.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_session
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..connectors.render import render_state
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(settings: Settings) -> int:
    state = create_session(settings=settings)
    try:
        if settings.console_enabled:
            await run_console_loop(state)
            return 0

        logger.info("Console disabled. Printing the task list once.")
        await state.view_model.wait_idle()
        print(render_state(state.view_model.state))
        return 1 if state.view_model.state.error else 0
    finally:
        try:
            await state.view_model.aclose()
        except Exception:
            logger.debug("Session close failed.", exc_info=True)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s against %s", settings.app_name, settings.api_base_url)

    try:
        code = asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        code = 130

    logger.info("Bye.")
    return code


if __name__ == "__main__":
    raise SystemExit(main())
