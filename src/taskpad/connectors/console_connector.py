# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .render import render_state

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], Awaitable[str]]
Emit = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


async def _read_stdin(prompt: str) -> str:
    # input() blocks; keep it off the event loop so in-flight requests keep settling.
    return await asyncio.to_thread(input, prompt)


async def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = _read_stdin,
    emit: Emit = _print_ts,
) -> None:
    """
    Console "screen": render the task list, read a command, forward the intent,
    wait for it to settle, render again.
    """
    vm = state.view_model
    logger.info("Console connector started.")
    emit("Type /help for commands. Use /exit to quit.")

    await vm.wait_idle()
    emit(render_state(vm.state))

    while True:
        try:
            line = (await read_line(">>> ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not line.startswith("/"):
            emit("Commands start with '/'. Type /help for the list.")
            continue

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            emit("Internal error while handling a command.")
            continue

        # Informational commands reply with text and leave the list alone.
        if reply is not None:
            emit(reply)
            if not vm.busy:
                continue

        await vm.wait_idle()
        emit(render_state(vm.state))

    logger.info("Console connector finished.")
