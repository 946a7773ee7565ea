# src/forgetful_me/connectors/console_connector.py

from __future__ import annotations

import logging

from .. import __version__
from ..cli.commands import registry as command_registry
from ..core.ports import Emitter, Prompt
from ..core.state import AppState
from ..tasks.errors import DocumentError, StorageError, TaskValidationError
from .console_render import format_status_summary

logger = logging.getLogger(__name__)


def _print(text: str) -> None:
    print(text, flush=True)


def print_banner(state: AppState, emit: Emitter = _print) -> None:
    app_name = str(getattr(state.settings, "app_name", "Forgetful Me"))
    emit(f"{app_name} Ver. - {__version__}")
    emit("A simple task reminder software.\n")
    emit(format_status_summary(state.task_store.list(), state.today(), enabled=state.color))
    emit("")


def run_console_loop(state: AppState, *, ask: Prompt = input, emit: Emitter = _print) -> None:
    """
    Read commands until /exit, EOF or Ctrl+C.

    Storage and document errors are fatal and propagate to the caller;
    everything else is reported and the loop continues.
    """
    logger.info("Console started.")
    print_banner(state, emit)
    emit("Type /help for commands, /exit to quit.")

    while True:
        try:
            line = ask(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if not line:
            continue

        if line.lower().lstrip("/") in ("exit", "quit", "q"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, line, ask=ask, emit=emit)
        except TaskValidationError as e:
            reply = str(e)
        except (StorageError, DocumentError):
            raise
        except Exception:
            logger.exception("Command handler crashed: %r", line)
            reply = "Internal error while handling a command."

        if reply is not None:
            emit(reply)

    logger.info("Console finished.")
