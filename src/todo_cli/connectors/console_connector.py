# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandEmitter, CommandRegistry, LoopState, Prompt
from ..cli.commands import registry as command_registry
from ..core.todos_manager import TodosManager

logger = logging.getLogger(__name__)


def run_console_loop(
    manager: TodosManager,
    *,
    read_line: Prompt = input,
    emit: CommandEmitter = print,
    commands: CommandRegistry | None = None,
) -> LoopState:
    """
    Interactive read-eval loop over the todo list.

    States: RUNNING (initial) -> TERMINATED (only via `exit`, or when input ends).
    Per-command problems (unknown command, bad index) are reported and the loop continues.
    """
    commands = commands or command_registry
    state = LoopState.RUNNING
    logger.info("Console loop started (todos=%d).", len(manager))
    emit("Welcome to the Todo CLI App!")

    while state is LoopState.RUNNING:
        emit("\n" + commands.build_help())
        try:
            line = read_line("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break
        except UnicodeDecodeError:
            logger.debug("Undecodable console input treated as an unknown command.")
            emit("Invalid command. Try again.")
            continue

        if not commands.is_command(line):
            emit("Invalid command. Try again.")
            continue

        try:
            result = commands.handle(manager, line, read_line, emit)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed during a command prompt, exiting.")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            emit("Internal error while handling a command.")
            continue

        if result is not None:
            state = result

    logger.info("Console loop finished.")
    return LoopState.TERMINATED
