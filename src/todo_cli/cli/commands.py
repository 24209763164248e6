# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.todos_manager import TodosManager

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]
CommandEmitter = Callable[[str], None]


class LoopState(StrEnum):
    RUNNING = "running"
    TERMINATED = "terminated"


# A handler returns LoopState.TERMINATED to stop the loop, None to keep going.
CommandHandler = Callable[[TodosManager, Prompt, CommandEmitter], LoopState | None]


class CommandRegistry:
    """Fixed command vocabulary used by the console loop (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        key = name.lower()
        self._handlers[key] = handler

    def is_command(self, line: str) -> bool:
        return line.strip().lower() in self._handlers

    def handle(
        self,
        manager: TodosManager,
        line: str,
        prompt: Prompt,
        emit: CommandEmitter,
    ) -> LoopState | None:
        """
        Run the command named by `line` (case-insensitive, surrounding spaces ignored).
        Raises KeyError for unknown commands; callers check is_command() first.
        """
        handler = self._handlers[line.strip().lower()]
        return handler(manager, prompt, emit)

    def build_help(self) -> str:
        return "Available commands: " + ", ".join(self._handlers)


registry = CommandRegistry()


def _warn_if_unsaved(manager: TodosManager, emit: CommandEmitter) -> None:
    if not manager.last_save_ok:
        emit("⚠️ Could not save todos; changes will be lost on exit.")


def _parse_index(raw: str) -> int | None:
    # Optional sign plus ASCII digits only; int() alone also takes "1_0" and non-ASCII digits.
    text = raw.strip()
    digits = text[1:] if text.startswith(("+", "-")) else text
    if not digits.isascii() or not digits.isdigit():
        return None
    return int(text)


def _read_index(prompt: Prompt, emit: CommandEmitter, text: str) -> int | None:
    try:
        raw = prompt(text)
    except UnicodeDecodeError:
        logger.debug("Undecodable index input")
        emit("Invalid index.")
        return None
    index = _parse_index(raw)
    if index is None:
        logger.debug("Unparseable index input %r", raw)
        emit(f"Invalid index: {raw!r}.")
    return index


def cmd_add(manager: TodosManager, prompt: Prompt, emit: CommandEmitter) -> None:
    # Title is used verbatim (empty allowed).
    title = prompt("Enter todo title: ")
    manager.add(title)
    emit("📌 Todo added successfully!")
    _warn_if_unsaved(manager, emit)


def cmd_list(manager: TodosManager, prompt: Prompt, emit: CommandEmitter) -> None:
    emit("📝 Here are your todos:")
    entries = manager.list()
    if not entries:
        emit("(no todos yet)")
        return
    for index, todo in entries:
        emit(f"{index}. {todo}")


def cmd_toggle(manager: TodosManager, prompt: Prompt, emit: CommandEmitter) -> None:
    index = _read_index(prompt, emit, "Enter todo index to toggle completion: ")
    if index is None:
        return
    todo = manager.toggle(index)
    if todo is None:
        emit(f"No todo at index {index}.")
        return
    emit("✅ Todo marked as completed!" if todo.completed else "↩️ Todo marked as not completed.")
    _warn_if_unsaved(manager, emit)


def cmd_delete(manager: TodosManager, prompt: Prompt, emit: CommandEmitter) -> None:
    index = _read_index(prompt, emit, "Enter todo index to delete: ")
    if index is None:
        return
    if manager.delete(index) is None:
        emit(f"No todo at index {index}.")
        return
    emit("🗑️ Todo removed.")
    _warn_if_unsaved(manager, emit)


def cmd_exit(manager: TodosManager, prompt: Prompt, emit: CommandEmitter) -> LoopState:
    emit("Goodbye! 👋")
    return LoopState.TERMINATED


registry.register("add", cmd_add)
registry.register("list", cmd_list)
registry.register("toggle", cmd_toggle)
registry.register("delete", cmd_delete)
registry.register("exit", cmd_exit)
