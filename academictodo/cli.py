"""Command-line front end: get, add, edit, delete and complete items."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .items import Projeto, Prova, Relatorio, Tarefa, TodoItem
from .storage import DATA_FILE, load_todos, save_todos


class CommandError(Exception):
    """A command could not be carried out; the message is meant for the user."""


# Positional fields after the important/urgent flags, per item kind.
_LAYOUTS: dict[str, tuple[type[TodoItem], tuple[str, ...]]] = {
    "tarefa": (Tarefa, ("task", "description", "deadline")),
    "prova": (Prova, ("task", "deadline", "materia")),
    "projeto": (Projeto, ("task", "deadline", "materia", "complexidade")),
    "relatorio": (Relatorio, ("task", "deadline", "materia", "plataforma")),
}


def build_item(tipo: str, args: Sequence[str], completed: bool = False) -> TodoItem:
    """Build an item of kind ``tipo`` from ``[important, urgent, *fields]``.

    A flag is true only when it is exactly ``"true"``.
    """
    try:
        kind, names = _LAYOUTS[tipo]
    except KeyError:
        raise CommandError(f"Unknown item type: {tipo}") from None
    if len(args) < 2 + len(names):
        raise CommandError(f"Too few arguments for {tipo}")
    important, urgent, *values = args
    return kind(
        important=important == "true",
        urgent=urgent == "true",
        completed=completed,
        **dict(zip(names, values)),
    )


def _index(text: str, todos: list[TodoItem]) -> int:
    try:
        index = int(text)
    except ValueError:
        raise CommandError("Invalid index") from None
    if not 0 <= index < len(todos):
        raise CommandError("Invalid index")
    return index


def _get(todos: list[TodoItem], stdout: TextIO, stderr: TextIO) -> None:
    for item in todos:
        stderr.write(f"{int(item.important)}\n")
    stdout.write(
        json.dumps(
            [item.to_json() for item in todos],
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
        )
    )


def run(
    argv: Sequence[str],
    path: str | Path = DATA_FILE,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Carry out one command on the list stored at ``path``; return the exit status."""
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    if not argv:
        stderr.write("No command provided.\n")
        return 1
    command, *rest = argv
    todos = load_todos(path)

    try:
        if command == "get":
            _get(todos, stdout, stderr)
        elif command == "add" and len(rest) >= 2:
            try:
                item = build_item(rest[0], rest[1:])
            except CommandError:
                raise CommandError("Invalid arguments for type.") from None
            todos.append(item)
            save_todos(todos, path)
            stdout.write("Added\n")
        elif command == "edit" and len(rest) >= 3:
            index = _index(rest[0], todos)
            try:
                item = build_item(rest[1], rest[2:], completed=todos[index].completed)
            except CommandError:
                raise CommandError("Argumentos invalidos para o tipo ou comando.") from None
            todos[index] = item
            save_todos(todos, path)
            stdout.write("Edited\n")
        elif command == "delete" and rest:
            del todos[_index(rest[0], todos)]
            save_todos(todos, path)
            stdout.write("Deleted\n")
        elif command == "complete" and rest:
            todos[_index(rest[0], todos)].completed = True
            save_todos(todos, path)
            stdout.write("Completed\n")
    except CommandError as exc:
        stderr.write(f"{exc}\n")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the command line."""
    return run(sys.argv[1:] if argv is None else argv)