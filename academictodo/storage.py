"""Loading and saving the to-do list as a JSON file."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .items import TodoItem, item_from_json

DATA_FILE = Path("data") / "todos.json"


def _entries(document: Any) -> list[Any]:
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        return [document[key] for key in sorted(document)]
    return [document]


def load_todos(path: str | Path = DATA_FILE) -> list[TodoItem]:
    """Read the items stored at ``path``.

    A missing or unparsable file gives an empty list. Entries of unknown
    kind are skipped; loading stops at the first malformed entry, keeping
    what was read before it.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    try:
        document = json.loads(text)
    except ValueError:
        return []

    todos: list[TodoItem] = []
    for entry in _entries(document):
        try:
            item = item_from_json(entry)
        except ValueError:
            break
        if item is not None:
            todos.append(item)
    return todos


def save_todos(todos: Iterable[TodoItem], path: str | Path = DATA_FILE) -> None:
    """Write the items to ``path`` as indented JSON; an unwritable path is ignored."""
    text = json.dumps(
        [item.to_json() for item in todos],
        indent=4,
        sort_keys=True,
        ensure_ascii=False,
    )
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError:
        pass