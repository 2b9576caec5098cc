"""Kinds of academic to-do items and their JSON representation."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar


@dataclass
class TodoItem:
    """Fields shared by every kind of activity."""

    task: str = ""
    deadline: str = ""
    completed: bool = False
    important: bool = False
    urgent: bool = False

    tipo: ClassVar[str] = ""

    def to_json(self) -> dict[str, Any]:
        """Return the item as a JSON-ready mapping."""
        return {
            "tipo": self.tipo,
            "task": self.task,
            "deadline": self.deadline,
            "completed": self.completed,
            "important": self.important,
            "urgent": self.urgent,
        }


@dataclass
class Tarefa(TodoItem):
    """A general task with a free-text description."""

    description: str = ""

    tipo: ClassVar[str] = "tarefa"

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["description"] = self.description
        return data


@dataclass
class Prova(TodoItem):
    """An exam for a given subject."""

    materia: str = ""

    tipo: ClassVar[str] = "prova"

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["materia"] = self.materia
        return data


@dataclass
class Projeto(TodoItem):
    """A project for a subject, with a complexity level."""

    materia: str = ""
    complexidade: str = ""

    tipo: ClassVar[str] = "projeto"

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["materia"] = self.materia
        data["complexidade"] = self.complexidade
        return data


@dataclass
class Relatorio(TodoItem):
    """A report for a subject, handed in on some platform."""

    materia: str = ""
    plataforma: str = ""

    tipo: ClassVar[str] = "relatorio"

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["materia"] = self.materia
        data["plataforma"] = self.plataforma
        return data


_KINDS: dict[str, type[TodoItem]] = {
    kind.tipo: kind for kind in (Tarefa, Prova, Projeto, Relatorio)
}


def _field(data: dict[str, Any], key: str, default: Any) -> Any:
    value = data.get(key, default)
    if type(value) is not type(default):
        raise ValueError(f"field {key!r} must be of type {type(default).__name__}")
    return value


def item_from_json(data: Any) -> TodoItem | None:
    """Build an item from a JSON mapping.

    A missing ``tipo`` means ``"tarefa"``; an unrecognised one gives ``None``.
    Raises ValueError when the entry or one of its fields has the wrong type.
    """
    if not isinstance(data, dict):
        raise ValueError("a to-do entry must be a JSON object")
    kind = _KINDS.get(_field(data, "tipo", "tarefa"))
    if kind is None:
        return None
    values = {f.name: _field(data, f.name, f.default) for f in fields(kind)}
    return kind(**values)