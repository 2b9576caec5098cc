import pytest

from academictodo.items import (
    Projeto,
    Prova,
    Relatorio,
    Tarefa,
    TodoItem,
    item_from_json,
)


def test_tarefa_to_json():
    item = Tarefa(task="Read", description="chapter", deadline="2024-05-01", important=True)
    assert item.to_json() == {
        "tipo": "tarefa",
        "task": "Read",
        "description": "chapter",
        "deadline": "2024-05-01",
        "completed": False,
        "important": True,
        "urgent": False,
    }


def test_prova_to_json():
    item = Prova(task="Exam", deadline="2024-06-10", materia="Physics", urgent=True)
    assert item.to_json() == {
        "tipo": "prova",
        "task": "Exam",
        "deadline": "2024-06-10",
        "materia": "Physics",
        "completed": False,
        "important": False,
        "urgent": True,
    }


def test_projeto_to_json():
    item = Projeto(task="Robot", deadline="d", materia="Eng", complexidade="alta", completed=True)
    assert item.to_json() == {
        "tipo": "projeto",
        "task": "Robot",
        "deadline": "d",
        "materia": "Eng",
        "complexidade": "alta",
        "completed": True,
        "important": False,
        "urgent": False,
    }


def test_relatorio_to_json():
    item = Relatorio(task="Lab", deadline="d", materia="Chem", plataforma="Moodle")
    assert item.to_json() == {
        "tipo": "relatorio",
        "task": "Lab",
        "deadline": "d",
        "materia": "Chem",
        "plataforma": "Moodle",
        "completed": False,
        "important": False,
        "urgent": False,
    }


def test_base_to_json_has_common_fields():
    assert set(TodoItem().to_json()) == {
        "tipo", "task", "deadline", "completed", "important", "urgent"
    }


@pytest.mark.parametrize(
    "item",
    [
        Tarefa(task="a", description="b", deadline="c", important=True, urgent=True),
        Prova(task="a", deadline="b", materia="c", completed=True),
        Projeto(task="a", deadline="b", materia="c", complexidade="d", urgent=True),
        Relatorio(task="a", deadline="b", materia="c", plataforma="d", important=True),
    ],
)
def test_round_trip(item):
    assert item_from_json(item.to_json()) == item


def test_missing_tipo_means_tarefa():
    assert item_from_json({"task": "x"}) == Tarefa(task="x")


def test_missing_fields_take_defaults():
    assert item_from_json({"tipo": "projeto"}) == Projeto()


def test_unknown_tipo_gives_none():
    assert item_from_json({"tipo": "outro", "task": "x"}) is None


@pytest.mark.parametrize(
    "data",
    [
        {"tipo": "prova", "task": 5},
        {"tipo": "tarefa", "completed": "yes"},
        {"tipo": "relatorio", "urgent": 1},
        {"tipo": 3},
        {"task": None},
        [1, 2],
        "tarefa",
    ],
)
def test_malformed_entries_raise(data):
    with pytest.raises(ValueError):
        item_from_json(data)


def test_extra_keys_are_ignored():
    item = item_from_json({"tipo": "prova", "materia": "Math", "plataforma": "x"})
    assert item == Prova(materia="Math")