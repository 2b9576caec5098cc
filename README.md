# academictodo

A small command-line to-do store for student life. It keeps four kinds
of activity in one JSON file:

| kind        | class       | extra fields                |
|-------------|-------------|-----------------------------|
| `tarefa`    | `Tarefa`    | `description`               |
| `prova`     | `Prova`     | `materia` (subject)         |
| `projeto`   | `Projeto`   | `materia`, `complexidade`   |
| `relatorio` | `Relatorio` | `materia`, `plataforma`     |

Every item also has a title (`task`), a `deadline`, and the flags
`completed`, `important` and `urgent`. All fields are plain strings or
booleans. Deadlines are stored exactly as given and are not checked.

## Installation

```
pip install .
```

## Storage

Items are kept in `data/todos.json`, relative to the current working
directory. The `data` directory must already exist: the file is created
inside it, but the directory is not, and a file that cannot be written
is silently left unchanged.

A missing file, or one that is not valid JSON, reads as an empty list.
Entries whose `tipo` is not one of the four kinds are skipped, and an
entry with no `tipo` is read as a `tarefa`. Reading stops at the first
entry that is not a JSON object or has a field of the wrong type; the
entries before it are kept. The file is written as JSON indented by four
spaces, with keys in sorted order.

## Usage

List everything as a compact JSON array on standard output. For each
item, `1` or `0` (its `important` flag) is also written to standard
error.

```
academictodo get
```

Add an item. The first two values after the kind are the `important`
and `urgent` flags; only the exact word `true` sets a flag. The values
that follow depend on the kind:

```
academictodo add tarefa    IMPORTANT URGENT TASK DESCRIPTION DEADLINE
academictodo add prova     IMPORTANT URGENT TASK DEADLINE MATERIA
academictodo add projeto   IMPORTANT URGENT TASK DEADLINE MATERIA COMPLEXIDADE
academictodo add relatorio IMPORTANT URGENT TASK DEADLINE MATERIA PLATAFORMA
```

For example:

```
academictodo add tarefa true false "Read chapter 3" "Summary notes" 2024-05-10
academictodo add prova false true "Calculus exam" 2024-05-20 Calculus
academictodo add projeto true true "Compiler" 2024-06-01 "Formal languages" high
academictodo add relatorio false false "Lab report" 2024-05-15 Physics Moodle
```

Replace the item at a zero-based position with new data, of any kind,
keeping its completion status:

```
academictodo edit 0 tarefa true true "Read chapter 4" "Exercises too" 2024-05-12
```

Mark an item as completed, or delete it:

```
academictodo complete 1
academictodo delete 2
```

Successful changes print `Added`, `Edited`, `Completed` or `Deleted`.
An unknown kind or too few values, or an index that is not a number or
is out of range, writes a message to standard error and exits with
status 1, as does running the program with no command at all. An
unrecognised command, or `add`, `edit`, `delete` or `complete` given too
few arguments to get started, does nothing and exits with status 0.

## Library use

```python
from academictodo.items import Prova
from academictodo.storage import load_todos, save_todos

todos = load_todos("data/todos.json")
todos.append(Prova(task="Algebra exam", deadline="2024-05-20", materia="Algebra"))
save_todos(todos, "data/todos.json")
```

- `academictodo.items`: the dataclasses `TodoItem`, `Tarefa`, `Prova`,
  `Projeto` and `Relatorio`. Each item's `to_json()` returns the
  dictionary written to the file. `item_from_json(data)` builds the
  matching item from a decoded JSON object; it returns `None` for an
  unknown `tipo` and raises `ValueError` for a malformed entry.
- `academictodo.storage`: `load_todos(path)` and `save_todos(todos, path)`,
  both defaulting to `data/todos.json`.
- `academictodo.cli`: `run(argv, path, stdout, stderr)` carries out one
  command and returns its exit status; `build_item(tipo, args, completed)`
  builds an item from command-line values and raises `CommandError` when
  it cannot; `main(argv)` is the `academictodo` command.

## What it does not do

There is no graphical or web interface; the package is only the
command line and the Python functions above. There is no way to mark a
completed item as not completed other than editing it into a new item,
no sorting or filtering by deadline or flag, and no way to choose
another data file from the command line.