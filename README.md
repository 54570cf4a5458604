# listfn

An interactive interpreter for lists of natural numbers and the functions
that transform them. You define lists, build functions out of six base
functions, apply them, and let the interpreter search for a composition
of known functions that turns given lists into expected ones.

The interpreter's messages are in Spanish.

## Running

```
listfn
```

The interpreter prints a welcome line and then reads one command per line
from standard input. A line must end in `;` and be shorter than 511
bytes; any other line is reported as invalid input and skipped. A valid
line that does not start with `defl`, `deff`, `apply` or `search` ends
the session, as does the end of input.

## Commands

Define a list (the name starts with a letter, then letters or digits):

```
defl L1 = [0, 1, 2];
```

Define a function as a sequence of known functions, at most 30 steps.
Steps between `<` and `>` repeat until the list is non-empty and its
first and last elements are equal; blocks cannot nest. A block that has
not ended after 1000 rounds stops the command with an error message.

```
deff Mi = Oi <Si> Dd;
```

Apply a function to a defined list or to a literal. The result is
printed; a defined list is not changed.

```
apply Mi [3, 4, 5];
```

prints `[ 5 3 4 ]`.

Search for a composition of known functions (base and defined ones, up to
8 steps, tried breadth first) that maps every input list to its paired
output list. Every list named must have been defined:

```
search {L1, L2; L3, L4;};
```

The steps of the first composition found are printed, or a message that
none was found.

Malformed commands are ignored. Defining a list or function under a name
already in use prints a message and keeps the earlier definition.

## Base functions

| Name | Effect |
|------|--------|
| `Oi` | insert 0 at the front |
| `Od` | insert 0 at the end |
| `Si` | add 1 to the first element |
| `Sd` | add 1 to the last element |
| `Di` | remove the first element |
| `Dd` | remove the last element |

`Si`, `Sd`, `Di` and `Dd` leave an empty list unchanged.

## Use as a library

- `listfn.tables`: `ValueList`, `Function`, and the name tables
  `ListTable` and `FunctionTable` (the latter starts with the six base
  functions); adding a taken name raises `DuplicateNameError`.
- `listfn.operations`: `define_list`, `define_function`, `apply_command`
  and `search_command`, each taking one command line. They raise
  `ValueError` for a malformed line; `apply_command` raises
  `listfn.apply.IterationLimitError` when a repetition does not end.
- `listfn.apply.apply_function(values, function)` applies a function in
  place; `listfn.search.search(functions, inputs, outputs)` runs the
  composition search and returns a `Function` or `None`.
- `listfn.cli.run(stream, out)` drives a session over any iterable of
  lines, writing to a text stream.

## Limits

Definitions live in memory only: nothing is saved between sessions, and
there is no command to list, change or delete a definition.

## Tests

```
pip install -e .[test]
pytest
```