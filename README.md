# rustcoach

rustcoach is a small library of pieces for a course of compile-and-test
exercises. It has three parts:

- `rustcoach.ui`: coloured status lines for the terminal
- `rustcoach.project`: generation of a `rust-project.json` file so that
  rust-analyzer treats every exercise file as its own crate
- `rustcoach.drills`: worked answers to many of the course's exercises, as
  plain Python functions and classes

## Requirements

- Python 3.11 or later
- `rich`
- `rustc` on your `PATH`, but only if you call
  `RustAnalyzerProject.get_sysroot_src()` without `RUST_SRC_PATH` set

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Status lines

```python
from rustcoach.ui import warn, success

warn("Compiling of exercises/intro1.rs failed!")
success("Successfully ran exercises/intro1.rs!")
```

`warn(message)` prints the message in red after a `⚠️` symbol, and
`success(message)` prints it in green after a `✅`. When the `NO_EMOJI`
environment variable is set, to any value, the symbols are `!` and `✓`.

## rust-project.json

```python
from rustcoach.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

- `RustAnalyzerProject` holds `sysroot_src` and a list of `crates`.
- `get_sysroot_src()` takes the value of `RUST_SRC_PATH` if it is set.
  Otherwise it runs `rustc --print sysroot`, prints the toolchain it found and
  uses `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks `root` recursively, in sorted order, and
  includes hidden entries. It calls `add_path` for every entry. The default
  root is `./exercises`.
- `add_path(path)` adds a `Crate` when the path ends in `.rs` and ignores it
  otherwise.
- `to_json()` returns compact JSON, and `write_to_disk(path)` writes that JSON
  to the path, by default `./rust-project.json`.

Every `Crate` has a `root_module` and the edition `"2021"`. It has no `deps`
and has the `cfg` `["test"]`, so that rust-analyzer also works inside test
blocks.

## Drills

`rustcoach.drills` groups the worked answers by topic:

- `containers`: `vec_loop`, `vec_map`, `Fruit` and `fruit_basket`, and
  `Team` with `build_scores_table`, which reads lines of the form
  `team1,team2,goals1,goals2`. It also has `Progress` with `count_for`,
  `count_iterator`, `count_collection_for` and `count_collection_iterator`.
- `text`: string commands `Uppercase`, `Trim` and `Append(times)`, all
  subclasses of `Command`, applied by `transformer`. Also `trim_me`,
  `compose_me`, `replace_me`, `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string` and `append_bar`, which works on a string or a
  list of strings.
- `records`: `ReportCard` with `print()`, `Order` and
  `create_order_template`, and `Package`, which refuses weights below
  10 grams. It also has the messages `ChangeColor`, `Move`, `Echo` and `Quit`,
  which `MachineState.process` handles, and `Point`. Then there is
  `Rectangle`, which refuses sides that are not positive, and the cons list
  `Cons`/`Nil` with `create_empty_list` and `create_non_empty_list`.
- `errors`: `generate_nametag_text` and `total_cost`. `PositiveNonzeroInteger`
  raises `CreationError`, and `parse_pos_nonzero` raises
  `ParsePosNonzeroError`. `divide` raises `DivideByZeroError` or
  `NotDivisibleError`, both of them `DivisionError`s. Also `result_with_list`,
  `list_of_results` and `factorial`.
- `conversions`: `Person.default()` and `Person.from_text()`, which fall back
  to John, aged 30. `Person.parse()` raises `EmptyInput`, `BadLength`,
  `NoName` or `BadAge`, all of them `ParsePersonError`s. `Color.try_from()`
  raises `ColorBadLength` or `ColorIntConversion`, both of them
  `IntoColorError`s.

```python
from rustcoach.drills.conversions import Color, Person

Person.parse("Mark,20")        # Person(name='Mark', age=20)
Color.try_from((183, 65, 14))  # Color(red=183, green=65, blue=14)
```

## What this package does not do

rustcoach installs no command-line program. It cannot read a course's
`info.toml` or compile, run, test or verify exercises. It has no watch mode
that re-checks files when they change. It does not look for the
`I AM NOT DONE` marker or track progress through a course. It does not reset
exercises or show hints. What it offers is the library described above.