# crabdrill

crabdrill is a library for working with a set of small exercises. Each
exercise is a source file that has a compiler error, a failing test or a logic
error, plus an `I AM NOT DONE` marker comment that the learner removes once
the exercise is solved. crabdrill reads the exercise list, compiles and runs
exercises with `rustc`, tells whether an exercise still carries its marker,
and writes a `rust-project.json` for editors. It also includes worked
solutions to many of the exercises as plain Python functions and classes.

## Installation

```
pip install crabdrill
```

To compile exercises you need `rustc` on your `PATH`. Exercises in clippy mode
also need `cargo`.

## Exercises: `crabdrill.exercise`

`load_exercises(path="info.toml")` reads the `[[exercises]]` entries of a TOML
file and returns a list of `Exercise` objects. Each one has a `name`, a `path`,
a `mode` (`Mode.COMPILE`, `Mode.TEST` or `Mode.CLIPPY`) and a `hint`.

```python
from crabdrill.exercise import load_exercises

for exercise in load_exercises("info.toml"):
    print(exercise.name, "done" if exercise.looks_done() else "pending")
```

- `Exercise.state()` returns the `ContextLine`s around the first
  `I AM NOT DONE` marker: two lines before it, the marker line itself (with
  `important=True`), and two lines after it. The list is empty when the marker
  is gone.
- `Exercise.looks_done()` is true when `state()` is empty.
- `Exercise.compile()` builds the exercise into a temporary binary in the
  current directory. Test exercises are built with `--test`. Clippy exercises
  write `./exercises/22_clippy/Cargo.toml`, build the binary, and then run
  `cargo clean` and `cargo clippy`. On failure it raises `ExerciseFailed`,
  whose `output` holds the captured `stdout` and `stderr`. On success it
  returns a `CompiledExercise`.
- `CompiledExercise.run()` runs the binary and returns an `ExerciseOutput`.
  Test binaries are run with `--show-output`. A non-zero exit raises
  `ExerciseFailed`. `CompiledExercise` is a context manager: closing it
  removes the binary.

```python
from crabdrill.exercise import ExerciseFailed

try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except ExerciseFailed as failure:
    print(failure.output.stderr)
```

## Editor support: `crabdrill.project`

`RustAnalyzerProject` builds the content of a `rust-project.json`:

```python
from crabdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or `rustc --print sysroot`
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

Every `.rs` file below the directory becomes a `Crate` with edition `2021`
and the `test` cfg enabled.

## Terminal output: `crabdrill.ui`

- `warn(message)` prints a red warning line.
- `success(message)` prints a green success line.
- `bold(text)` and `style(text, color, bold)` wrap text in ANSI codes.

Colour is used when stdout is a terminal. `NO_COLOR` and `CLICOLOR=0` turn it
off, and `CLICOLOR_FORCE` turns it on. Set `NO_EMOJI` to get plain markers
instead of emoji. `Spinner` shows a message with an animated spinner on a
terminal stream. It can be used as a context manager and is cleared by
`finish_and_clear()`.

## Worked solutions: `crabdrill.drills`

| Module | Contents |
| --- | --- |
| `basics` | `intro_text`, `greeting`, `describe_ten`, `shadowing_lines`, `ring`, `sale_price`, `is_even`, `square` |
| `conditionals` | `bigger`, `foo_if_fizz`, `animal_habitat` |
| `primitives` | `time_greetings`, `classify_character`, `check_array`, `middle_slice`, `describe_cat`, `second` |
| `vectors` | `array_and_vec`, `vec_loop`, `vec_map`, `fill_vec`, `fill_new_vec`, `add_in_turn`, `get_char`, `string_uppercase` |
| `enums` | `Move`, `Echo`, `ChangeColor`, `Quit` messages and a `State` with `process` |
| `strings` | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `options` | `maybe_icecream`, `drain_present`, `describe_coordinates` |
| `lifetimes` | `longest`, `Book` |
| `errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command`, `ReportCard` |

```python
from crabdrill.drills.conditionals import bigger
from crabdrill.drills.quizzes import calculate_price_of_apples

bigger(10, 8)                      # 10
calculate_price_of_apples(41)      # 41
```

## What it does not do

crabdrill has no command-line program. There is no command to verify all
exercises in order, no watch mode that checks again when files change, no
command to run, reset or show the hint for a single exercise, and no exercise
listing or progress report. All of these have to be built on top of the
library. The worked solutions do not cover structs, hash maps, modules,
generics, test-writing or conversion exercises.

## Tests

```
pip install crabdrill[test]
pytest
```