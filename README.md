# labkit

This package holds two small teaching tools:

- **Student records** (`labkit.students`, `labkit.cli`): an in-memory
  registry of students, each with an id, name, age and GPA. It has an
  interactive text menu on top.
- **Stopwatch** (`labkit.stopwatch`): a model of a six-digit HH:MM:SS
  stopwatch. It counts up, or counts down to an alarm. It reports its digits
  as the 4-bit codes that a seven-segment decoder would be driven with.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Interactive student menu

```
labkit-students
```

The menu offers these choices:

1. Add student
2. Display students
3. Search students by ID
4. Update student by ID
5. Delete student
6. Calculate Average GPA
7. Search for student with highest GPA
8. Exit

The menu handles input as follows:

- A choice outside 1–8 prints `invalid input`.
- A malformed number prints `invalid input`, and the rest of that line is
  discarded.
- Names are read up to the end of the line, up to 49 characters.
- The menu ends on choice 8 or at the end of input.

`run_menu(stdin, stdout, registry=None)` in `labkit.cli` runs the same menu
over any pair of text streams and returns the registry. This makes it easy
to script or test:

```python
import io
from labkit.cli import run_menu

out = io.StringIO()
registry = run_menu(io.StringIO("1\n7\nAda\n20\n3.9\n8\n"), out)
print(len(registry))   # 1
```

## Using the registry from code

```python
from labkit.students import Student, StudentRegistry, format_student

registry = StudentRegistry()
registry.add(Student(1, "Alice", 20, 3.5))
registry.add(Student(2, "Bob", 22, 3.9))

print(format_student(registry.get(2)))   # ID: 2,Name: Bob,Age: 22,GPA: 3.900000
print(registry.average_gpa())            # 3.7 (0.0 when empty)
for best in registry.highest_gpa():      # every student tied for the top GPA
    print(best.name)

registry.update(1, "Alice B.", 21, 3.7)  # returns the new record
registry.remove(2)                       # returns the removed record
print(len(registry), [s.name for s in registry])
```

`Student` is a frozen dataclass. Iterating over a registry yields the
students in the order they were added.

Errors are raised as exceptions:

- `DuplicateStudentError`: the id passed to `add` is already registered.
- `StudentNotFoundError`: the id passed to `get`, `update` or `remove` is
  unknown. It is also a `LookupError`.
- Both derive from `StudentError`, and both carry the id as `student_id`.

## Stopwatch model

```python
from labkit.stopwatch import Stopwatch, CountMode, TimeUnit, bcd_code

watch = Stopwatch()               # or Stopwatch(hours=1, minutes=30, seconds=0)
for _ in range(75):
    watch.tick()
print(watch.digits())             # (0, 0, 0, 1, 1, 5)  -> 00:01:15
print(watch.display())            # [(32, 5), (16, 1), (8, 1), (4, 0), (2, 0), (1, 0)]

watch.toggle_mode()               # pauses, switches to CountMode.DOWN, starts adjusting
watch.increment(TimeUnit.MINUTES) # 00:02:15; returns False when not adjusting
watch.finish_adjusting()
watch.resume()
watch.tick()                      # 00:02:14

watch.pause()
watch.reset()                     # all digits zero
print(bcd_code(7))                # 7; ValueError outside 0-9
```

The stopwatch behaves as follows:

- `tick()` advances one second in the current `mode`. It does nothing while
  the watch is paused (`running` is false).
- Counting up wraps from 23:59:59 to 00:00:00.
- Counting down stops at 00:00:00 and sets `alarm` to `True`.
- `toggle_mode()` pauses the watch, reverses its direction and sets
  `adjusting`. `increment` and `decrement` only work while `adjusting` is set.
- `increment` and `decrement` act on the ones digit of the given `TimeUnit`.
  `increment` carries into the tens digit when the ones digit passes 9.
  `decrement` wraps each digit as an unsigned byte, so 0 becomes 255.
- `digits()` returns the six digits with the most significant first.
- `display()` returns one multiplexing pass. It is a list of
  `(segment enable mask, BCD code)` pairs, seconds ones first on mask
  `0x20`. A digit outside 0–9 repeats the code that was driven before it.

## What this package does not do

- Student records live in memory only. Nothing is saved to disk, and the
  menu starts with an empty registry each time.
- The stopwatch is a state model only. It keeps no real time of its own, so
  the caller must call `tick()` once per second. It does not drive any
  display, buttons or buzzer, and it has no command of its own.