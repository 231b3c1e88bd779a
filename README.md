# ibag

Two small containers for sharing values between threads.

- `Bag` holds a value behind a readers-writer lock. Handles made with
  `clone()` all point to the same value, so a change made through one handle
  shows up in every handle.
- `ThreadCell` keeps a value tied to one thread. Only the thread that owns the
  cell may read or change the value. Another thread can take over ownership
  once, unless the cell was created frozen.

## Installation

```
pip install ibag
```

Python 3.10 or later is required. The package has no dependencies.

## Bag

```python
from ibag.bag import Bag

bag = Bag(42)
assert bag.get() == 42

# Read the value while holding shared access; the result of the function
# is returned.
doubled = bag.inspect(lambda value: value * 2)
assert doubled == 84

# Change the value while holding exclusive access. The function receives a
# Slot; whatever it leaves in slot.value is stored. Its return value is
# handed back to the caller.
def increment(slot):
    slot.value += 1
    return slot.value

assert bag.modify(increment) == 43

# Hold the locks over a block of code.
with bag.write() as slot:
    slot.value = 100

with bag.load() as value:
    assert value == 100

# A clone shares the same value.
other = bag.clone()
with bag.write() as slot:
    slot.value = 7
assert other.get() == 7
```

- `load()` is a context manager that holds the read lock and yields the
  contained value itself. Many readers may hold it at once.
- `write()` is a context manager that holds the write lock and yields a
  `Slot`, a small object with one attribute, `value`. When the block ends
  without an exception, `slot.value` is stored back into the bag; if the block
  raises, the bag keeps its old value.
- `get()` returns the value, read under the lock.
- `inspect(func)` calls `func(value)` under the read lock.
- `modify(func)` calls `func(slot)` under the write lock.
- `clone()` (and `copy.copy`) returns another handle to the same shared value.

Writers that are waiting block new readers, so a steady stream of readers
cannot starve a writer. The locks are not re-entrant: do not call `write()`,
`modify()` or `get()` on a bag from inside a `write()` block of the same bag.

## ThreadCell

```python
import threading

from ibag.cell import ThreadCell
from ibag.errors import InvalidThreadAccess

cell = ThreadCell("data")
assert cell.get() == "data"

def worker():
    try:
        cell.get()
    except InvalidThreadAccess:
        pass  # this thread does not own the cell yet
    cell.take_ownership()
    assert cell.get() == "data"

thread = threading.Thread(target=worker)
thread.start()
thread.join()
```

`ThreadCell(value, freeze=False)` creates a cell owned by the calling thread.
A cell created with `freeze=True` cannot change owner: `take_ownership()`
then raises `FailTakeOwnership`. Taking ownership freezes the cell, so a cell
changes owner at most once. `take_ownership()` returns `True` on success.

Other operations, all of which must run on the owning thread (otherwise they
raise `InvalidThreadAccess`):

- `get()` returns the value.
- `set(value)` replaces the value.
- `into_inner()` returns the value and empties the cell; any later use of the
  value raises `IBagError`.
- `clone()` (and `copy.copy`) makes a new, unfrozen cell owned by the calling
  thread, holding a shallow copy of the value.
- `==`, `<` and the other comparisons compare the wrapped values of two cells.
  Cells are not hashable.
- `str()` gives the value's own string form.

`is_valid()` tells whether the calling thread owns the cell. `repr()` works on
any thread: it shows `<invalid thread>` in place of the value on a thread that
does not own the cell, and `<taken>` once the value has been taken out.

## Errors

The exceptions live in `ibag.errors`. All of them derive from `IBagError`:

- `InvalidThreadAccess` is raised when a thread that does not own a cell uses
  its value.
- `FailTakeOwnership` is raised when a thread tries to take ownership of a
  frozen cell.
- `IBagError` itself is raised when a cell's value is used after
  `into_inner()`.

## Running the tests

```
pip install -e ".[test]"
pytest
```