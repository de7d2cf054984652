# qorcore

Core building blocks in plain Python, with no third-party dependencies.

## Modules

- `qorcore.errors` – structured error code constants (`CORE`, `OS`, `PARSE_ERROR`,
  `ALLOCATION_FAILURE`, …) and the `QorError` exception, which carries a `code`
  and an optional `text`. `QorError.from_code(code)` makes an error without text,
  `QorError.not_implemented()` the "Function not implemented." error.
- `qorcore.hashing` – `FxHasher`, `Fnv1a64Hasher` and `Fnv1a32Hasher`, each with
  `write`, `write_u8` … `write_u64`, `write_usize`, `write_str` and `finish`;
  and the immutable `Fnv1a64ConstHasher`, whose `extended(data)` returns a new
  hasher. Integer writes raise `ValueError` for values that do not fit.
  `write_str` hashes the UTF-8 bytes followed by a `0xFF` marker byte.
- `qorcore.version` – `Version(major, minor, patch, build)` packed into 64 bits
  (major, minor and patch up to 1023, build up to 2³²−1), ordered and comparable,
  with `Version.invalid()`.
- `qorcore.ids` – `Id`, an index with an invalid state (`index()` raises
  `QorError` with `INVALID_ID` when invalid), and `Tag`, a 64-bit name tag that
  is either eight bytes of text (`Tag.from_text`) or a hash with the top bit set
  (`Tag.from_str`, `Tag.from_const`, `with_added_tag`, `with_added_str`).
- `qorcore.types` – `type_tag(name)` for built-in type names such as `"u8"`,
  `"f32"` or `"String"`, `array_type_tag(element, length)`, `TypeId`,
  `is_equal`, `is_integral`, `is_floating`, `zero`, `one`, `inf`, and the
  `F16` / `BF16` half-precision floats with `from_f32` and `to_f32`.
- `qorcore.config` – `parse_json` (raises `QorError` with `PARSE_ERROR`),
  `dump_json` (compact output, no NaN or infinity), and `Config`, which wraps a
  JSON value and is indexed by key or position.
- `qorcore.component` – the `State` enum and the abstract `Component` base
  class with `init`, `setup`, `start_up`, `run`, `shut_down`, `class_name`,
  `instance_name` and `state`.
- `qorcore.osmem` – `ProcessMem`, which hands out zeroed `bytearray` blocks and
  records every allocation and deallocation as a `MemAction` (`history()`,
  `dump()`); and `Os`, with `Os.name()` and the process-wide `Os.memory()`.
- `qorcore.pt1` – a first-order lag `Model(k, t)` whose `update()` advances one
  50 ms period and prints the cycle number and output.
- `qorcore.activity` – `Activity(name)`, whose `init`, `step` and `terminate`
  print the microseconds since the previous phase.
- `qorcore.perception` – `CameraDriver` and `ObjectDetection`, whose stage
  methods print a line and record the stage name in `stages`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from qorcore.hashing import Fnv1a64Hasher
from qorcore.ids import Id, Tag

h = Fnv1a64Hasher()
h.write_str("Identifier")
print(hex(h.finish()))

print(Id(42))                              # #042
print(repr(Tag.from_text(b"mem_heap")))    # #mem_heap 706165685f6d656d
print(hex(Tag.from_str("/root/folder/file.txt").value()))
```

```python
from qorcore.config import Config

config = Config.from_json('{"name": "John", "courses": ["Math", "Science"]}')
print(config["name"])        # John
print(config["courses"][1])  # Science
```

```python
from qorcore.types import F16

half = F16.from_f32(1.5)
print(half.to_f32())  # 1.5
```

## What it does not do

There is no scheduler, task executor or event system here. `Model`,
`Activity`, `CameraDriver` and `ObjectDetection` are plain objects: nothing
runs them periodically or chains them together, so you call their methods
yourself. `Component` only defines the life-cycle interface; no concrete
components are included. The package has no command-line entry points.