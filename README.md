# anoptic

Runtime utilities for a small game engine, in plain Python with no
third-party dependencies.

## Modules

### `anoptic.timing`

- `timestamp_raw()`, `timestamp_us()`, `timestamp_ms()`: monotonic
  timestamps in nanoseconds, microseconds and milliseconds. The millisecond
  value wraps at 32 bits.
- `timestamp_unix()`: the current Unix time in whole seconds.
- `busywait(ns)`: spins for at least `ns` nanoseconds. It raises
  `ValueError` for a negative duration or one above `MAX_BUSYWAIT_NS`
  (one second).
- `sleep(us)`: hands the thread to the OS scheduler for `us` microseconds.
  A negative duration raises `ValueError`.

### `anoptic.frametime`

- `find_average(values)`: the arithmetic mean, or `0.0` for no values.
- `FrameTimer(clock=None, output=None)`: call `measure()` once per frame.
  After every window of `FRAME_WINDOW` (200) calls it prints each frame's
  duration and the average frame time to `output` (standard output by
  default), and then returns the list of durations. At every other call it
  returns `None`. The clock defaults to `timing.timestamp_us`.

### `anoptic.logbuffer`

- `LogLevel`: `DEBUG`, `INFO`, `WARN`, `ERROR`, `FATAL`.
- `build_log_string(level, file_name, line_number, fmt, *args)` formats a
  line as `LEVEL  file:line:   message`. `fmt` is a printf-style format and
  the result is cut to the size limits `LOG_PREFIX_MAX` and
  `LOG_MESSAGE_MAX`.
- `LogQueue(capacity=LOG_BUFFER_MAX)`: a thread-safe, bounded queue of
  formatted lines. It can also be used as a context manager.
  - Each queued line takes its length plus one unit of capacity.
  - `enqueue(...)` adds a line and returns it. It raises `LogBufferFull`
    when the line does not fit.
  - `immediate(...)` prints the line at once, to standard error for levels
    above `WARN` and to standard output otherwise, and then drains the
    queue.
  - `flush()` removes all queued lines and returns them joined by newlines.
  - `close()` discards the queue. After that, `enqueue` and `flush` raise
    `RuntimeError`.
  - `len(queue)`, `used` and `capacity` report the queue's state.
- `write_to_log_file(data, path)` appends text to a file under a lock.

### `anoptic.gltf`

A reader for glTF 2.0 JSON documents.

- `document.load_gltf(path)` reads a `.gltf` file into a
  `model.GltfElements`. It then loads every external buffer whose file
  exists and whose size matches its declared `byteLength`. Buffer URIs are
  resolved next to the `.gltf` file.
- `document.parse_elements(text, elements=None)` and
  `document.count_elements(text)` work on JSON text. `GltfError` is raised
  for text that is not valid JSON or that cannot be read.
- `geometry` and `resources` hold the per-collection parsers
  (`parse_scenes`, `parse_meshes`, `parse_accessors`, and so on).
  Properties are matched by `keys.key_hash`, the sum of the name's bytes,
  so names that hash alike are treated alike. A mesh keeps a single
  primitive record. Where a mesh has several primitives, later ones
  override earlier ones.
- `buffers.mesh_vertices(elements, mesh)` returns
  `(position, texcoord, color)` tuples, with `DEFAULT_COLOR` as the colour.
  `buffers.mesh_indices(elements, mesh)` returns 16-bit indices; 32-bit
  indices are truncated.
- `report.format_elements(elements)` returns a readable listing, and
  `report.print_elements(elements, file)` writes it.

### `anoptic.filesystem`

- `game_path()`: the absolute path of the running program, worked out once
  and cached.
- `user_path()`: `~/Documents/My Games/AnoTestGame`. The directory is not
  created.

## What it does not do

- There is no rendering, window or GPU code. The glTF reader returns plain
  Python data, and uploading it is left to the caller.
- Binary `.glb` files, embedded `data:` URIs and images are not decoded.
- `LogQueue` never writes to a file by itself. Pass the result of `flush()`
  to `write_to_log_file` to keep the lines.
- There is no command-line program.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from anoptic import timing

start = timing.timestamp_raw()
timing.busywait(5_000)          # spin for about 5 microseconds
elapsed = timing.timestamp_raw() - start
```

```python
from anoptic.logbuffer import LogLevel, LogQueue, write_to_log_file

with LogQueue(8192) as queue:
    queue.enqueue(LogLevel.ERROR, "main.py", 12, "Enqueued message # %d", 1)
    write_to_log_file(queue.flush() + "\n", "game.log")
```

```python
from anoptic.gltf.document import load_gltf
from anoptic.gltf.buffers import mesh_vertices, mesh_indices
from anoptic.gltf.report import print_elements

elements = load_gltf("scene.gltf")
print_elements(elements, None)
vertices = mesh_vertices(elements, elements.meshes[0])
indices = mesh_indices(elements, elements.meshes[0])
```