# oiview

The interaction and presentation logic of an image viewer, in plain Python
with no dependencies beyond the standard library. The host application
supplies pointer positions, clocks and image operations; the package keeps
the state and does the arithmetic and text layout.

## Modules

- `oiview.geometry`: `Point` (addition, subtraction, scaling, `abs`, `sign`,
  `distance_squared`, `rounded`), `Rect` (`width`, `height`, `corner`,
  `inflate`, `contains`, `translated`) and the `Corner` enum.
- `oiview.selection_rect`: `SelectionRect`, driven by `set_selection` with an
  `Operation` (`BEGIN_DRAG`, `DRAG`, `END_DRAG`, `CANCEL_SELECTION`). It draws
  a new rectangle, resizes an existing one from a corner or an edge (`LockMode`),
  moves it, and calls `callback(rect, visible)` on every change.
  `update_selection`, `closest_corner` and `opposite_corner` are also provided.
- `oiview.adaptive_motion`: `AdaptiveMotion.add(amount)` returns a velocity
  that grows quadratically with repeated input in one direction and drains
  while idle.
- `oiview.auto_scroll`: `scroll_velocity(delta, metrics)` maps the distance
  between an anchor and the pointer to a signed speed, with a dead zone and a
  maximum speed set by `ScrollMetrics`. `AutoScroll.toggle()` starts or stops
  scrolling; while active, each `perform()` call passes the amount due since
  the previous call to the scroll function.
- `oiview.multi_click`: `MouseMultiClickHandler` counts presses of each
  `MouseButton` and reports a `ClickEvent` with the click count to listeners
  added with `add_listener`. The event fires at once when `max_taps` is
  reached, otherwise when the host calls `process_queued_buttons` after the
  delay given by `pending_delay()`.
- `oiview.command_manager`: `CommandManager` with `Command`, `CommandGroup`,
  `CommandRequest` and `CommandArgs` (parsed from `key=value;key=value`).
  Executing an unregistered command raises `UnknownCommandError`.
- `oiview.configuration`: `load_command_groups`, `load_key_bindings` and
  `load_settings` read `Commands.json`, `KeyBindings.json` and `Settings.json`
  from a given folder. `flatten_settings` turns nested settings into
  `a/b/c` names. Malformed command or key binding files raise
  `ConfigurationError`; an unreadable settings file yields an empty dict.
- `oiview.file_sorter`: `FileSorter` orders paths by `SortType.NAME`,
  `EXTENSION` or `DATE`, each with its own `SortDirection` (dates default to
  newest first).
- `oiview.image_state`: `ImageState` keeps the chain source → deformed →
  rasterized → resampled, refreshed lazily from the first stage that changed.
  The image operations come from a `StageProcessors` you supply.
  `compose_transform` combines quarter-turn rotations and flips.
- `oiview.texel`: channel descriptions (`Channel`, `TexelInfo`) and
  `parse_texel_value`, which renders the value of one texel as coloured text.
- `oiview.message_formatter`: `format_number` (comma thousands separators),
  `format_meta_text` (key/value pairs in dotted, aligned columns of at most
  `max_lines` lines), `format_texel_info`, `decompose_path` and
  `format_file_path`.
- `oiview.message_helper`: `describe_image_source`, `file_time` and
  `create_key_bindings_message`, which lists each key binding with the
  display name of its command group.
- `oiview.pixel_helper`: `count_unique_values` counts distinct texel values
  in a raw image buffer with a given row pitch.

## Installation

```
pip install .
```

## Example

```python
from oiview.geometry import Point
from oiview.selection_rect import SelectionRect, Operation

def on_change(rect, visible):
    print(rect, visible)

selection = SelectionRect(on_change)
selection.set_selection(Operation.BEGIN_DRAG, Point(10, 10))
selection.set_selection(Operation.DRAG, Point(110, 60))
selection.set_selection(Operation.END_DRAG, Point(110, 60))
print(selection.rect)
```

Formatting a table of key/value lines:

```python
from oiview.message_formatter import FormatArgs, ValueObject, format_meta_text

args = FormatArgs(message_values=[("Width", [ValueObject(640), ValueObject("px")])])
print(format_meta_text(args))
```

## What the package does not do

There is no window, renderer or command-line program here. The package
does not decode image files, draw text, show context menus or watch folders
for changes. Timers are not started for you: the host calls
`AutoScroll.perform` and `MouseMultiClickHandler.process_queued_buttons` on
its own schedule, and `ImageState` relies on the deform, rasterize and
resample functions it is given.

## Running the tests

```
pip install .[test]
pytest
```