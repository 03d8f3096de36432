# wmstate

`wmstate` models the state that a tiling window manager keeps: window
geometry, windows and their floating offsets, screens and dock areas,
workspaces with margins and gutters, tags, focus history and layout
cycling. It has no display-server code of its own. You feed it what
your display server reports, and you read back where everything belongs.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in it

| Module | Contents |
| --- | --- |
| `wmstate.xyhw` | `Xyhw` rectangles with min/max width and height limits, and `XyhwChange` partial updates |
| `wmstate.margins` | `Margins` with `uniform`, `from_pair` and `from_triple` |
| `wmstate.size` | `Pixel`, `Percentage` and `parse_size` |
| `wmstate.gutter` | `Side` and `Gutter` |
| `wmstate.kinds` | `WindowState`, `WindowType`, `WindowHandle`, `ModeKind` and `Mode` |
| `wmstate.window` | `Window`, `WindowChange` and the `UNCHANGED` marker |
| `wmstate.screen` | `BBox`, `Screen` and `DockArea` |
| `wmstate.workspace` | `Workspace` |
| `wmstate.tag` | `Tag` and the `Tags` collection |
| `wmstate.focus` | `FocusBehaviour` and `FocusManager` |
| `wmstate.layout_manager` | `LayoutMode` and `LayoutManager` |
| `wmstate.state` | `State` and the `SetWindowOrder` action |
| `wmstate.dto` | `Viewport`, `ManagerState`, `TagsForWorkspace`, `DisplayWorkspace` and `DisplayState` |

## A short tour

```python
from wmstate.xyhw import Xyhw
from wmstate.tag import Tags

area = Xyhw(y=5, h=1000, w=1000)
bar = Xyhw(h=10, w=100)
print(area.without(bar))        # y=10, h=995: trimmed so it no longer overlaps the bar

tags = Tags()
home = tags.add_new("home", "MainAndVertStack", 50)
tags.add_new_hidden("NSP")
print(home, tags.len_normal())  # 1 1
```

### Geometry

An `Xyhw` keeps its height and width within its `minw`/`maxw`/`minh`/`maxh`
limits whenever a field is assigned. `+` and `-` combine two rectangles
and keep the tighter limits of the two. `without` trims one rectangle out
of another. `center_halfed` gives a rectangle of half the size, centred
inside this one. `center` returns the centre point. An `XyhwChange`
applies only its fields that are not `None`, and `update` reports whether
anything differed.

### Windows

A `Window` works out its effective position and size from its normal
area, its margins and margin multiplier, its border, its floating offset
and its fullscreen state: see `x()`, `y()`, `width()`, `height()` and
`calculated_xyhw()`. Width and height are never less than 100 pixels for
managed windows, or less than the requested minimum when the window is
floating. A `WindowChange` applies what the display server reports to a
window. `transient` and `name` may be set to `None`; leave them as
`UNCHANGED` to keep the window's value.

### Tags

Normal tags are numbered from 1 upwards, without gaps. Hidden tags, such
as the scratchpad tag `NSP`, count down from `2**64 - 1`. Their labels
must be unique: `add_new_hidden` returns `None` for a label that is
already taken. `Tag.change_main_width` and `Workspace.change_main_width`
keep the main width percentage between 0 and 100.

### State

`State(config)` builds the tag list from the configuration and appends
the hidden `NSP` tag. It reads these attributes from the configuration
object:

- `tag_labels`
- `scratchpads`
- `layouts`
- `layout_mode`
- `focus_behaviour`
- `focus_new_windows`
- `disable_current_tag_swap`
- `max_window_width`
- `mousekey`
- `default_width`
- `default_height`

What the main calls do:

- `sort_windows()` orders windows by importance: first dialogs, splashes,
  utilities and menus, then floating normal windows, then the other
  normal windows, then everything else. It then queues a
  `SetWindowOrder` action in `actions`.
- `move_to_top(handle)` returns `False` for an unknown window.
- `restore_state(saved)` carries workspace layouts, tag settings, window
  placement, window tags and active scratchpads over from a saved
  `State`. A window whose tags no longer exist is put on tag 1.

### Configuration objects

`load_config` on `Window`, `Workspace` and `State` reads a configuration
object through its attributes. `Window.load_config` uses `margin`,
`border_width` and `always_float`. `Workspace.load_config` uses
`workspace_margin` and `gutters`. `FocusManager.from_config` uses
`focus_behaviour` and `focus_new_windows`.

### Status bar data

`ManagerState.from_state(state)` summarises a state. It raises
`KeyError` if a workspace shows an unknown tag.
`DisplayState.from_manager_state(...)` turns that summary into the
status of each tag on each workspace. `DisplayState.to_dict()` gives
plain data, ready for `json.dumps`.

## What it does not do

`wmstate` holds and updates state only. It has none of the following:

- no connection to a display server and no event loop;
- no command-line program;
- no reading of configuration files;
- no saving of a `State` to disk or loading one back.

Layouts are opaque values that `wmstate` stores, compares and cycles.
It does not arrange windows according to them.