# tombgrid

tombgrid is the shell of a grid-based puzzle game. It contains:

- a pygame window and frame loop that sends input to a GUI and to the game,
- a small widget toolkit with pause, options, level-select and death menus
  and the debug, controls and inspector side panels,
- a game object with an entity registry, an event bus and a list of systems,
- loaders for the XML resource catalogue and XML object files,
- a reader for Wavefront `.obj` models and their `.mtl` material libraries.

## Installation

```
pip install .
```

To install the test dependencies too:

```
pip install .[test]
```

## Running

```
tombgrid
```

This opens a resizable 1920×1080 window titled "city builder demo" and runs
it at 60 frames per second. By default resources are read from `res/`,
relative to the current directory. Use another directory like this:

```
tombgrid --resources path/to/res/
```

The path is joined to file names as plain text, so it must end with a path
separator. If `resources.xml` cannot be read, an error is logged and the game
starts with no resources. If it can be read, the `objects` directory next to
it must also exist.

### Keys and mouse

These keys work only while the game is running, which means no menu is open:

| Key | Action |
| --- | --- |
| Esc | Open the pause menu |
| F1  | Show or hide the debug panel |
| F2  | Show or hide the on-screen controls panel (shown at start) |
| F3  | Show or hide the inspector panel |

To click a button, release the left mouse button over it. A button turns
white while the pointer stays over it.

- Pause menu: *Back to game*, *Options*, *Bot Mode* and *Close Game*.
  *Bot Mode* raises an `OnStartBot` event and closes the menus.
- Options menu: *Level Select*, *Back* and *Done*.
- Level select: *Level 1* to *Level 5*. Each one raises a
  `RequestLevelEvent` for `level_1` to `level_5` and closes the menus.
- Death menu: opens when an `OnLaraDiedEvent` is raised. *Retry* raises
  `RequestLevelRestart`. *Close Game* stops the loop.
- Controls panel: its buttons raise `OskMoveRequested` with left, right,
  forward, backward or interact.
- Debug panel: *Reload Resources* reloads the catalogue and raises
  `ResourceUpdatedEvent`. It also shows the frame rate and the camera
  position.

While the game is paused (`GameState.PAUSED`), `Game.raise_event` drops input
and movement events. Framebuffer, camera, level, restart, death and bot
events are delivered in either state.

## What the package does not do

The package has no game logic of its own. It does not render the 3D scene,
load or lay out levels, move the player, run enemies, or react to the level,
restart, movement and bot events that the menus raise. `Game` starts with no
systems. Game logic is supplied as `System` subclasses added with
`Game.add_system` and as handlers connected to `Game.event_bus`. Without them
the window shows only the GUI over a plain background. The inspector panel
draws a thumbnail only when a texture is passed to `Gui`, and `Application`
does not pass one.

## Resources

`resources.xml` has a `<resources>` root that holds `<resource>` elements.
Each one has an `id` and a `type`:

- `mesh`: `filename` names an `.obj` model, which is loaded with
  `load_mesh`. Other formats raise `ValueError`.
- `shader`: stored as a `ConfigValue` that holds the full path.
- `tile_template`: `surface` (`ground`, `front` or `side`), `mesh` (required),
  `mesh_cracked`, and `allow_forward`, `allow_backward`, `allow_left` and
  `allow_right`, which default to true.
- `enemy_template`: `enemy` (`saw` or `snake`), `surface`, `pattern`
  (`forwardback`, `leftright` or `forward`) and `mesh` (required).
- `config_value`: `value` is stored as a `ConfigValue`.

An unknown type raises `ValueError`. Every `*.xml` file in `objects/` is read
by `ObjectLoader` and stored as `object.<file stem>`. An object file has an
`<object>` root. It may contain `<name>`, `<mesh filename=...>`, `<route>`
with `<tile>` elements, `<auto_nav>` with `<event id=...>` elements, and
`<lara cell=... offset=... surface=...>`.

```python
from tombgrid.resources.resource_manager import ConfigValue, ResourceManager

manager = ResourceManager("res/")
level = manager.get_resource("default_level", ConfigValue)
```

If a resource is not of the requested type, `get_resource` raises
`ResourceTypeError`. An unknown id raises `KeyError`.

## Using the library

- `tombgrid.objmodel`: `parse_obj`, `load_obj`, `parse_mtl` and `load_mtl`
  read models into `Model`, `Mesh` and `Material` data. Each mesh holds flat
  per-triangle vertex, texture-coordinate and normal lists.
- `tombgrid.gui`: `Widget`, `Container`, `Label`, `Icon`, `Button`,
  `TextButton`, `IconButton` and `StackPanel`. They are laid out with the
  constraints in `tombgrid.gui.constraints` (`absolute`, `relative`,
  `center`, `aspect`) and draw onto a `Canvas`. `RecordingCanvas` keeps
  every draw call, so layout and drawing can be checked without a window.
- `tombgrid.resources.entities`: `Registry` and `Object`.
- `tombgrid.transform`: 4×4 matrix helpers and the transformation
  components.
- `tombgrid.cells` and `tombgrid.enemies`: cell positions, surfaces, enemy
  types and movement patterns.

```python
from tombgrid.objmodel import parse_obj

model = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
print(model.meshes[0].triangle_count)  # 1
```

## Tests

```
pytest
```