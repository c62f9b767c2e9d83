# sceneview

sceneview is the model of a 3D model viewer, built around a small scene graph.
Entities carry components. Transform, mesh and point-light entities each come
with defaults. WASD controllers rotate or move the entities bound to them, frame
by frame, while keys are held down. A `Viewer` puts these together into one
scene. It holds one model, a light and a rotation controller. It opens model
files directly or through drag-and-drop.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## The `sceneview` command

```
sceneview [--log-file FILE] [MODEL ...]
```

The command does the following, in order:

1. Turns on file logging. The log is appended to `FILE`, which defaults to
   `application.log` in the current directory. Every line is also printed to
   standard output.
2. Builds a `Viewer`.
3. Loads each `MODEL` given, in order.

It exits with status 0 when every model loads. It exits with status 1 at the
first model that cannot be loaded, after logging the reason at critical level.

## Supported model formats

The viewer accepts files with these extensions, in any letter case:
`obj`, `fbx`, `dae`, `gltf`, `glb`, `stl`, `3ds` and `ply`.

```python
from sceneview.app import is_supported_model_file

is_supported_model_file("robot.OBJ")   # True
is_supported_model_file("notes.txt")   # False
```

## The viewer

`sceneview.app.Viewer(screen_size=None, logger=None)` builds the following scene
under `root_entity`:

- `mesh_entity`: a `MeshEntity` whose source is `Qt3DModel/FinalBaseMesh.obj`.
- `point_light_entity`: a `PointLightEntity`.
- `rotate_controller`: a `WASDRotateController` bound to the mesh.

If you give `screen_size=(width, height)`, the viewer sets `window_size` to half
the screen size. It sets `window_position` so that the window is centred on the
screen.

`Viewer.load_model(path)` points the mesh at `path`. It raises `ModelLoadError`
in these cases:

- the file does not exist;
- the file cannot be read;
- the extension is not a supported format.

The error's `title` is either `"File Error"` or `"Format Error"`. After a
successful load, `status` holds a `StatusMessage` that reads
`"Model loaded: <name>"`.

`Viewer.drag_enter(urls)` and `Viewer.drop(urls)` take a list of URLs. Only the
first URL is used, and it must be a local `file:` URL. `drag_enter` returns
whether the drag would be accepted. `drop` loads the file and returns whether
the load succeeded. Both set `status` to a message that explains the result.

## Scene building blocks

- `sceneview.entity` holds the core types:
  - `Entity`: a node with a parent, children and components (`add_component`,
    `remove_component`).
  - `TransformEntity`: an entity with a `Transform`. It starts at the origin,
    and you can replace it with `set_transform`.
  - `Transform`: a translation, a rotation and a scale. It also gives Euler
    access through `rotation_x`, `rotation_y` and `rotation_z`, in degrees.
  - `Vector3` and `Quaternion`: the value types. `Quaternion` has
    `from_euler_angles` and `to_euler_angles`.
  - `Signal`: a callback list with `connect`, `disconnect` and `emit`.
- `sceneview.mesh`:
  - `MeshEntity` holds a `Mesh` source and a `PhongMaterial`. The material's
    diffuse colour is green by default.
  - `Color` is an 8-bit RGBA colour.
- `sceneview.light`: `PointLightEntity` holds a `PointLight`. The light is white
  with intensity 1.
- `sceneview.keys`:
  - `Key` holds the key codes.
  - `KeyboardDevice` tracks pressed keys through `press`, `release` and
    `is_pressed`.
  - `KeyNode` follows a single key, and its key can be changed with
    `set_key_code`.
- `sceneview.controllers`:
  - `WASDRotateController` uses W/S to turn about x and A/D to turn about y.
  - `WASDTranslateController` uses W/S to move along -z/+z and A/D to move
    along -x/+x. All four directions use `vertical_speed`.
  - `horizontal_speed` and `vertical_speed` both default to 50 per second.
  - You can rebind the four keys.

```python
from sceneview.controllers import WASDRotateController
from sceneview.keys import Key
from sceneview.mesh import MeshEntity

mesh = MeshEntity()
controller = WASDRotateController()
controller.bind_entity(mesh)
controller.keyboard_device.press(Key.A)
controller.frame(0.1)            # advance one frame of 0.1 s
mesh.transform.rotation_y        # 5.0
```

## Logging

`sceneview.logger.Logger.instance()` returns the shared logger. It has five
levels, given by `LogLevel`: `DEBUG`, `INFO`, `WARNING`, `CRITICAL` and `FATAL`.
Messages below the level set with `set_log_level` are dropped.

`set_log_to_file(enabled, file_path)` starts or stops appending lines to a file.
It returns whether file logging is active afterwards. `close()` stops writing to
the file.

```python
from sceneview.logger import Logger, LogLevel

log = Logger.instance()
log.set_log_level(LogLevel.INFO)
log.set_log_to_file(True, "viewer.log")
log.info("Model loaded")
```

Each line has the form `[yyyy-MM-dd hh:mm:ss.zzz] [LEVEL] message`.

## What this package does not do

sceneview keeps the state of a scene, but it does not draw it:

- It opens no window and renders nothing.
- It does not read or parse model files. A mesh only records the path of its
  source.
- It does not listen to a real keyboard or a display clock. Keys are fed in
  through `KeyboardDevice.press` and `release`, and frames through
  `WASDController.frame`.