# softraster

A small software rasterizer written in pure Python. It loads Wavefront OBJ
meshes with 8-bit RGB PNG textures, projects their triangles through a
perspective camera, fills them with perspective-correct texture mapping and a
depth buffer into a 320×180 frame, and shows that frame scaled up in a
1920×1080 pygame window.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
softraster [MODEL_DIR] [--frames N]
```

- `MODEL_DIR` is the directory holding the models; it defaults to
  `../../models`. The demo scene reads `player.obj` and `shambler.obj` from
  it, and `textures/quake_character.png` and `textures/shambler.png` below
  it. These files are not shipped with the package.
- `--frames N` stops after `N` frames (a positive number).

If a model or texture cannot be read, the command prints the error and exits
with status 1.

The controls are:

| Key          | Action              |
|--------------|---------------------|
| Left / Right | turn (yaw)          |
| Up / Down    | look up / down      |
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Escape       | quit                |

Closing the window also quits.

## Using the library

```python
from softraster.objloader import load_obj_file
from softraster.texture import read_png_image
from softraster.transform import ModelTransform
from softraster.renderer import RasterizerCamera, Renderer
from softraster.vectors import Float3

model = load_obj_file("models/player.obj")
model.texture = read_png_image("models/textures/quake_character.png")
model.transform = ModelTransform(position=Float3(0, 0, 25), scale=0.1)

camera = RasterizerCamera(fov=60.0, background_color=Float3(100, 100, 150))
renderer = Renderer(320, 180)
renderer.init_frame(camera)
renderer.add_model(model)
frame = renderer.render(camera)

rgb = frame.to_rgb_bytes()  # 8-bit RGB triples, row by row
```

Modules:

- `softraster.vectors`: frozen `Float2` and `Float3` vectors with `+`, `-`,
  `dot` and `scale` (`Float3.truncate` drops z), plus `rand_range`,
  `random2` and `random3`.
- `softraster.transform`: `ModelTransform` (pitch, yaw, roll, position,
  scale) with `to_world_point` and `local_to_world_dir`, and `rotate_point`.
- `softraster.triangle`: `signed_area` and `point_in_triangle`, which returns
  a `TriangleHit` of `inside` and barycentric `weights`.
- `softraster.texture`: `read_png_image` and `TexImage` (with `pixel(row,
  col)`). Only RGB PNGs are accepted; unreadable files, non-PNG files and
  other colour modes raise `TextureError`.
- `softraster.model`: `Face` and `RasterizerModel`, with `color_at` (wrapping
  texture lookup, v axis flipped) and `tex_coord` (perspective-correct
  interpolation). `color_at` raises `ValueError` when the model has no
  texture.
- `softraster.objloader`: `parse_obj`, `load_obj_file` and `count_spaces`.
  `v`, `vt` and `f` lines are read; polygons become triangle fans around their
  first point, and a face point without a texture index uses the first
  texture coordinate. All other lines are ignored.
- `softraster.renderer`: `RasterizerCamera` (`to_local_point`,
  `world_point_to_screen`), `Frame` (`to_rgb_bytes`), `Renderer`
  (`init_frame`, `add_model`, `draw_model`, `render`), `clamp` and
  `edge_func`. Triangles crossing the near plane and back faces are skipped.
- `softraster.window`: `Window`, a context manager with `draw_frame` and
  `close`, and `frame_to_surface`.
- `softraster.scene`: `Scene` (`start`, `update`, `render`) and the `Key`
  enum used to steer its camera.
- `softraster.app`: `main`, the entry point of the `softraster` command.

## What it does not do

There is no lighting or shading: vertex normals and `.mtl` material files are
not read, and each pixel takes its texture colour unchanged. Only one texture
per model is used. Frames are shown on screen or returned as raw bytes; the
package has no option to save them as image files.