import math

import pytest
from PIL import Image

from softraster.renderer import Renderer
from softraster.scene import Key, Scene
from softraster.vectors import Float3

OBJ_TEXT = "v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nvt 1 0\nvt 0 1\nf 1/1/1 2/2/1 3/3/1\n"


def _write_models(root, with_textures=True):
    (root / "player.obj").write_text(OBJ_TEXT)
    (root / "shambler.obj").write_text(OBJ_TEXT)
    if with_textures:
        textures = root / "textures"
        textures.mkdir()
        Image.new("RGB", (2, 2), (1, 2, 3)).save(textures / "quake_character.png")
        Image.new("RGB", (2, 2), (4, 5, 6)).save(textures / "shambler.png")


def test_initial_camera():
    scene = Scene("unused")
    assert scene.camera.fov == 60.0
    assert scene.camera.background_color == Float3(100.0, 100.0, 150.0)
    assert scene.models == []


def test_start_loads_models_with_transforms(tmp_path):
    _write_models(tmp_path)
    scene = Scene(tmp_path)
    scene.start()
    player, shambler = scene.models
    assert player.num_triangles == 1
    assert player.transform.position == Float3(0.0, 0.0, 25.0)
    assert player.transform.scale == pytest.approx(0.1)
    assert player.transform.roll == pytest.approx(math.pi)
    assert shambler.transform.pitch == pytest.approx(math.pi)
    assert shambler.transform.position == Float3(0.0, 0.0, 10.0)
    assert player.texture.pixel(0, 0) == Float3(1.0, 2.0, 3.0)
    assert shambler.texture.pixel(1, 1) == Float3(4.0, 5.0, 6.0)


def test_start_missing_model_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Scene(tmp_path).start()


def test_rotation_keys():
    scene = Scene("unused")
    scene.update(0.5, {Key.LEFT})
    assert scene.camera.transform.yaw == pytest.approx(-0.4)
    scene.update(0.5, {Key.RIGHT, Key.UP})
    assert scene.camera.transform.yaw == pytest.approx(0.0)
    assert scene.camera.transform.pitch == pytest.approx(0.4)


def test_opposite_keys_cancel():
    scene = Scene("unused")
    scene.update(0.25, {Key.W, Key.S, Key.A, Key.D})
    pos = scene.camera.transform.position
    assert (pos.x, pos.y, pos.z) == pytest.approx((0.0, 0.0, 0.0))


def test_forward_moves_along_z():
    scene = Scene("unused")
    scene.update(0.5, {Key.W})
    pos = scene.camera.transform.position
    assert (pos.x, pos.y, pos.z) == pytest.approx((0.0, 0.0, 5.0))


def test_movement_length_independent_of_heading():
    scene = Scene("unused")
    scene.camera.transform.yaw = 1.1
    scene.camera.transform.pitch = -0.3
    scene.update(0.2, {Key.D})
    pos = scene.camera.transform.position
    assert math.sqrt(pos.dot(pos)) == pytest.approx(2.0)


def test_total_time_accumulates():
    scene = Scene("unused")
    scene.update(0.25, set())
    scene.update(0.5, set())
    assert scene.total_time == pytest.approx(0.75)


def test_render_queues_all_models(tmp_path):
    _write_models(tmp_path)
    scene = Scene(tmp_path)
    scene.start()
    renderer = Renderer()
    scene.render(renderer)
    assert renderer.queue == scene.models