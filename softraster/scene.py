"""The demo scene: two textured models and a freely moving camera."""

from __future__ import annotations

import enum
import math
from collections.abc import Collection
from os import PathLike
from pathlib import Path

from .model import RasterizerModel
from .objloader import load_obj_file
from .renderer import RasterizerCamera, Renderer
from .texture import read_png_image
from .transform import ModelTransform
from .vectors import Float3

ROT_SPEED = 0.8
MOVE_SPEED = 10.0


class Key(enum.Enum):
    """Keys that steer the camera."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    W = enum.auto()
    S = enum.auto()
    A = enum.auto()
    D = enum.auto()


class Scene:
    """Holds the camera and the models shown each frame."""

    def __init__(self, model_dir: str | PathLike[str] = "../../models") -> None:
        self.model_dir = Path(model_dir)
        self.models: list[RasterizerModel] = []
        self.total_time = 0.0
        self.camera = RasterizerCamera(
            fov=60.0,
            background_color=Float3(100.0, 100.0, 150.0),
            transform=ModelTransform(),
        )

    def _load(self, obj_name: str, texture_name: str, transform: ModelTransform) -> RasterizerModel:
        model = load_obj_file(self.model_dir / obj_name)
        model.transform = transform
        model.texture = read_png_image(self.model_dir / "textures" / texture_name)
        return model

    def start(self) -> None:
        """Load the scene's models and their textures."""
        self.models = [
            self._load(
                "player.obj",
                "quake_character.png",
                ModelTransform(roll=math.pi, position=Float3(0.0, 0.0, 25.0), scale=0.1),
            ),
            self._load(
                "shambler.obj",
                "shambler.png",
                ModelTransform(
                    pitch=math.pi, roll=math.pi, position=Float3(0.0, 0.0, 10.0), scale=0.05
                ),
            ),
        ]

    def update(self, delta_time: float, keys: Collection[Key]) -> None:
        """Turn and move the camera according to the held ``keys``."""
        t = self.camera.transform
        turn = ROT_SPEED * delta_time
        step = MOVE_SPEED * delta_time

        if Key.LEFT in keys:
            t.yaw -= turn
        if Key.RIGHT in keys:
            t.yaw += turn
        if Key.UP in keys:
            t.pitch += turn
        if Key.DOWN in keys:
            t.pitch -= turn

        moves = {
            Key.W: Float3(0.0, 0.0, step),
            Key.S: Float3(0.0, 0.0, -step),
            Key.A: Float3(-step, 0.0, 0.0),
            Key.D: Float3(step, 0.0, 0.0),
        }
        for key, local in moves.items():
            if key in keys:
                t.position = t.position + t.local_to_world_dir(local)

        self.total_time += delta_time

    def render(self, renderer: Renderer) -> None:
        """Queue every model of the scene for drawing."""
        for model in self.models:
            renderer.add_model(model)