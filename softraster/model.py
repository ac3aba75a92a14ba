"""Triangle meshes with texture lookup."""

from __future__ import annotations

from dataclasses import dataclass, field

from .texture import TexImage
from .transform import ModelTransform
from .vectors import Float2, Float3


@dataclass(frozen=True)
class Face:
    """A triangle given by vertex indices and texture-coordinate indices."""

    ia: int
    ib: int
    ic: int
    vt: tuple[int, int, int] = (0, 0, 0)
    vn: tuple[int, int, int] = (0, 0, 0)


@dataclass
class RasterizerModel:
    """A textured triangle mesh placed in the world by a transform."""

    points: list[Float3] = field(default_factory=list)
    tris: list[Face] = field(default_factory=list)
    tex_coords: list[Float2] = field(default_factory=list)
    transform: ModelTransform = field(default_factory=ModelTransform)
    texture: TexImage | None = None

    @property
    def num_points(self) -> int:
        return len(self.points)

    @property
    def num_triangles(self) -> int:
        return len(self.tris)

    def color_at(self, tex_coord: Float2) -> Float3:
        """Sample the texture at ``tex_coord``, wrapping in both directions.

        The vertical axis is flipped so that ``v`` grows upwards.
        """
        if self.texture is None:
            raise ValueError("model has no texture")
        cols = self.texture.cols
        rows = self.texture.rows
        x = int(tex_coord.x * cols) % cols
        y = rows - int(tex_coord.y * rows) % rows
        # y == rows lands one past the last row; wrap it to the first.
        return self.texture.pixel(y % rows, x)

    def tex_coord(self, weights: Float3, face: Face, depths: Float3) -> Float2:
        """Perspective-correct texture coordinate from barycentric weights."""
        a = self.tex_coords[face.vt[0]]
        b = self.tex_coords[face.vt[1]]
        c = self.tex_coords[face.vt[2]]

        w0 = weights.x / depths.x
        w1 = weights.y / depths.y
        w2 = weights.z / depths.z
        inv_z = w0 + w1 + w2

        return Float2(
            (a.x * w0 + b.x * w1 + c.x * w2) / inv_z,
            (a.y * w0 + b.y * w1 + c.y * w2) / inv_z,
        )