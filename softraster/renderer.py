"""Software rasterisation of textured models into a frame buffer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .model import RasterizerModel
from .transform import ModelTransform
from .vectors import Float2, Float3

WINDOW_WIDTH = 320
WINDOW_HEIGHT = 180
REAL_WINDOW_WIDTH = 1920
REAL_WINDOW_HEIGHT = 1080

NEAR_PLANE = 0.0001
OFFSCREEN = -9999.0


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the range ``low`` .. ``high``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def edge_func(a: Float2, b: Float2, p: Float2) -> float:
    """Signed edge function of ``p`` against the edge ``a`` to ``b``."""
    return (p.x - a.x) * (b.y - a.y) - (p.y - a.y) * (b.x - a.x)


@dataclass
class RasterizerCamera:
    """A perspective camera with a vertical field of view in degrees."""

    fov: float = 60.0
    background_color: Float3 = field(default_factory=lambda: Float3(0.0, 0.0, 0.0))
    transform: ModelTransform = field(default_factory=ModelTransform)

    def to_local_point(self, world: Float3) -> Float3:
        """Express a world-space point in camera space."""
        t = self.transform
        rel = world - t.position

        cy, sy = math.cos(-t.yaw), math.sin(-t.yaw)
        cp, sp = math.cos(-t.pitch), math.sin(-t.pitch)
        cr, sr = math.cos(-t.roll), math.sin(-t.roll)

        yx = cy * rel.x + sy * rel.z
        yy = rel.y
        yz = -sy * rel.x + cy * rel.z

        px = yx
        py = cp * yy - sp * yz
        pz = sp * yy + cp * yz

        return Float3(cr * px - sr * py, sr * px + cr * py, pz)

    def world_point_to_screen(self, point: Float3, width: int, height: int) -> Float3:
        """Project a camera-space point onto a ``width`` x ``height`` screen.

        Points at or behind the near plane go far off screen, keeping their depth.
        """
        if point.z <= NEAR_PLANE:
            return Float3(OFFSCREEN, OFFSCREEN, point.z)
        focal = (height * 0.5) / math.tan(math.radians(self.fov) * 0.5)
        inv_z = 1.0 / point.z
        return Float3(
            point.x * inv_z * focal + width * 0.5,
            point.y * inv_z * focal + height * 0.5,
            point.z,
        )


@dataclass
class Frame:
    """A frame buffer of RGB colours stored row by row."""

    width: int
    height: int
    data: list[Float3]

    def __post_init__(self) -> None:
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"frame holds {len(self.data)} pixels, expected {self.width * self.height}"
            )

    def to_rgb_bytes(self) -> bytes:
        """Pack the frame as 8-bit RGB triples, truncating each channel."""
        return bytes(
            int(clamp(channel, 0, 255))
            for color in self.data
            for channel in (color.x, color.y, color.z)
        )


class Renderer:
    """Holds the depth buffer, the frame and the queue of models to draw."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.queue: list[RasterizerModel] = []
        self.depth_buffer: list[list[float]] = []
        self.frame = Frame(width, height, [])  # replaced just below
        self.init_frame(RasterizerCamera())

    def add_model(self, model: RasterizerModel) -> None:
        """Queue ``model`` for drawing in the current frame."""
        self.queue.append(model)

    def init_frame(self, camera: RasterizerCamera) -> None:
        """Empty the queue, reset depths and fill the frame with the background."""
        self.queue = []
        self.depth_buffer = [[math.inf] * self.width for _ in range(self.height)]
        self.frame = Frame(
            self.width,
            self.height,
            [camera.background_color] * (self.width * self.height),
        )

    def draw_model(self, model: RasterizerModel, camera: RasterizerCamera) -> None:
        """Rasterise every triangle of ``model`` into the frame."""
        width, height = self.width, self.height
        depth_buffer = self.depth_buffer
        data = self.frame.data

        for tri in model.tris:
            a, b, c = (
                camera.world_point_to_screen(
                    camera.to_local_point(model.transform.to_world_point(model.points[i])),
                    width,
                    height,
                )
                for i in (tri.ia, tri.ib, tri.ic)
            )

            if a.z <= NEAR_PLANE or b.z <= NEAR_PLANE or c.z <= NEAR_PLANE:
                continue

            ab = b - a
            ac = c - a
            if ab.x * ac.y - ab.y * ac.x > 0:
                continue  # back face

            minx, maxx = min(a.x, b.x, c.x), max(a.x, b.x, c.x)
            miny, maxy = min(a.y, b.y, c.y), max(a.y, b.y, c.y)
            if minx >= width or maxx < 0 or miny >= height or maxy < 0:
                continue

            startx = int(clamp(int(minx), 0, width - 1))
            starty = int(clamp(int(miny), 0, height - 1))
            endx = int(clamp(int(maxx), 0, width - 1))
            endy = int(clamp(int(maxy), 0, height - 1))

            v0, v1, v2 = a.truncate(), b.truncate(), c.truncate()
            area = edge_func(v0, v1, v2)
            if area == 0:
                continue

            depths = Float3(a.z, b.z, c.z)
            for y in range(starty, endy + 1):
                row = depth_buffer[y]
                for x in range(startx, endx + 1):
                    p = Float2(x + 0.5, y + 0.5)
                    w0 = edge_func(v1, v2, p)
                    w1 = edge_func(v2, v0, p)
                    w2 = edge_func(v0, v1, p)
                    if w0 < 0 or w1 < 0 or w2 < 0:
                        continue
                    weights = Float3(w0 / area, w1 / area, w2 / area)
                    depth = depths.dot(weights)
                    if row[x] < depth:
                        continue
                    row[x] = depth
                    data[x + y * width] = model.color_at(model.tex_coord(weights, tri, depths))

    def render(self, camera: RasterizerCamera) -> Frame:
        """Draw every queued model and return the finished frame."""
        for model in self.queue:
            self.draw_model(model, camera)
        return self.frame