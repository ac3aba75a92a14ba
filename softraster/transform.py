"""Model transforms: scale, rotation and translation into world space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vectors import Float3


def rotate_point(point: Float3, x: float, y: float, z: float) -> Float3:
    """Rotate ``point`` by the three Euler angles ``x``, ``y`` and ``z``."""
    alpha, beta, gamma = z, y, x

    ca, sa = math.cos(alpha), math.sin(alpha)
    cb, sb = math.cos(beta), math.sin(beta)
    cg, sg = math.cos(gamma), math.sin(gamma)

    r00 = cb * cg
    r01 = sa * sb * cg - ca * sg
    r02 = ca * sb * cg + sa * sg

    r10 = cb * sg
    r11 = sa * sb * sg + ca * cg
    r12 = ca * sb * sg - sa * cg

    r20 = -sb
    r21 = sa * cb
    r22 = ca * cb

    return Float3(
        r00 * point.x + r01 * point.y + r02 * point.z,
        r10 * point.x + r11 * point.y + r12 * point.z,
        r20 * point.x + r21 * point.y + r22 * point.z,
    )


@dataclass
class ModelTransform:
    """Orientation, position and uniform scale of an object."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0
    position: Float3 = field(default_factory=lambda: Float3(0.0, 0.0, 0.0))
    scale: float = 1.0

    def to_world_point(self, point: Float3) -> Float3:
        """Map a model-space point into world space."""
        scaled = point.scale(self.scale)
        rotated = rotate_point(scaled, self.roll, self.pitch, self.yaw)
        return rotated + self.position

    def local_to_world_dir(self, local: Float3) -> Float3:
        """Rotate a local direction by roll, then pitch, then yaw."""
        cy, sy = math.cos(self.yaw), math.sin(self.yaw)
        cp, sp = math.cos(self.pitch), math.sin(self.pitch)
        cr, sr = math.cos(self.roll), math.sin(self.roll)

        rx = cr * local.x - sr * local.y
        ry = sr * local.x + cr * local.y
        rz = local.z

        px = rx
        py = cp * ry - sp * rz
        pz = sp * ry + cp * rz

        return Float3(cy * px + sy * pz, py, -sy * px + cy * pz)