"""Point-in-triangle test with barycentric weights."""

from __future__ import annotations

from typing import NamedTuple

from .vectors import Float2, Float3


class TriangleHit(NamedTuple):
    """Result of :func:`point_in_triangle`."""

    inside: bool
    weights: Float3


def signed_area(check: Float2, pa: Float2, pb: Float2) -> float:
    """Twice the signed area of the triangle ``pa``, ``pb``, ``check``."""
    return (pb.x - pa.x) * (check.y - pa.y) - (pb.y - pa.y) * (check.x - pa.x)


def point_in_triangle(check: Float2, pa: Float2, pb: Float2, pc: Float2) -> TriangleHit:
    """Test whether ``check`` lies in the triangle and compute its weights.

    A point counts as inside when all three edge areas are non-positive and
    the triangle is not degenerate.
    """
    area_abp = signed_area(check, pa, pb)
    area_bcp = signed_area(check, pb, pc)
    area_cap = signed_area(check, pc, pa)
    is_inside = area_abp <= 0 and area_bcp <= 0 and area_cap <= 0

    has_no_area = area_abp + area_bcp + area_abp == 0
    total = area_abp + area_bcp + area_cap
    inverse_area = 1.0 / total if not has_no_area and total != 0 else 1.0 / 3.0

    weights = Float3(
        abs(area_bcp * inverse_area),
        abs(area_cap * inverse_area),
        abs(area_abp * inverse_area),
    )
    return TriangleHit(is_inside and not has_no_area, weights)