"""Reading Wavefront OBJ meshes into :class:`RasterizerModel` objects."""

from __future__ import annotations

from os import PathLike

from .model import Face, RasterizerModel
from .vectors import Float2, Float3


def count_spaces(text: str) -> int:
    """Count the whitespace characters in ``text``."""
    return sum(1 for char in text if char.isspace())


def _parse_floats(fields: list[str], count: int, line: str) -> list[float]:
    if len(fields) < count:
        raise ValueError(f"expected {count} numbers in line {line!r}")
    try:
        return [float(value) for value in fields[:count]]
    except ValueError as exc:
        raise ValueError(f"malformed number in line {line!r}") from exc


def _parse_vertex(line: str) -> Float3:
    x, y, z = _parse_floats(line[2:].split(), 3, line)
    return Float3(x, y, z)


def _parse_tex_coord(line: str) -> Float2:
    u, v = _parse_floats(line[2:].split(), 2, line)
    return Float2(u, v)


def _parse_point(token: str) -> tuple[int, int]:
    """Return zero-based vertex and texture indices of one ``v/t/n`` token.

    A missing texture index refers to the first texture coordinate.
    """
    fields = token.split("/")
    try:
        vertex = int(fields[0])
        tex = int(fields[1]) if len(fields) > 1 and fields[1] else 1
    except ValueError as exc:
        raise ValueError(f"malformed face point {token!r}") from exc
    return vertex - 1, tex - 1


def _parse_face(line: str) -> list[Face]:
    """Split a polygon line into a triangle fan around its first point."""
    points = [_parse_point(token) for token in line[2:].split()]
    if not points:
        return []
    (first_v, first_t) = points[0]
    return [
        Face(
            ia=first_v,
            ib=prev_v,
            ic=cur_v,
            vt=(first_t, prev_t, cur_t),
        )
        for (prev_v, prev_t), (cur_v, cur_t) in zip(points[1:], points[2:])
    ]


def parse_obj(text: str) -> RasterizerModel:
    """Parse OBJ text; vertices, texture coordinates and faces are kept."""
    points: list[Float3] = []
    tris: list[Face] = []
    tex_coords: list[Float2] = []

    for line in text.split("\n"):
        if not line or line.isspace():
            continue
        if line.startswith("v "):
            points.append(_parse_vertex(line))
        elif line.startswith("f"):
            tris.extend(_parse_face(line))
        elif line.startswith("vt"):
            tex_coords.append(_parse_tex_coord(line))
        # Comments, object/group names, smoothing and anything else are ignored.

    return RasterizerModel(points=points, tris=tris, tex_coords=tex_coords)


def load_obj_file(path: str | PathLike[str]) -> RasterizerModel:
    """Read and parse the OBJ file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle.read())