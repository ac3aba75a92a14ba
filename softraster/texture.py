"""Loading RGB PNG images into texture colour maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike

from PIL import Image, UnidentifiedImageError

from .vectors import Float3

log = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TextureError(Exception):
    """Raised when a texture image cannot be read."""


@dataclass
class TexImage:
    """A texture stored row by row as RGB colours in the 0..255 range."""

    rows: int
    cols: int
    cmap: list[Float3]

    def __post_init__(self) -> None:
        if len(self.cmap) != self.rows * self.cols:
            raise ValueError(
                f"colour map holds {len(self.cmap)} pixels, expected {self.rows * self.cols}"
            )

    def pixel(self, row: int, col: int) -> Float3:
        """Return the colour at ``row``, ``col``."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"pixel ({row}, {col}) outside {self.rows}x{self.cols} texture")
        return self.cmap[row * self.cols + col]


def read_png_image(filename: str | PathLike[str]) -> TexImage:
    """Read an RGB PNG file into a :class:`TexImage`."""
    log.info("Reading PNG file: %s", filename)
    try:
        with open(filename, "rb") as fp:
            if fp.read(8) != PNG_SIGNATURE:
                raise TextureError(f"File {filename} is not recognized as a PNG file")
            fp.seek(0)
            with Image.open(fp) as image:
                if image.mode != "RGB":
                    raise TextureError("Only RGB PNGs are supported")
                image.load()
                cols, rows = image.size
                data = image.tobytes()
    except TextureError:
        raise
    except UnidentifiedImageError as exc:
        raise TextureError(f"File {filename} is not recognized as a PNG file") from exc
    except OSError as exc:
        raise TextureError(f"File {filename} could not be opened for reading: {exc}") from exc

    channels = iter(data)
    cmap = [Float3(float(r), float(g), float(b)) for r, g, b in zip(channels, channels, channels)]
    return TexImage(rows=rows, cols=cols, cmap=cmap)