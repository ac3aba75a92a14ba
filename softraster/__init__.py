"""Software rasterizer for textured OBJ models, with a pygame viewer."""

__version__ = "0.1.0"