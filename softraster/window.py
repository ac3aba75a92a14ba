"""Presenting rendered frames in an on-screen window."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .renderer import REAL_WINDOW_HEIGHT, REAL_WINDOW_WIDTH, Frame  # noqa: E402


def frame_to_surface(frame: Frame) -> pygame.Surface:
    """Convert a frame into an opaque RGB surface of the same size."""
    return pygame.image.frombuffer(frame.to_rgb_bytes(), (frame.width, frame.height), "RGB")


class Window:
    """A display window that shows frames scaled up to fill its height."""

    def __init__(self, title: str) -> None:
        pygame.display.init()
        self.surface = pygame.display.set_mode((REAL_WINDOW_WIDTH, REAL_WINDOW_HEIGHT))
        pygame.display.set_caption(title)

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def draw_frame(self, frame: Frame) -> None:
        """Scale ``frame`` to the window height and show it at the top left."""
        factor = REAL_WINDOW_HEIGHT / frame.height
        size = (int(frame.width * factor), int(frame.height * factor))
        scaled = pygame.transform.scale(frame_to_surface(frame), size)
        self.surface.blit(scaled, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and shut the display down."""
        pygame.display.quit()