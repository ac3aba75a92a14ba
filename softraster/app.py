"""Interactive viewer: renders the scene in a window until it is closed."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from .renderer import Renderer
from .scene import Key, Scene
from .texture import TextureError
from .window import Window, pygame

TARGET_FPS = 60

_KEY_BINDINGS = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.W: pygame.K_w,
    Key.S: pygame.K_s,
    Key.A: pygame.K_a,
    Key.D: pygame.K_d,
}


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{text} is not a positive number")
    return value


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="softraster", description="Software rasteriser viewer.")
    parser.add_argument("model_dir", nargs="?", default="../../models", help="directory of models")
    parser.add_argument("--frames", type=_positive_int, help="stop after this many frames")
    return parser.parse_args(argv)


def _should_close() -> bool:
    closing = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            closing = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            closing = True
    return closing


def _held_keys() -> set[Key]:
    pressed = pygame.key.get_pressed()
    return {key for key, code in _KEY_BINDINGS.items() if pressed[code]}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = _parse_args(argv)
    random.seed()

    with Window("Rasterizer") as window:
        scene = Scene(args.model_dir)
        try:
            scene.start()
        except (OSError, TextureError, ValueError) as exc:
            print(f"softraster: {exc}", file=sys.stderr)
            return 1

        renderer = Renderer()
        clock = pygame.time.Clock()
        frames = 0
        while not _should_close():
            delta_time = clock.tick(TARGET_FPS) / 1000.0
            scene.update(delta_time, _held_keys())
            renderer.init_frame(scene.camera)
            scene.render(renderer)
            window.draw_frame(renderer.render(scene.camera))
            frames += 1
            if args.frames is not None and frames >= args.frames:
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())