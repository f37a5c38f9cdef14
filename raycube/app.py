"""Command entry point: load a scene and report what it describes."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from raycube import logs
from raycube.parsing import ParseError, Scene, load_scene
from raycube.render import ViewSettings

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_FOV = 60
SCREEN_WIDTH = 1280
RAYS = 1


def average_fps(ticks: int, elapsed: float) -> Optional[float]:
    """Frames per second over ``elapsed`` seconds, or ``None`` if no time passed."""
    if elapsed <= 0:
        return None
    return ticks / elapsed


def _describe(scene: Scene) -> list[str]:
    game_map = scene.game_map
    return [
        f"F {scene.floor_color:x} ",
        f"C {scene.ceiling_color:x} ",
        f"NO {scene.north_texture} ",
        f"SO {scene.south_texture} ",
        f"WE {scene.west_texture} ",
        f"EA {scene.east_texture} ",
        f"MAP width {game_map.width} ",
        f"MAP height {game_map.height} ",
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and print its summary.

    Returns the process exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        logs.error("usage : raycube <map.cub>")
        return EXIT_FAILURE
    try:
        scene = load_scene(args[0])
    except ParseError as exc:
        logs.error(str(exc))
        return EXIT_FAILURE

    ViewSettings.from_fov(DEFAULT_FOV, SCREEN_WIDTH, RAYS)
    for line in _describe(scene):
        print(line)
    logs.info("scene loaded")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())