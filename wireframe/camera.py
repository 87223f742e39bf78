"""Viewpoint of the wireframe and how the keyboard changes it."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum

from .settings import SCREEN_HEIGHT, SCREEN_WIDTH, Key

MOVE_STEP = 10
ROTATE_STEP = 0.05
DEPTH_STEP = 0.1


class Projection(IntEnum):
    """How points are laid onto the screen after rotation."""

    ISOMETRIC = 1
    PARALLEL = 2


@dataclass
class Camera:
    """Zoom, screen offset, rotation angles and depth scale of the view."""

    zoom: int = 1
    x_offset: int = 0
    y_offset: int = 0
    projection: Projection = Projection.ISOMETRIC
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0
    z_div: float = 0.8

    @classmethod
    def initial(cls, width: int, height: int, depth_max: int) -> "Camera":
        """The starting view for a map of ``width`` by ``height`` points."""
        if width <= 0 or height <= 0:
            raise ValueError(f"map size must be positive, got {width}x{height}")
        width_ratio = SCREEN_WIDTH // width // 2
        height_ratio = SCREEN_HEIGHT // height // 2
        zoom = min(width_ratio, height_ratio) + 1 + (width < 500)
        if depth_max > 50:
            y_offset, z_div = -500, 0.05
        else:
            y_offset, z_div = -100, 0.8
        return cls(zoom=zoom, x_offset=0, y_offset=y_offset,
                   projection=Projection.ISOMETRIC, z_div=z_div)

    def reset_axes(self) -> None:
        """Undo all rotation."""
        self.alpha = 0.0
        self.beta = 0.0
        self.gamma = 0.0

    def zoom_key(self, key: int) -> None:
        """'+' zooms in; '-' zooms out, never below 1."""
        if key == Key.PLUS:
            self.zoom += 1
        if self.zoom > 1 and key == Key.MINUS:
            self.zoom -= 1

    def move_key(self, key: int) -> None:
        """Arrow keys and h/j/k/l shift the view."""
        if key in (Key.H, Key.LEFT):
            self.x_offset -= MOVE_STEP
        if key in (Key.J, Key.DOWN):
            self.y_offset += MOVE_STEP
        if key in (Key.K, Key.UP):
            self.y_offset -= MOVE_STEP
        if key in (Key.L, Key.RIGHT):
            self.x_offset += MOVE_STEP

    def rotate_key(self, key: int) -> None:
        """s/w turn about x, d/e about y, f/r about z."""
        if key == Key.S:
            self.alpha += ROTATE_STEP
        if key == Key.D:
            self.beta += ROTATE_STEP
        if key == Key.F:
            self.gamma += ROTATE_STEP
        if key == Key.W:
            self.alpha -= ROTATE_STEP
        if key == Key.E:
            self.beta -= ROTATE_STEP
        if key == Key.R:
            self.gamma -= ROTATE_STEP

    def adjust_depth_key(self, key: int) -> None:
        """',' flattens the relief and '.' raises it."""
        if key == Key.LESS:
            self.z_div -= DEPTH_STEP
        if key == Key.GREATER:
            self.z_div += DEPTH_STEP

    def projection_key(self, key: int, width: int, height: int, depth_max: int) -> None:
        """p: parallel view, u: isometric view, i: back to the starting view."""
        if key == Key.P:
            self.reset_axes()
            self.projection = Projection.PARALLEL
        if key == Key.U:
            self.reset_axes()
            self.projection = Projection.ISOMETRIC
        if key == Key.I:
            start = Camera.initial(width, height, depth_max)
            for item in fields(self):
                setattr(self, item.name, getattr(start, item.name))

    def handle_key(self, key: int, width: int, height: int, depth_max: int) -> None:
        """Apply every view change that ``key`` stands for."""
        self.zoom_key(key)
        self.move_key(key)
        self.rotate_key(key)
        self.adjust_depth_key(key)
        self.projection_key(key, width, height, depth_max)