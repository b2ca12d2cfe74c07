from .base import COLOR_DARK_GROUND, COLOR_DARK_WALL, Renderer, render_world
from .ascii_renderer import AsciiRenderer

__all__ = ["Renderer", "render_world", "AsciiRenderer", "COLOR_DARK_WALL", "COLOR_DARK_GROUND"]
