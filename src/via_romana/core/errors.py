"""
Error types raised at the game's I/O seams.

Map generation, movement and collision never raise: they clip or skip.
"""


class GameInitError(RuntimeError):
    """The window or drawing surface could not be created."""


class TextureLoadError(RuntimeError):
    """A single texture variant could not be produced."""


class DisplayModeError(RuntimeError):
    """Switching between fullscreen and windowed failed."""
