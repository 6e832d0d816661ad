"""Sprite sheet frame stepping and timed playback."""

__version__ = "0.1.0"

from .sprite import AnimatedSprite, SpriteHandle

__all__ = ["AnimatedSprite", "SpriteHandle", "__version__"]
