"""Styling module for the LinguaQuiz application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
