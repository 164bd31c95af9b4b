"""Rendering of route progress."""

from rowtrack.render.renderer import Renderer, draw_route, progress_texts, render_progress

__all__ = ["Renderer", "draw_route", "progress_texts", "render_progress"]
