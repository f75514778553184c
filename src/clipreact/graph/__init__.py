"""Rendering of dependency graphs."""

from .visualize import generate_html, write_visualization

__all__ = ["generate_html", "write_visualization"]
