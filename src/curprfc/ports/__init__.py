"""Ports - interfaces for the presentation layer."""

from .renderer import RendererPort

__all__ = ["RendererPort"]
