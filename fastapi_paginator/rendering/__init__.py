"""Renderers for pagination controls."""

from .base import RendererBase
from .bootstrap import BootstrapRenderer

__all__ = ["BootstrapRenderer", "RendererBase"]
