"""Renderers for processing results."""

from resource_enhancer.adapters.render.markdown_renderer import MarkdownResourceRenderer

__all__ = ["MarkdownResourceRenderer"]
