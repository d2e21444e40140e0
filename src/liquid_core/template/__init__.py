"""Template state shared with filters."""

from .context import TemplateContext

__all__ = ["TemplateContext"]
