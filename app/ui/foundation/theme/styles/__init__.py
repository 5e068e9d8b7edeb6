"""Style factory modules for the theme system."""

from . import component_styles

__all__ = ["component_styles"]
