"""Token re-exports for the theme system."""

from .colors import Colors
from .sizes import Sizes

__all__ = ["Colors", "Sizes"]
