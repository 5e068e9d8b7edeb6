"""主题 token 与样式工厂。"""

from .tokens import Colors, Sizes

__all__ = ["Colors", "Sizes"]
