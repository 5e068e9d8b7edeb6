"""全局主题管理器：聚合 token、样式工厂与缓存。

本模块负责：
- 暴露 Colors/Sizes token
- 将 `theme.styles` 中的组件样式函数做统一缓存
- 提供应用级别样式注入入口
"""

from __future__ import annotations

from typing import Callable

from PyQt6 import QtGui, QtWidgets

from app.ui.foundation.theme import Colors, Sizes
from app.ui.foundation.theme.styles import component_styles


class ThemeManager:
    """协调主题 token 与样式工厂的单例式入口。"""

    Colors = Colors
    Sizes = Sizes

    _style_cache: dict[str, str] = {}

    @classmethod
    def _cached(cls, key: str, factory: Callable[[], str]) -> str:
        cached = cls._style_cache.get(key)
        if cached is None:
            cached = factory()
            cls._style_cache[key] = cached
        return cached

    # ========= 原子样式 =========

    @classmethod
    def button_style(cls) -> str:
        return cls._cached("button", component_styles.button_style)

    @classmethod
    def flat_button_style(cls) -> str:
        return cls._cached("flat_button", component_styles.flat_button_style)

    @classmethod
    def input_style(cls) -> str:
        return cls._cached("input", component_styles.input_style)

    @classmethod
    def tree_style(cls) -> str:
        return cls._cached("tree", component_styles.tree_style)

    @classmethod
    def field_card_style(cls) -> str:
        return cls._cached("field_card", component_styles.field_card_style)

    @classmethod
    def toolbar_style(cls) -> str:
        return cls._cached("toolbar", component_styles.toolbar_style)

    @classmethod
    def bottom_sheet_style(cls) -> str:
        return cls._cached("bottom_sheet", component_styles.bottom_sheet_style)

    @classmethod
    def toast_style(cls) -> str:
        """Toast 内容卡片样式。"""
        return cls._cached("toast", component_styles.toast_content_style)

    @classmethod
    def hint_text_style(cls) -> str:
        return cls._cached("hint_text", component_styles.hint_text_style)

    # ========= 组合样式 =========

    @classmethod
    def dialog_form_style(cls) -> str:
        return cls._cached("dialog_form", component_styles.dialog_form_style)

    @classmethod
    def global_style(cls) -> str:
        return cls._cached("global", component_styles.global_style)

    # ========= 应用入口 =========

    @classmethod
    def apply_app_style(cls, app: QtWidgets.QApplication) -> None:
        # 让未显式设置 QSS 的控件也跟随 Colors，避免系统深色主题下出现“黑底黑字”
        palette = app.palette()
        palette.setColor(QtGui.QPalette.ColorRole.Window, QtGui.QColor(Colors.BG_MAIN))
        palette.setColor(QtGui.QPalette.ColorRole.WindowText, QtGui.QColor(Colors.TEXT_PRIMARY))
        palette.setColor(QtGui.QPalette.ColorRole.Base, QtGui.QColor(Colors.BG_CARD))
        palette.setColor(QtGui.QPalette.ColorRole.AlternateBase, QtGui.QColor(Colors.BG_CARD_HOVER))
        palette.setColor(QtGui.QPalette.ColorRole.Text, QtGui.QColor(Colors.TEXT_PRIMARY))
        palette.setColor(QtGui.QPalette.ColorRole.Button, QtGui.QColor(Colors.BG_CARD))
        palette.setColor(QtGui.QPalette.ColorRole.ButtonText, QtGui.QColor(Colors.TEXT_PRIMARY))
        palette.setColor(QtGui.QPalette.ColorRole.Highlight, QtGui.QColor(Colors.BG_SELECTED))
        palette.setColor(QtGui.QPalette.ColorRole.HighlightedText, QtGui.QColor(Colors.TEXT_PRIMARY))
        app.setPalette(palette)

        app.setFont(QtGui.QFont("Microsoft YaHei UI", Sizes.FONT_NORMAL))
        app.setStyleSheet(cls.global_style())


__all__ = ["Colors", "Sizes", "ThemeManager"]
