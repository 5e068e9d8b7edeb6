"""Toast 提示条：叠放在窗口底部的一行短提示，数秒后淡出。

同一窗口同时只保留一条提示，新提示出现时旧提示立即移除
（保存成功后紧接着返回上一页时，不会在列表页堆出多条提示）。
"""

from __future__ import annotations

from PyQt6 import QtCore, QtGui, QtWidgets

from app.ui.foundation.theme_manager import Colors, Sizes, ThemeManager
from engine.configs.settings import settings

_GLYPH_BY_TYPE = {
    "info": "ℹ",
    "success": "✓",
}

_ACCENT_BY_TYPE = {
    "info": Colors.INFO,
    "success": Colors.SUCCESS,
}

_FADE_DURATION_MS = 180
_BOTTOM_MARGIN = 24


class ToastNotification(QtWidgets.QFrame):
    """窗口内的底部提示条（子控件，不是独立窗口）"""

    def __init__(self, parent: QtWidgets.QWidget, message: str, toast_type: str = "info"):
        super().__init__(parent)
        self.setObjectName("toastContent")
        self.setStyleSheet(ThemeManager.toast_style())
        self.message = message
        self.toast_type = toast_type if toast_type in _GLYPH_BY_TYPE else "info"

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(Sizes.PADDING_LARGE, Sizes.PADDING_SMALL, Sizes.PADDING_LARGE, Sizes.PADDING_SMALL)
        layout.setSpacing(Sizes.SPACING_SMALL)

        glyph = QtWidgets.QLabel(_GLYPH_BY_TYPE[self.toast_type])
        glyph.setStyleSheet(f"color: {_ACCENT_BY_TYPE[self.toast_type]}; font-size: {Sizes.FONT_LARGE}px;")
        layout.addWidget(glyph)

        self.message_label = QtWidgets.QLabel(message)
        self.message_label.setStyleSheet(f"color: {Colors.TEXT_ON_PRIMARY}; font-size: {Sizes.FONT_NORMAL}px;")
        layout.addWidget(self.message_label, 1)

        # 子控件不支持 windowOpacity，淡入淡出通过透明度效果实现
        self._opacity = QtWidgets.QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0.0)
        self.setGraphicsEffect(self._opacity)
        self._animation = QtCore.QPropertyAnimation(self._opacity, b"opacity", self)
        self._animation.setDuration(_FADE_DURATION_MS)
        self._animation.finished.connect(self._on_animation_finished)

        self._close_timer = QtCore.QTimer(self)
        self._close_timer.setSingleShot(True)
        self._close_timer.timeout.connect(self.fade_out)

        parent.installEventFilter(self)

    def eventFilter(self, watched: QtCore.QObject, event: QtCore.QEvent) -> bool:
        if watched is self.parentWidget() and event.type() == QtCore.QEvent.Type.Resize:
            self._dock()
        return super().eventFilter(watched, event)

    def _dock(self) -> None:
        parent_widget = self.parentWidget()
        if parent_widget is None:
            return
        self.adjustSize()
        width = min(self.sizeHint().width(), max(parent_widget.width() - 2 * _BOTTOM_MARGIN, 0))
        self.resize(width, self.sizeHint().height())
        self.move(
            (parent_widget.width() - self.width()) // 2,
            parent_widget.height() - self.height() - _BOTTOM_MARGIN,
        )

    def show_toast(self) -> None:
        self._dock()
        self.raise_()
        self.show()
        self._animate(0.0, 1.0)
        self._close_timer.start(int(settings.TOAST_DURATION_MS))

    def fade_out(self) -> None:
        self._close_timer.stop()
        self._animate(self._opacity.opacity(), 0.0)

    def _on_animation_finished(self) -> None:
        if self._opacity.opacity() <= 0.0:
            self.dismiss()

    def dismiss(self) -> None:
        parent_widget = self.parentWidget()
        if parent_widget is not None:
            parent_widget.removeEventFilter(self)
        self.hide()
        self.deleteLater()

    def _animate(self, start: float, end: float) -> None:
        self._animation.stop()
        self._animation.setStartValue(start)
        self._animation.setEndValue(end)
        self._animation.setEasingCurve(
            QtCore.QEasingCurve.Type.OutCubic if end > start else QtCore.QEasingCurve.Type.InCubic
        )
        self._animation.start()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        """点击提示条立即淡出"""
        if event.button() == QtCore.Qt.MouseButton.LeftButton:
            self.fade_out()
        super().mousePressEvent(event)

    @staticmethod
    def show_message(parent: QtWidgets.QWidget, message: str, toast_type: str = "info") -> None:
        """在 parent 底部显示提示；关闭弹窗开关时不做任何界面操作。"""
        if not settings.TOAST_POPUP_ENABLED:
            return
        for previous in parent.findChildren(ToastNotification, options=QtCore.Qt.FindChildOption.FindDirectChildrenOnly):
            previous.dismiss()
        ToastNotification(parent, message, toast_type).show_toast()
