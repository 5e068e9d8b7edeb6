"""基础对话框。

`BaseDialog` 提供标题、可滚动的内容区与中文“确定/取消”按钮；
子类只需向 `content_layout` 添加控件，并在 `validate()` 中决定能否关闭。
"""

from __future__ import annotations

from typing import Optional

from PyQt6 import QtWidgets

from app.ui.foundation import dialog_utils
from app.ui.foundation.theme_manager import Sizes, ThemeManager


class BaseDialog(QtWidgets.QDialog):
    """统一风格的确认型对话框"""

    def __init__(
        self,
        title: str,
        *,
        width: int = 420,
        height: int = 360,
        use_scroll: bool = False,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.resize(width, height)
        self.setModal(True)
        self.setStyleSheet(ThemeManager.dialog_form_style())

        outer = QtWidgets.QVBoxLayout(self)
        outer.setContentsMargins(Sizes.PADDING_LARGE, Sizes.PADDING_LARGE, Sizes.PADDING_LARGE, Sizes.PADDING_LARGE)
        outer.setSpacing(Sizes.SPACING_LARGE)

        self.content_widget = QtWidgets.QWidget()
        self.content_layout = QtWidgets.QVBoxLayout(self.content_widget)
        self.content_layout.setContentsMargins(0, 0, 0, 0)
        self.content_layout.setSpacing(Sizes.SPACING_SMALL)
        if use_scroll:
            scroll = QtWidgets.QScrollArea()
            scroll.setWidgetResizable(True)
            scroll.setFrameShape(QtWidgets.QFrame.Shape.NoFrame)
            scroll.setWidget(self.content_widget)
            outer.addWidget(scroll, 1)
        else:
            outer.addWidget(self.content_widget, 1)

        self.button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok
            | QtWidgets.QDialogButtonBox.StandardButton.Cancel
        )
        dialog_utils.apply_standard_button_box_labels(self.button_box)
        self.button_box.accepted.connect(self._on_accept)
        self.button_box.rejected.connect(self.reject)
        outer.addWidget(self.button_box)

    def _on_accept(self) -> None:
        if self.validate():
            self.accept()

    def validate(self) -> bool:
        """确定按钮的前置检查；返回 False 时对话框保持打开。"""
        return True

    def add_widget(self, widget: QtWidgets.QWidget) -> None:
        self.content_layout.addWidget(widget)
