"""标准化对话框与提示入口，集中封装 Qt MessageBox 行为。

本模块中的提示框均以非阻塞方式弹出（`open()`），按钮回调在用户点击时触发，
避免在信号处理函数中嵌套事件循环。
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6 import QtWidgets


class AlertDialog(QtWidgets.QMessageBox):
    """带“确认/取消”两类按钮的提示框。

    - 确认按钮（positive）必有，点击后调用 `on_positive`；
    - 取消按钮（negative）可选，点击后调用 `on_negative`（未提供时仅关闭）。
    """

    def __init__(
        self,
        parent: QtWidgets.QWidget | None,
        message: str,
        *,
        positive_label: str,
        on_positive: Optional[Callable[[], None]] = None,
        negative_label: Optional[str] = None,
        on_negative: Optional[Callable[[], None]] = None,
        title: str = "",
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setText(message)
        self.setIcon(QtWidgets.QMessageBox.Icon.NoIcon)

        self.positive_button = self.addButton(
            positive_label,
            QtWidgets.QMessageBox.ButtonRole.AcceptRole,
        )
        if on_positive is not None:
            self.positive_button.clicked.connect(lambda _checked=False: on_positive())

        self.negative_button: Optional[QtWidgets.QPushButton] = None
        if negative_label is not None:
            self.negative_button = self.addButton(
                negative_label,
                QtWidgets.QMessageBox.ButtonRole.RejectRole,
            )
            if on_negative is not None:
                self.negative_button.clicked.connect(lambda _checked=False: on_negative())
            self.setDefaultButton(self.negative_button)
        else:
            self.setDefaultButton(self.positive_button)


def build_alert_dialog(
    parent: QtWidgets.QWidget | None,
    message: str,
    *,
    positive_label: str,
    on_positive: Optional[Callable[[], None]] = None,
    negative_label: Optional[str] = None,
    on_negative: Optional[Callable[[], None]] = None,
) -> AlertDialog:
    """创建但不显示提示框；调用方负责 `open()` 并持有引用。"""
    return AlertDialog(
        parent,
        message,
        positive_label=positive_label,
        on_positive=on_positive,
        negative_label=negative_label,
        on_negative=on_negative,
    )


def apply_standard_button_box_labels(button_box: QtWidgets.QDialogButtonBox) -> None:
    """统一将标准 Ok/Cancel 按钮的文本替换为中文文案。

    Qt 默认会根据系统或翻译文件选择按钮文本，但在未加载翻译或跨平台时可能出现英文“OK/Cancel”。
    """
    ok_button = button_box.button(QtWidgets.QDialogButtonBox.StandardButton.Ok)
    if ok_button is not None:
        ok_button.setText("确定")

    cancel_button = button_box.button(QtWidgets.QDialogButtonBox.StandardButton.Cancel)
    if cancel_button is not None:
        cancel_button.setText("取消")


__all__ = [
    "AlertDialog",
    "apply_standard_button_box_labels",
    "build_alert_dialog",
]
