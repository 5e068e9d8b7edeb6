"""通用 UI 通知工具。

职责：
- 提供统一的 Toast 提示入口（普通告知 / 成功），避免各页面重复处理父窗口选择逻辑；
- 每条提示同时写入日志，便于在关闭 Toast 弹窗时仍可追溯。
"""

from __future__ import annotations

from PyQt6 import QtWidgets

from app.ui.foundation.toast_notification import ToastNotification
from engine.utils.logging.logger import log_info


def _resolve_parent_widget(ui_context: QtWidgets.QWidget | object) -> QtWidgets.QWidget | None:
    """优先使用顶层窗口作为 Toast 父级，使提示在页面切换后仍可见。"""
    if not isinstance(ui_context, QtWidgets.QWidget):
        return None
    return ui_context.window()


def notify(ui_context: QtWidgets.QWidget | object, message: str, toast_type: str = "info") -> None:
    """在合适的父窗口上显示一条 Toast 提示；找不到父窗口时仅记录日志。"""
    log_info("[Toast][{}] {}", toast_type, message)

    parent_widget = _resolve_parent_widget(ui_context)
    if parent_widget is None:
        return

    ToastNotification.show_message(parent_widget, message, toast_type)


def show_fyi(ui_context: QtWidgets.QWidget | object, message: str) -> None:
    """告知型提示（无需用户处理）。"""
    notify(ui_context, message, "info")


def show_success(ui_context: QtWidgets.QWidget | object, message: str) -> None:
    """操作成功提示。"""
    notify(ui_context, message, "success")
