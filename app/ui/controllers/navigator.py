"""页面导航器 - 页面只发出导航意图，具体的页面栈操作由主窗口完成"""

from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore

from engine.utils.logging.logger import log_debug


class Navigator(QtCore.QObject):
    """导航意图的统一出口"""

    navigate_up_requested = QtCore.pyqtSignal()
    edit_observation_requested = QtCore.pyqtSignal(object)  # EditObservationArgs

    def __init__(self, parent: Optional[QtCore.QObject] = None):
        super().__init__(parent)

    def navigate_up(self) -> None:
        """返回上一页"""
        log_debug("[Navigator] navigate_up")
        self.navigate_up_requested.emit()

    def navigate_to_edit_observation(self, args: object) -> None:
        """打开观测编辑页"""
        log_debug("[Navigator] navigate_to_edit_observation: {}", args)
        self.edit_observation_requested.emit(args)
