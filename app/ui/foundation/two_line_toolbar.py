"""双行标题工具栏：左侧导航按钮（关闭/返回）+ 主标题与副标题"""

from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets

from app.ui.foundation.theme_manager import ThemeManager


class TwoLineToolbar(QtWidgets.QToolBar):

    navigation_clicked = QtCore.pyqtSignal()

    def __init__(self, navigation_text: str = "✕", parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setMovable(False)
        self.setFloatable(False)
        self.setStyleSheet(ThemeManager.toolbar_style())

        self.navigation_action = self.addAction(navigation_text)
        self.navigation_action.triggered.connect(lambda _checked=False: self.navigation_clicked.emit())

        title_container = QtWidgets.QWidget()
        title_layout = QtWidgets.QVBoxLayout(title_container)
        title_layout.setContentsMargins(8, 0, 8, 0)
        title_layout.setSpacing(0)
        self._title_label = QtWidgets.QLabel()
        self._title_label.setObjectName("toolbarTitle")
        self._subtitle_label = QtWidgets.QLabel()
        self._subtitle_label.setObjectName("toolbarSubtitle")
        title_layout.addWidget(self._title_label)
        title_layout.addWidget(self._subtitle_label)
        self.addWidget(title_container)

        spacer = QtWidgets.QWidget()
        spacer.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Preferred,
        )
        self.addWidget(spacer)

    def title(self) -> str:
        return self._title_label.text()

    def subtitle(self) -> str:
        return self._subtitle_label.text()

    def set_title(self, title: object) -> None:
        self._title_label.setText(str(title or ""))

    def set_subtitle(self, subtitle: object) -> None:
        text = str(subtitle or "")
        self._subtitle_label.setText(text)
        self._subtitle_label.setVisible(bool(text))
