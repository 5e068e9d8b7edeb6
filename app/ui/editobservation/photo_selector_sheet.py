"""照片来源面板（底部弹出）。

`PhotoSelectorSheet` 只创建一次，每次打开前通过 `set_field` 指向发起请求的照片字段；
`BottomSheetDialog` 是承载它的非模态宿主，停靠在父窗口底部。
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6 import QtCore, QtWidgets

from app.ui.foundation.theme_manager import Sizes, ThemeManager
from engine.form import Field
from engine.utils.logging.logger import log_debug

# (父控件) -> 选中的文件路径；用户取消时返回空字符串
FilePicker = Callable[[QtWidgets.QWidget], str]

PHOTO_FILE_FILTER = "图片文件 (*.png *.jpg *.jpeg *.bmp *.webp)"


def pick_photo_file(parent: QtWidgets.QWidget) -> str:
    path, _selected_filter = QtWidgets.QFileDialog.getOpenFileName(
        parent,
        "选择照片",
        "",
        PHOTO_FILE_FILTER,
    )
    return path


class PhotoSelectorSheet(QtWidgets.QWidget):
    """照片来源面板内容：从文件选择 / 移除照片"""

    finished = QtCore.pyqtSignal()

    def __init__(
        self,
        observation_view_model,
        file_picker: FilePicker = pick_photo_file,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._observation_view_model = observation_view_model
        self._file_picker = file_picker
        self._field: Optional[Field] = None

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(
            Sizes.PADDING_LARGE,
            Sizes.PADDING_MEDIUM,
            Sizes.PADDING_LARGE,
            Sizes.PADDING_MEDIUM,
        )
        layout.setSpacing(Sizes.SPACING_SMALL)

        self.title_label = QtWidgets.QLabel()
        layout.addWidget(self.title_label)

        self.choose_file_button = QtWidgets.QPushButton("从文件选择…")
        self.choose_file_button.setStyleSheet(ThemeManager.button_style())
        self.choose_file_button.clicked.connect(lambda _checked=False: self.on_choose_file_click())
        layout.addWidget(self.choose_file_button)

        self.remove_button = QtWidgets.QPushButton("移除照片")
        self.remove_button.setStyleSheet(ThemeManager.flat_button_style())
        self.remove_button.clicked.connect(lambda _checked=False: self.on_remove_click())
        layout.addWidget(self.remove_button)

    @property
    def field(self) -> Optional[Field]:
        return self._field

    def set_field(self, field: Field) -> None:
        self._field = field
        self.title_label.setText(field.label or field.id)
        self.remove_button.setEnabled(
            self._observation_view_model.get_response(field.id) is not None
        )

    def on_choose_file_click(self) -> None:
        if self._field is None:
            return
        path = self._file_picker(self)
        if path:
            log_debug("[PhotoSelector] {} 选中照片：{}", self._field.id, path)
            self._observation_view_model.on_photo_selected(self._field, path)
        self.finished.emit()

    def on_remove_click(self) -> None:
        if self._field is None:
            return
        self._observation_view_model.on_response_changed(self._field, None)
        self.finished.emit()


class BottomSheetDialog(QtWidgets.QDialog):
    """停靠在父窗口底部的非模态面板宿主"""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setModal(False)
        self.setWindowFlag(QtCore.Qt.WindowType.FramelessWindowHint, True)
        self.setStyleSheet(ThemeManager.bottom_sheet_style())
        self._layout = QtWidgets.QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

    def set_content_view(self, content: QtWidgets.QWidget) -> None:
        self._layout.addWidget(content)

    def showEvent(self, event) -> None:
        self._dock_to_parent_bottom()
        super().showEvent(event)

    def _dock_to_parent_bottom(self) -> None:
        parent_widget = self.parentWidget()
        if parent_widget is None:
            return
        top_left = parent_widget.mapToGlobal(QtCore.QPoint(0, 0))
        height = max(self.sizeHint().height(), Sizes.BOTTOM_SHEET_HEIGHT)
        self.setGeometry(
            top_left.x(),
            top_left.y() + parent_widget.height() - height,
            parent_widget.width(),
            height,
        )
