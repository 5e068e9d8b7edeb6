"""各类型字段的界面控件。

控件只负责展示与转发用户操作，状态全部来自对应的字段视图模型：
- 文本字段：单行输入框，编辑即写回；
- 多选题字段：显示已选项摘要，按钮请求弹出选择对话框；
- 照片字段：显示缩略图，按钮请求弹出照片来源面板。
"""

from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets

from app.ui.editobservation.field_view_models import (
    AbstractFieldViewModel,
    MultipleChoiceFieldViewModel,
    PhotoFieldViewModel,
    TextFieldViewModel,
)
from app.ui.editobservation.photo_thumbnail import load_thumbnail
from app.ui.foundation.theme_manager import Sizes, ThemeManager
from engine.configs.settings import settings


class FieldCard(QtWidgets.QFrame):
    """字段卡片：标题 + 内容区"""

    def __init__(self, view_model: AbstractFieldViewModel, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.view_model = view_model
        self.setObjectName("fieldCard")
        self.setStyleSheet(ThemeManager.field_card_style())

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(
            Sizes.PADDING_MEDIUM,
            Sizes.PADDING_MEDIUM,
            Sizes.PADDING_MEDIUM,
            Sizes.PADDING_MEDIUM,
        )
        layout.setSpacing(Sizes.SPACING_SMALL)

        self.label = QtWidgets.QLabel()
        self.label.setObjectName("fieldLabel")
        layout.addWidget(self.label)
        self.content_layout = layout

        view_model.response_updated.connect(self._on_response_updated)

    def bind(self) -> None:
        """字段与回答注入后调用，刷新全部显示内容。"""
        field = self.view_model.field
        required_mark = " *" if field is not None and field.required else ""
        self.label.setText(f"{self.view_model.label}{required_mark}")
        self.refresh()

    def _on_response_updated(self, _response: object) -> None:
        self.refresh()

    def refresh(self) -> None:
        """子类根据当前回答刷新内容区"""


class TextFieldWidget(FieldCard):

    def __init__(self, view_model: TextFieldViewModel, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(view_model, parent)
        self.line_edit = QtWidgets.QLineEdit()
        self.line_edit.setStyleSheet(ThemeManager.input_style())
        self.line_edit.textEdited.connect(view_model.on_text_edited)
        self.content_layout.addWidget(self.line_edit)

    def refresh(self) -> None:
        text = self.view_model.response_text
        # 仅在内容不同时回写，避免打断正在输入的光标位置
        if self.line_edit.text() != text:
            self.line_edit.setText(text)


class MultipleChoiceFieldWidget(FieldCard):

    def __init__(self, view_model: MultipleChoiceFieldViewModel, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(view_model, parent)
        row = QtWidgets.QHBoxLayout()
        self.summary_label = QtWidgets.QLabel()
        self.summary_label.setWordWrap(True)
        self.choose_button = QtWidgets.QPushButton("选择…")
        self.choose_button.setStyleSheet(ThemeManager.flat_button_style())
        self.choose_button.clicked.connect(lambda _checked=False: view_model.on_show_dialog_click())
        row.addWidget(self.summary_label, 1)
        row.addWidget(self.choose_button)
        self.content_layout.addLayout(row)

    def refresh(self) -> None:
        text = self.view_model.response_text
        if text:
            self.summary_label.setStyleSheet("")
            self.summary_label.setText(text)
        else:
            self.summary_label.setStyleSheet(ThemeManager.hint_text_style())
            self.summary_label.setText("未选择")


class PhotoFieldWidget(FieldCard):

    def __init__(self, view_model: PhotoFieldViewModel, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(view_model, parent)
        thumbnail_size = int(settings.PHOTO_THUMBNAIL_SIZE)
        self.thumbnail_label = QtWidgets.QLabel()
        self.thumbnail_label.setFixedSize(thumbnail_size, thumbnail_size)
        self.thumbnail_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.add_button = QtWidgets.QPushButton("添加照片")
        self.add_button.setStyleSheet(ThemeManager.flat_button_style())
        self.add_button.clicked.connect(lambda _checked=False: view_model.on_show_dialog_click())
        self.content_layout.addWidget(self.thumbnail_label)
        self.content_layout.addWidget(self.add_button, 0, QtCore.Qt.AlignmentFlag.AlignLeft)

    def refresh(self) -> None:
        pixmap = load_thumbnail(self.view_model.photo_path, int(settings.PHOTO_THUMBNAIL_SIZE))
        if pixmap is None:
            self.thumbnail_label.clear()
            self.thumbnail_label.setStyleSheet(ThemeManager.hint_text_style())
            self.thumbnail_label.setText("暂无照片")
            self.add_button.setText("添加照片")
            return
        self.thumbnail_label.setStyleSheet("")
        self.thumbnail_label.setPixmap(pixmap)
        self.add_button.setText("更换照片")
