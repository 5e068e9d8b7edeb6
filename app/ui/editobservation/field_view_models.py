"""单个字段的视图模型。

每次表单重建都会为每个字段新建一个视图模型，重建前由页面调用 `dispose()` 释放；
视图模型只缓存“当前字段 + 当前回答”，真正的回答由 `EditObservationViewModel` 持有。
"""

from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore

from engine.form import Field, Response, TextResponse, detail_text_of


class AbstractFieldViewModel(QtCore.QObject):
    """字段视图模型基类"""

    response_updated = QtCore.pyqtSignal(object)  # Optional[Response]

    def __init__(self, observation_view_model, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent)
        self._observation_view_model = observation_view_model
        self._field: Optional[Field] = None
        self._response: Optional[Response] = None
        self._observation_view_model.response_changed.connect(self._on_store_response_changed)

    @property
    def field(self) -> Optional[Field]:
        return self._field

    @property
    def response(self) -> Optional[Response]:
        return self._response

    @property
    def label(self) -> str:
        if self._field is None:
            return ""
        return self._field.label or self._field.id

    @property
    def response_text(self) -> str:
        if self._field is None:
            return ""
        return detail_text_of(self._field, self._response)

    def set_field(self, field: Field) -> None:
        self._field = field

    def set_response(self, response: Optional[Response]) -> None:
        self._response = response
        self.response_updated.emit(response)

    def _on_store_response_changed(self, field_id: str, response: Optional[Response]) -> None:
        if self._field is not None and field_id == self._field.id:
            self.set_response(response)

    def dispose(self) -> None:
        """断开与页面级视图模型的连接（表单重建前调用）。"""
        self._observation_view_model.response_changed.disconnect(self._on_store_response_changed)


class TextFieldViewModel(AbstractFieldViewModel):

    def on_text_edited(self, text: str) -> None:
        if self._field is None:
            return
        self._observation_view_model.on_response_changed(self._field, TextResponse.from_string(text))


class MultipleChoiceFieldViewModel(AbstractFieldViewModel):
    """多选题字段：点击后请求页面弹出选择对话框"""

    show_dialog_clicks = QtCore.pyqtSignal(object)  # Field

    def on_show_dialog_click(self) -> None:
        if self._field is not None:
            self.show_dialog_clicks.emit(self._field)


class PhotoFieldViewModel(AbstractFieldViewModel):
    """照片字段：点击后请求页面弹出照片来源面板"""

    show_dialog_clicks = QtCore.pyqtSignal(object)  # Field

    def on_show_dialog_click(self) -> None:
        if self._field is not None:
            self.show_dialog_clicks.emit(self._field)

    @property
    def photo_path(self) -> str:
        path = getattr(self._response, "path", "")
        return str(path or "")
