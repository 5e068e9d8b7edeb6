"""字段控件工厂：字段类型 → (字段视图模型, 控件) 的显式映射。

映射在工厂构造时一次性确定；需要弹出选择器的字段类型在绑定结果中携带
`show_dialog_clicks` 信号，页面据此订阅，而不必判断具体的控件类型。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from PyQt6 import QtCore, QtWidgets

from app.ui.editobservation.field_view_models import (
    AbstractFieldViewModel,
    MultipleChoiceFieldViewModel,
    PhotoFieldViewModel,
    TextFieldViewModel,
)
from app.ui.editobservation.field_widgets import (
    FieldCard,
    MultipleChoiceFieldWidget,
    PhotoFieldWidget,
    TextFieldWidget,
)
from engine.form import Field, FieldType, Response


class SelectorKind(Enum):
    """字段请求弹出的选择器种类"""
    OPTIONS = "options"  # 单选/多选对话框
    PHOTO = "photo"      # 照片来源面板


@dataclass
class FieldBinding:
    """一次表单重建中某个字段的视图模型与控件"""
    view_model: AbstractFieldViewModel
    widget: FieldCard
    show_dialog_clicks: Optional[QtCore.pyqtBoundSignal] = None
    selector_kind: Optional[SelectorKind] = None

    def bind(self, field: Field, response: Optional[Response]) -> None:
        self.view_model.set_field(field)
        self.view_model.set_response(response)
        self.widget.bind()

    def dispose(self) -> None:
        self.view_model.dispose()


Binder = Callable[[], FieldBinding]


class FieldViewBindingFactory:
    """按字段类型创建字段控件，并将控件追加到给定布局中。"""

    def __init__(self, observation_view_model) -> None:
        self._observation_view_model = observation_view_model
        self._binders: Dict[FieldType, Binder] = {
            FieldType.TEXT: self._bind_text,
            FieldType.MULTIPLE_CHOICE: self._bind_multiple_choice,
            FieldType.PHOTO: self._bind_photo,
        }

    def create(self, field_type: FieldType, container: QtWidgets.QLayout) -> FieldBinding:
        binder = self._binders.get(field_type)
        if binder is None:
            raise ValueError(f"不支持的字段类型: {field_type}")
        binding = binder()
        # 视图模型挂在控件上，控件销毁时一并释放
        binding.view_model.setParent(binding.widget)
        container.addWidget(binding.widget)
        return binding

    def _bind_text(self) -> FieldBinding:
        view_model = TextFieldViewModel(self._observation_view_model)
        return FieldBinding(view_model=view_model, widget=TextFieldWidget(view_model))

    def _bind_multiple_choice(self) -> FieldBinding:
        view_model = MultipleChoiceFieldViewModel(self._observation_view_model)
        return FieldBinding(
            view_model=view_model,
            widget=MultipleChoiceFieldWidget(view_model),
            show_dialog_clicks=view_model.show_dialog_clicks,
            selector_kind=SelectorKind.OPTIONS,
        )

    def _bind_photo(self) -> FieldBinding:
        view_model = PhotoFieldViewModel(self._observation_view_model)
        return FieldBinding(
            view_model=view_model,
            widget=PhotoFieldWidget(view_model),
            show_dialog_clicks=view_model.show_dialog_clicks,
            selector_kind=SelectorKind.PHOTO,
        )
