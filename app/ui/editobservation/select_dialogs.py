"""多选题字段的选择对话框。

- `SingleSelectDialog`：单选按钮组，最多选中一项；
- `MultiSelectDialog`：复选框列表，可选中任意多项。

对话框按当前回答预先勾选；点击“确定”后以 `on_chosen(Optional[MultipleChoiceResponse])`
回传结果（一项都未选时回传 None，表示清除回答），点击“取消”不回调。
"""

from __future__ import annotations

from typing import Callable, List, Optional

from PyQt6 import QtCore, QtWidgets

from app.ui.foundation.base_widgets import BaseDialog
from engine.form import Field, MultipleChoiceResponse, Option, Response

OnChosen = Callable[[Optional[MultipleChoiceResponse]], None]


def _options_of(field: Field) -> tuple[Option, ...]:
    if field.multiple_choice is None:
        return ()
    return field.multiple_choice.options


def _selected_ids_of(response: Optional[Response]) -> tuple[str, ...]:
    if isinstance(response, MultipleChoiceResponse):
        return response.selected_option_ids
    return ()


class _SelectDialog(BaseDialog):
    """单选/多选对话框的公共部分：选项列表 + 确定回调"""

    exclusive = False

    def __init__(
        self,
        field: Field,
        current_response: Optional[Response],
        on_chosen: OnChosen,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(
            title=field.label or field.id,
            width=360,
            height=320,
            use_scroll=True,
            parent=parent,
        )
        self.field = field
        self._on_chosen = on_chosen
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_DeleteOnClose)

        self.button_group = QtWidgets.QButtonGroup(self)
        self.button_group.setExclusive(self.exclusive)
        self.option_buttons: List[QtWidgets.QAbstractButton] = []
        selected_ids = _selected_ids_of(current_response)
        for option in _options_of(field):
            button = self._create_option_button(option)
            button.setProperty("option_id", option.id)
            self.button_group.addButton(button)
            button.setChecked(option.id in selected_ids)
            self.option_buttons.append(button)
            self.add_widget(button)
        self.content_layout.addStretch(1)

    def _create_option_button(self, option: Option) -> QtWidgets.QAbstractButton:
        raise NotImplementedError

    def selected_option_ids(self) -> tuple[str, ...]:
        return tuple(
            str(button.property("option_id"))
            for button in self.option_buttons
            if button.isChecked()
        )

    def validate(self) -> bool:
        self._on_chosen(MultipleChoiceResponse.from_ids(self.selected_option_ids()))
        return True


class SingleSelectDialog(_SelectDialog):

    exclusive = True

    def _create_option_button(self, option: Option) -> QtWidgets.QAbstractButton:
        return QtWidgets.QRadioButton(option.label or option.code or option.id)


class MultiSelectDialog(_SelectDialog):

    def _create_option_button(self, option: Option) -> QtWidgets.QAbstractButton:
        return QtWidgets.QCheckBox(option.label or option.code or option.id)


class SingleSelectDialogFactory:
    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        self._parent = parent

    def create(
        self,
        field: Field,
        current_response: Optional[Response],
        on_chosen: OnChosen,
    ) -> SingleSelectDialog:
        return SingleSelectDialog(field, current_response, on_chosen, parent=self._parent)


class MultiSelectDialogFactory:
    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        self._parent = parent

    def create(
        self,
        field: Field,
        current_response: Optional[Response],
        on_chosen: OnChosen,
    ) -> MultiSelectDialog:
        return MultiSelectDialog(field, current_response, on_chosen, parent=self._parent)


__all__ = [
    "MultiSelectDialog",
    "MultiSelectDialogFactory",
    "SingleSelectDialog",
    "SingleSelectDialogFactory",
]
