"""观测编辑页。

按表单定义动态生成字段控件，把用户输入写回 `EditObservationViewModel`，
并负责保存结果提示、未保存修改确认以及各类选择对话框的弹出与收起。

页面生命周期（对应宿主窗口的调用顺序）：
1. 构造：创建工具栏与表单容器；
2. `on_view_created(args)`：接入宿主工具栏、订阅视图模型、初始化视图模型；
3. `on_pause()`：页面被隐藏时收起底部面板；
4. `on_destroy_view()`：页面出栈时取消订阅并释放字段视图模型。
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from PyQt6 import QtCore, QtWidgets

from app.ui.controllers.navigator import Navigator
from app.ui.controllers.screen_host import ScreenHost
from app.ui.editobservation.edit_observation_args import EditObservationArgs
from app.ui.editobservation.edit_observation_view_model import (
    EditObservationViewModel,
    SaveResult,
)
from app.ui.editobservation.field_view_factory import (
    FieldBinding,
    FieldViewBindingFactory,
    SelectorKind,
)
from app.ui.editobservation.field_view_models import AbstractFieldViewModel
from app.ui.editobservation.photo_selector_sheet import (
    BottomSheetDialog,
    FilePicker,
    PhotoSelectorSheet,
    pick_photo_file,
)
from app.ui.editobservation.select_dialogs import (
    MultiSelectDialogFactory,
    SingleSelectDialogFactory,
)
from app.ui.foundation import dialog_utils, ui_notifier
from app.ui.foundation.dialog_utils import AlertDialog
from app.ui.foundation.live_value import LiveValue
from app.ui.foundation.theme_manager import Sizes
from app.ui.foundation.two_line_toolbar import TwoLineToolbar
from engine.form import Cardinality, ElementType, Field, Form
from engine.utils.logging.logger import log_debug, log_error

NO_CHANGES_TO_SAVE_TEXT = "没有需要保存的修改"
SAVED_TEXT = "已保存"
UNSAVED_CHANGES_TEXT = "当前观测有未保存的修改，确定要离开吗？"
CLOSE_WITHOUT_SAVING_TEXT = "不保存并关闭"
CONTINUE_EDITING_TEXT = "继续编辑"
INVALID_DATA_WARNING_TEXT = "部分字段填写有误，请修正后再保存。"
INVALID_DATA_CONFIRM_TEXT = "确定"


class EditObservationScreen(QtWidgets.QWidget):

    def __init__(
        self,
        host: ScreenHost,
        navigator: Navigator,
        view_model: EditObservationViewModel,
        *,
        field_factory: Optional[FieldViewBindingFactory] = None,
        single_select_dialog_factory: Optional[SingleSelectDialogFactory] = None,
        multi_select_dialog_factory: Optional[MultiSelectDialogFactory] = None,
        photo_file_picker: FilePicker = pick_photo_file,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._host = host
        self._navigator = navigator
        self._view_model = view_model
        self._field_factory = field_factory or FieldViewBindingFactory(view_model)
        self._select_dialog_factories = {
            Cardinality.SELECT_ONE: single_select_dialog_factory or SingleSelectDialogFactory(self),
            Cardinality.SELECT_MULTIPLE: multi_select_dialog_factory or MultiSelectDialogFactory(self),
        }
        self._selector_handlers: Dict[SelectorKind, Callable[[Field], None]] = {
            SelectorKind.OPTIONS: self.on_show_dialog,
            SelectorKind.PHOTO: self.on_show_photo_selector_dialog,
        }
        self._photo_file_picker = photo_file_picker

        self.field_bindings: List[FieldBinding] = []
        self._observer_connections: list[tuple[LiveValue, QtCore.QMetaObject.Connection]] = []

        # 照片来源面板与其宿主只创建一次，之后按字段重新指向
        self._photo_selector_sheet: Optional[PhotoSelectorSheet] = None
        self._bottom_sheet_dialog: Optional[BottomSheetDialog] = None
        self._alert_dialog: Optional[AlertDialog] = None

        self._setup_ui()

    def _setup_ui(self) -> None:
        self.toolbar = TwoLineToolbar()
        self.save_action = self.toolbar.addAction("保存")
        self.save_action.triggered.connect(lambda _checked=False: self._view_model.on_save_click())

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        scroll_area = QtWidgets.QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setFrameShape(QtWidgets.QFrame.Shape.NoFrame)
        layout.addWidget(scroll_area)

        scroll_content = QtWidgets.QWidget()
        content_layout = QtWidgets.QVBoxLayout(scroll_content)
        content_layout.setContentsMargins(
            Sizes.PADDING_LARGE,
            Sizes.PADDING_LARGE,
            Sizes.PADDING_LARGE,
            Sizes.PADDING_LARGE,
        )
        # form_layout 只容纳字段控件，伸缩项放在外层
        self.form_container = QtWidgets.QWidget()
        self.form_layout = QtWidgets.QVBoxLayout(self.form_container)
        self.form_layout.setContentsMargins(0, 0, 0, 0)
        self.form_layout.setSpacing(Sizes.SPACING_MEDIUM)
        content_layout.addWidget(self.form_container)
        content_layout.addStretch(1)
        scroll_area.setWidget(scroll_content)

    # === 生命周期 ===

    def on_view_created(self, args: EditObservationArgs) -> None:
        self._host.set_action_bar(self.toolbar)
        self.toolbar.navigation_clicked.connect(self.on_close_button_click)

        self._observe(self._view_model.toolbar_title, self.toolbar.set_title)
        self._observe(self._view_model.toolbar_subtitle, self.toolbar.set_subtitle)
        self._observe(self._view_model.form, self.rebuild_form)
        self._observe(
            self._view_model.save_results,
            lambda event: event.if_unhandled(self.handle_save_result),
        )

        self._view_model.initialize(args)

    def on_pause(self) -> None:
        if self._bottom_sheet_dialog is not None and self._bottom_sheet_dialog.isVisible():
            self._bottom_sheet_dialog.hide()

    def on_destroy_view(self) -> None:
        for live_value, connection in self._observer_connections:
            live_value.remove_observer(connection)
        self._observer_connections.clear()
        self._clear_form()

    def hideEvent(self, event) -> None:
        self.on_pause()
        super().hideEvent(event)

    def _observe(self, live_value: LiveValue, callback: Callable[[object], None]) -> None:
        connection = live_value.observe(callback)
        self._observer_connections.append((live_value, connection))

    # === 表单重建 ===

    @property
    def field_view_models(self) -> List[AbstractFieldViewModel]:
        return [binding.view_model for binding in self.field_bindings]

    @property
    def photo_selector_sheet(self) -> Optional[PhotoSelectorSheet]:
        return self._photo_selector_sheet

    @property
    def bottom_sheet_dialog(self) -> Optional[BottomSheetDialog]:
        return self._bottom_sheet_dialog

    @property
    def alert_dialog(self) -> Optional[AlertDialog]:
        """最近一次弹出的提示框（未保存修改确认 / 校验错误）"""
        return self._alert_dialog

    def rebuild_form(self, form: Form) -> None:
        self._clear_form()
        for element in form.elements:
            if element.type is ElementType.FIELD and element.field is not None:
                self._add_field(element.field)
            else:
                log_debug(
                    "[EditObservation] 暂不支持的表单元素类型：{}",
                    element.raw_type or element.type.value,
                )

    def _add_field(self, field: Field) -> None:
        binding = self._field_factory.create(field.type, self.form_layout)
        binding.bind(field, self._view_model.get_response(field.id))

        if binding.show_dialog_clicks is not None and binding.selector_kind is not None:
            binding.show_dialog_clicks.connect(self._selector_handlers[binding.selector_kind])

        self.field_bindings.append(binding)

    def _clear_form(self) -> None:
        for binding in self.field_bindings:
            binding.dispose()
        self.field_bindings.clear()

        while self.form_layout.count():
            item = self.form_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.hide()
                widget.deleteLater()

    # === 选择对话框 ===

    def on_show_dialog(self, field: Field) -> None:
        multiple_choice = field.multiple_choice
        cardinality = multiple_choice.cardinality if multiple_choice is not None else None
        factory = self._select_dialog_factories.get(cardinality)
        if factory is None:
            log_error("[EditObservation] 未知的多选题类型：{}（字段 {}）", cardinality, field.id)
            return

        current_response = self._view_model.get_response(field.id)
        dialog = factory.create(
            field,
            current_response,
            lambda response: self._view_model.on_response_changed(field, response),
        )
        dialog.show()

    def on_show_photo_selector_dialog(self, field: Field) -> None:
        if self._photo_selector_sheet is None:
            self._photo_selector_sheet = PhotoSelectorSheet(self._view_model, self._photo_file_picker)
        self._photo_selector_sheet.set_field(field)

        if self._bottom_sheet_dialog is None:
            self._bottom_sheet_dialog = BottomSheetDialog(self)
            self._bottom_sheet_dialog.set_content_view(self._photo_selector_sheet)
            self._photo_selector_sheet.finished.connect(self._bottom_sheet_dialog.hide)

        if not self._bottom_sheet_dialog.isVisible():
            self._bottom_sheet_dialog.show()

    # === 保存结果 ===

    def handle_save_result(self, save_result: SaveResult) -> None:
        if save_result is SaveResult.HAS_VALIDATION_ERRORS:
            self._show_validation_errors_alert()
        elif save_result is SaveResult.NO_CHANGES_TO_SAVE:
            ui_notifier.show_fyi(self, NO_CHANGES_TO_SAVE_TEXT)
            self._navigator.navigate_up()
        elif save_result is SaveResult.SAVED:
            ui_notifier.show_success(self, SAVED_TEXT)
            self._navigator.navigate_up()
        else:
            log_error("[EditObservation] 未知的保存结果：{}", save_result)

    # === 返回与关闭 ===

    def on_back(self) -> bool:
        if self._view_model.has_unsaved_changes():
            self._show_unsaved_changes_dialog()
            return True
        return False

    def on_close_button_click(self) -> None:
        if self._view_model.has_unsaved_changes():
            self._show_unsaved_changes_dialog()
        else:
            self._navigator.navigate_up()

    def _show_unsaved_changes_dialog(self) -> None:
        self._show_alert(
            dialog_utils.build_alert_dialog(
                self,
                UNSAVED_CHANGES_TEXT,
                positive_label=CLOSE_WITHOUT_SAVING_TEXT,
                on_positive=self._navigator.navigate_up,
                negative_label=CONTINUE_EDITING_TEXT,
            )
        )

    def _show_validation_errors_alert(self) -> None:
        self._show_alert(
            dialog_utils.build_alert_dialog(
                self,
                INVALID_DATA_WARNING_TEXT,
                positive_label=INVALID_DATA_CONFIRM_TEXT,
            )
        )

    def _show_alert(self, dialog: AlertDialog) -> None:
        if self._alert_dialog is not None:
            self._alert_dialog.close()
            self._alert_dialog.deleteLater()
        self._alert_dialog = dialog
        dialog.open()


__all__ = ["EditObservationScreen"]
