"""观测编辑页的视图模型（表单与回答的单一真源）。

职责：
- 根据启动参数加载表单与观测，向页面发布表单与工具栏标题；
- 持有当前回答集合，并与加载时的快照比较以判断是否有未保存修改；
- 处理保存请求并以一次性事件的形式发布保存结果。

校验规则由调用方以 `validator` 注入，本模块不内置任何字段校验。
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Mapping, Optional

from PyQt6 import QtCore

from app.ui.editobservation.edit_observation_args import EditObservationArgs
from app.ui.foundation.live_value import LiveValue, OneShotEvent
from engine.form import Field, Form, PhotoResponse, Response
from engine.observation import Observation, ObservationRepository
from engine.utils.logging.logger import log_debug, log_info

# (表单, 当前回答) -> {field_id: 错误描述}
Validator = Callable[[Form, Mapping[str, Response]], Mapping[str, str]]


class SaveResult(Enum):
    HAS_VALIDATION_ERRORS = "has_validation_errors"
    NO_CHANGES_TO_SAVE = "no_changes_to_save"
    SAVED = "saved"


def _no_validation(_form: Form, _responses: Mapping[str, Response]) -> Mapping[str, str]:
    return {}


class EditObservationViewModel(QtCore.QObject):

    response_changed = QtCore.pyqtSignal(str, object)  # field_id, Optional[Response]

    def __init__(
        self,
        repository: ObservationRepository,
        validator: Optional[Validator] = None,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._repository = repository
        self._validator: Validator = validator or _no_validation

        self.form = LiveValue(self)
        self.save_results = LiveValue(self)
        self.toolbar_title = LiveValue(self)
        self.toolbar_subtitle = LiveValue(self)

        self._args: Optional[EditObservationArgs] = None
        self._observation: Optional[Observation] = None
        self._original_responses: Dict[str, Response] = {}
        self._responses: Dict[str, Response] = {}
        self._validation_errors: Mapping[str, str] = {}

    # === 初始化 ===

    def initialize(self, args: EditObservationArgs) -> None:
        """加载观测并发布表单（页面创建后调用一次；相同参数重复调用时忽略）。"""
        if self._args == args and self._observation is not None:
            log_debug("[EditObservation] 参数未变化，跳过重复初始化：{}", args)
            return
        self._args = args

        form = self._repository.get_form(args.project_id, args.form_id)
        feature = self._repository.get_feature(args.project_id, args.feature_id)
        if args.is_new:
            observation = self._repository.create_observation(
                args.project_id, args.feature_id, args.form_id
            )
        else:
            observation = self._repository.get_observation(
                args.project_id, args.feature_id, args.observation_id
            )

        self._observation = observation
        self._original_responses = dict(observation.responses)
        self._responses = dict(observation.responses)
        self._validation_errors = {}
        log_info(
            "[EditObservation] 载入观测 {}（表单={}，要素={}，新建={}）",
            observation.id,
            form.id,
            feature.id,
            args.is_new,
        )

        self.toolbar_title.set_value(form.name or form.id)
        self.toolbar_subtitle.set_value(feature.label or feature.id)
        self.form.set_value(form)

    # === 查询 ===

    @property
    def observation(self) -> Optional[Observation]:
        return self._observation

    @property
    def validation_errors(self) -> Mapping[str, str]:
        return dict(self._validation_errors)

    def get_response(self, field_id: str) -> Optional[Response]:
        return self._responses.get(field_id)

    def has_unsaved_changes(self) -> bool:
        return self._responses != self._original_responses

    # === 修改 ===

    def on_response_changed(self, field: Field, response: Optional[Response]) -> None:
        """写入（或在 response 为 None 时清除）字段回答。"""
        if self._responses.get(field.id) == response:
            return
        if response is None:
            self._responses.pop(field.id, None)
        else:
            self._responses[field.id] = response
        log_debug("[EditObservation] 回答变更：{} -> {}", field.id, response)
        self.response_changed.emit(field.id, response)

    def on_photo_selected(self, field: Field, path: str) -> None:
        self.on_response_changed(field, PhotoResponse(path))

    def on_save_click(self) -> None:
        """保存当前回答，并发布一次保存结果。"""
        if self._observation is None:
            raise RuntimeError("观测尚未初始化，无法保存")

        form = self.form.value
        self._validation_errors = dict(self._validator(form, dict(self._responses)))
        if self._validation_errors:
            log_info("[EditObservation] 校验未通过：{}", sorted(self._validation_errors))
            self._emit_save_result(SaveResult.HAS_VALIDATION_ERRORS)
            return

        if not self.has_unsaved_changes():
            self._emit_save_result(SaveResult.NO_CHANGES_TO_SAVE)
            return

        updated = self._observation.with_responses(self._responses)
        self._repository.save_observation(updated)
        self._observation = updated
        self._original_responses = dict(self._responses)
        self._emit_save_result(SaveResult.SAVED)

    def _emit_save_result(self, result: SaveResult) -> None:
        self.save_results.set_value(OneShotEvent(result))


__all__ = ["EditObservationViewModel", "SaveResult", "Validator"]
