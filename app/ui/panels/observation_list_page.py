"""观测列表页 - 按要素分组列出已有观测，并提供“新建观测”入口"""

from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets

from app.ui.controllers.navigator import Navigator
from app.ui.editobservation.edit_observation_args import EditObservationArgs
from app.ui.foundation.theme_manager import Sizes, ThemeManager
from engine.observation import InMemoryObservationRepository, Project

_ARGS_ROLE = QtCore.Qt.ItemDataRole.UserRole


class ObservationListPage(QtWidgets.QWidget):
    """项目首页：要素 → 观测 / 新建观测"""

    def __init__(
        self,
        repository: InMemoryObservationRepository,
        navigator: Navigator,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._repository = repository
        self._navigator = navigator

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(
            Sizes.PADDING_LARGE,
            Sizes.PADDING_LARGE,
            Sizes.PADDING_LARGE,
            Sizes.PADDING_LARGE,
        )
        hint = QtWidgets.QLabel("双击观测进行编辑，或双击“新建”条目创建观测。")
        hint.setStyleSheet(ThemeManager.hint_text_style())
        layout.addWidget(hint)

        self.tree = QtWidgets.QTreeWidget()
        self.tree.setHeaderHidden(True)
        self.tree.setStyleSheet(ThemeManager.tree_style())
        self.tree.itemActivated.connect(self._on_item_activated)
        layout.addWidget(self.tree, 1)

        self.refresh()

    def refresh(self) -> None:
        self.tree.clear()
        for project in self._repository.projects():
            self._add_project(project)
        self.tree.expandAll()

    def _add_project(self, project: Project) -> None:
        for feature in project.features:
            feature_item = QtWidgets.QTreeWidgetItem([feature.label or feature.id])
            self.tree.addTopLevelItem(feature_item)

            for observation in self._repository.list_observations(project.id, feature.id):
                form = project.get_form(observation.form_id)
                form_name = form.name if form is not None else observation.form_id
                item = QtWidgets.QTreeWidgetItem(
                    [f"{form_name}（{len(observation.responses)} 个回答）"]
                )
                item.setData(
                    0,
                    _ARGS_ROLE,
                    EditObservationArgs(
                        project_id=project.id,
                        feature_id=feature.id,
                        form_id=observation.form_id,
                        observation_id=observation.id,
                    ),
                )
                feature_item.addChild(item)

            for form in project.forms:
                item = QtWidgets.QTreeWidgetItem([f"＋ 新建：{form.name or form.id}"])
                item.setData(
                    0,
                    _ARGS_ROLE,
                    EditObservationArgs(
                        project_id=project.id,
                        feature_id=feature.id,
                        form_id=form.id,
                    ),
                )
                feature_item.addChild(item)

    def _on_item_activated(self, item: QtWidgets.QTreeWidgetItem, _column: int) -> None:
        args = item.data(0, _ARGS_ROLE)
        if isinstance(args, EditObservationArgs):
            self._navigator.navigate_to_edit_observation(args)
