"""主窗口 - 页面栈的宿主。

约定：
- 主窗口只做“壳/装配层”：持有导航器与页面栈，业务状态全部在各页面的视图模型中；
- 页面通过 `ScreenHost.set_action_bar` 接入顶部工具栏，通过 `Navigator` 发出导航意图；
- Esc 视为返回键：当前页面实现了 `on_back` 且返回 True 时视为已消费，否则执行默认返回。
"""
from __future__ import annotations

from typing import List, Optional

from PyQt6 import QtCore, QtGui, QtWidgets

from app.ui.controllers.navigator import Navigator
from app.ui.controllers.screen_host import BackPressListener
from app.ui.editobservation.edit_observation_args import EditObservationArgs
from app.ui.editobservation.edit_observation_screen import EditObservationScreen
from app.ui.editobservation.edit_observation_view_model import (
    EditObservationViewModel,
    Validator,
)
from app.ui.foundation.two_line_toolbar import TwoLineToolbar
from app.ui.panels.observation_list_page import ObservationListPage
from engine.observation import InMemoryObservationRepository
from engine.utils.logging.logger import log_info


APP_TITLE = "Ground 观测编辑器"


class MainWindow(QtWidgets.QMainWindow):
    """主窗口：首页（观测列表）+ 依次压入的观测编辑页"""

    def __init__(
        self,
        repository: InMemoryObservationRepository,
        validator: Optional[Validator] = None,
    ):
        log_info("[BOOT][MainWindow] __init__ 开始")
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(720, 900)

        self._repository = repository
        self._validator = validator
        self._action_bar: Optional[QtWidgets.QToolBar] = None
        self._screens: List[EditObservationScreen] = []

        self.navigator = Navigator(self)
        self.navigator.navigate_up_requested.connect(self._pop_screen)
        self.navigator.edit_observation_requested.connect(self._push_edit_observation)

        self.stack = QtWidgets.QStackedWidget()
        self.setCentralWidget(self.stack)

        self.home_page = ObservationListPage(repository, self.navigator)
        self.stack.addWidget(self.home_page)

        projects = repository.projects()
        self.home_toolbar = TwoLineToolbar()
        self.home_toolbar.navigation_action.setVisible(False)
        self.home_toolbar.set_title(projects[0].title if projects else APP_TITLE)
        self.home_toolbar.set_subtitle("观测列表")
        self.set_action_bar(self.home_toolbar)

        back_shortcut = QtGui.QShortcut(QtGui.QKeySequence(QtCore.Qt.Key.Key_Escape), self)
        back_shortcut.activated.connect(self.on_back_pressed)
        log_info("[BOOT][MainWindow] 主窗口装配完成")

    # === ScreenHost ===

    def set_action_bar(self, toolbar: QtWidgets.QToolBar) -> None:
        if self._action_bar is toolbar:
            return
        if self._action_bar is not None:
            self.removeToolBar(self._action_bar)
        self._action_bar = toolbar
        self.addToolBar(QtCore.Qt.ToolBarArea.TopToolBarArea, toolbar)
        toolbar.show()

    # === 页面栈 ===

    @property
    def current_screen(self) -> QtWidgets.QWidget:
        return self.stack.currentWidget()

    def _push_edit_observation(self, args: EditObservationArgs) -> None:
        log_info("[MainWindow] 打开观测编辑页：{}", args)
        view_model = EditObservationViewModel(self._repository, self._validator)
        screen = EditObservationScreen(self, self.navigator, view_model)
        view_model.setParent(screen)

        self._screens.append(screen)
        self.stack.addWidget(screen)
        self.stack.setCurrentWidget(screen)
        screen.on_view_created(args)

    def _pop_screen(self) -> None:
        if not self._screens:
            return
        screen = self._screens.pop()
        screen.on_destroy_view()
        self.stack.removeWidget(screen)
        screen.deleteLater()

        if self._screens:
            self.set_action_bar(self._screens[-1].toolbar)
        else:
            self.set_action_bar(self.home_toolbar)
            self.home_page.refresh()
        # removeToolBar 只是隐藏，工具栏仍挂在主窗口下，需随页面一起释放
        screen.toolbar.deleteLater()

    def on_back_pressed(self) -> None:
        current = self.current_screen
        if isinstance(current, BackPressListener) and current.on_back():
            return
        self.navigator.navigate_up()
