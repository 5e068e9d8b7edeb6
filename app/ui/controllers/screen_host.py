"""页面与宿主窗口之间的最小接口"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from PyQt6 import QtWidgets


@runtime_checkable
class ScreenHost(Protocol):
    """承载页面的宿主：页面只能通过它设置顶部工具栏。"""

    def set_action_bar(self, toolbar: QtWidgets.QToolBar) -> None: ...


@runtime_checkable
class BackPressListener(Protocol):
    """拦截返回键的页面：返回 True 表示已消费，宿主不再执行默认返回。"""

    def on_back(self) -> bool: ...
