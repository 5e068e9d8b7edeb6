"""UI 基础设施与通用工具组件包。

包含基础对话框、主题与样式管理、Toast 提示与可观察值等与具体业务无关的 UI 工具。

对外暴露的核心入口包括：
- 统一风格的对话框基类：BaseDialog
- 非阻塞提示框：AlertDialog, build_alert_dialog
- 主题与样式管理：ThemeManager
- 可观察值与一次性事件：LiveValue, OneShotEvent
"""

from app.ui.foundation.base_widgets import BaseDialog
from app.ui.foundation.dialog_utils import (
    AlertDialog,
    apply_standard_button_box_labels,
    build_alert_dialog,
)
from app.ui.foundation.live_value import LiveValue, OneShotEvent
from app.ui.foundation.theme_manager import ThemeManager

__all__ = [
    "AlertDialog",
    "BaseDialog",
    "LiveValue",
    "OneShotEvent",
    "ThemeManager",
    "apply_standard_button_box_labels",
    "build_alert_dialog",
]
