"""观测编辑页：按表单定义动态生成字段控件，并处理保存/返回等交互。

对外暴露：
- `EditObservationScreen`：页面控制器
- `EditObservationViewModel` / `SaveResult`：页面视图模型与保存结果
- `EditObservationArgs`：启动参数
"""

from .edit_observation_args import EditObservationArgs
from .edit_observation_screen import EditObservationScreen
from .edit_observation_view_model import EditObservationViewModel, SaveResult

__all__ = [
    "EditObservationArgs",
    "EditObservationScreen",
    "EditObservationViewModel",
    "SaveResult",
]
