"""控制器模块 - 页面导航与宿主接口"""

from .navigator import Navigator
from .screen_host import BackPressListener, ScreenHost

__all__ = [
    'BackPressListener',
    'Navigator',
    'ScreenHost',
]
