"""主窗口模块 - 页面栈宿主"""
from .main_window import MainWindow, APP_TITLE

__all__ = ['MainWindow', 'APP_TITLE']
