from __future__ import annotations

import sys
from pathlib import Path

# 确保从项目根导入（直接以脚本方式运行时）
WORKSPACE_ROOT = Path(__file__).resolve().parents[2]
if str(WORKSPACE_ROOT) not in sys.path:
    sys.path.insert(0, str(WORKSPACE_ROOT))

from PyQt6 import QtWidgets  # noqa: E402

from app.ui.foundation.theme_manager import ThemeManager  # noqa: E402
from app.ui.main_window import APP_TITLE, MainWindow  # noqa: E402
from engine.configs.settings import settings  # noqa: E402
from engine.observation import InMemoryObservationRepository  # noqa: E402
from engine.utils.logging.logger import configure_logging, log_info  # noqa: E402


def resolve_demo_project_path(workspace: Path) -> Path:
    path = Path(settings.DEMO_PROJECT_PATH)
    if not path.is_absolute():
        path = workspace / path
    return path


def main() -> None:
    workspace = WORKSPACE_ROOT
    # 在应用创建前尽早加载用户设置，确保日志级别等开关在启动阶段生效
    settings.set_config_path(workspace)
    settings.load()
    configure_logging(settings.LOG_LEVEL)

    log_info("[BOOT] 准备创建 QApplication 实例")
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    log_info("[BOOT] QApplication 创建成功")

    ThemeManager.apply_app_style(app)
    log_info("[BOOT] 主题样式应用完成")

    def exception_hook(exctype, value, traceback_obj):
        # 使用原始 stdout；若不可用则回退到当前 stdout
        output_stream = sys.__stdout__ or sys.stdout
        output_stream.write("=" * 60 + "\n")
        output_stream.write("程序发生错误：\n")
        output_stream.write("=" * 60 + "\n")
        import traceback as _traceback
        _traceback.print_exception(exctype, value, traceback_obj, file=output_stream)
        output_stream.write("=" * 60 + "\n")
        output_stream.flush()

    sys.excepthook = exception_hook
    log_info("[BOOT] 全局异常钩子已安装")

    demo_project_path = resolve_demo_project_path(workspace)
    repository = InMemoryObservationRepository.from_json_file(demo_project_path)

    win = MainWindow(repository)
    win.show()
    log_info("[BOOT] 主窗口 show() 已调用，进入 Qt 事件循环")
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
