"""全局用户设置。

所有设置项以大写类属性声明默认值，运行期通过 `settings.load()` 从工作区下的
`settings/user_settings.json` 覆盖；未知键直接忽略，避免旧版本配置文件阻塞启动。
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from engine.utils.logging.logger import log_info, log_warn

# 环境变量覆盖前缀：GROUND_LOG_LEVEL=DEBUG 等
ENV_PREFIX = "GROUND_"


class Settings:
    """用户设置（单例式使用：模块级 `settings` 实例）。"""

    # 日志
    LOG_LEVEL: str = "INFO"

    # Toast 提示：关闭时仅打印到控制台
    TOAST_POPUP_ENABLED: bool = True
    TOAST_DURATION_MS: int = 3000

    # 照片字段缩略图边长（像素）
    PHOTO_THUMBNAIL_SIZE: int = 160

    # 示例项目（相对工作区根目录）
    DEMO_PROJECT_PATH: str = "assets/demo_project.json"

    def __init__(self) -> None:
        self._config_file: Optional[Path] = None

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        return {
            name: value
            for name, value in vars(cls).items()
            if name.isupper() and not callable(value)
        }

    def set_config_path(self, workspace: Path) -> None:
        """根据工作区根目录确定设置文件位置。"""
        self._config_file = Path(workspace) / "settings" / "user_settings.json"

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file

    def load(self) -> None:
        """从设置文件加载覆盖值，再应用环境变量覆盖（`GROUND_<键名>`）。"""
        if self._config_file is not None and self._config_file.exists():
            self._load_file(self._config_file)
        self._apply_env_overrides()

    def _apply_env_overrides(self) -> None:
        for key, default in self.defaults().items():
            raw = os.environ.get(ENV_PREFIX + key)
            if raw is None:
                continue
            if isinstance(default, bool):
                setattr(self, key, raw.strip().lower() in ("1", "true", "yes", "on"))
            else:
                setattr(self, key, type(default)(raw))

    def _load_file(self, config_file: Path) -> None:
        data = json.loads(config_file.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            log_warn("[Settings] 设置文件格式无效（应为对象）：{}", config_file)
            return

        known_keys = self.defaults()
        for key, value in data.items():
            if key not in known_keys:
                continue
            setattr(self, key, type(known_keys[key])(value))
        log_info("[Settings] 已加载用户设置：{}", config_file)

    def save(self) -> None:
        """将当前设置写回设置文件。"""
        if self._config_file is None:
            raise ValueError("尚未调用 set_config_path，无法保存设置")
        payload = {key: getattr(self, key) for key in self.defaults()}
        self._config_file.parent.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    def reset(self) -> None:
        """恢复全部默认值（移除实例级覆盖）。"""
        for key in self.defaults():
            self.__dict__.pop(key, None)


settings = Settings()

__all__ = ["Settings", "settings"]
