"""配置子包

- settings：全局用户设置（日志级别、Toast 开关、缩略图尺寸、示例项目路径等）
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
