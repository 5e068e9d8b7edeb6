"""
引擎核心公共 API 导出点（稳定入口）。

仅暴露对外使用的接口；子模块默认内部。本包不依赖任何 Qt 模块。
"""

# Form（表单定义与回答）
from engine.form import (
    Cardinality,
    Element,
    ElementType,
    Field,
    FieldType,
    Form,
    MultipleChoice,
    MultipleChoiceResponse,
    Option,
    PhotoResponse,
    Response,
    TextResponse,
)

# Observation（观测记录与仓库）
from engine.observation import (
    Feature,
    InMemoryObservationRepository,
    Observation,
    ObservationRepository,
    Project,
)

# Utilities（工具函数）
from engine.utils.logging.logger import log_info, log_error, log_warn

# Configs（配置与设置）
from engine.configs.settings import settings, Settings

__all__ = [
    # form
    "Cardinality",
    "Element",
    "ElementType",
    "Field",
    "FieldType",
    "Form",
    "MultipleChoice",
    "MultipleChoiceResponse",
    "Option",
    "PhotoResponse",
    "Response",
    "TextResponse",
    # observation
    "Feature",
    "InMemoryObservationRepository",
    "Observation",
    "ObservationRepository",
    "Project",
    # utilities
    "log_info",
    "log_error",
    "log_warn",
    # configs
    "settings",
    "Settings",
]
