"""统一日志接口。

约定：
- 所有模块通过 `log_debug/log_info/log_warn/log_error` 输出日志，不直接使用 print；
- 消息模板使用 `{}` 占位符，参数在真正需要输出时才格式化；
- 日志级别由 `configure_logging` 在启动阶段根据 settings 统一设置。
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "ground"

_logger = logging.getLogger(LOGGER_NAME)
_configured = False


class _BraceMessage:
    """延迟格式化的消息包装，仅在日志真正输出时调用 str.format。"""

    def __init__(self, template: str, args: tuple) -> None:
        self.template = template
        self.args = args

    def __str__(self) -> str:
        if not self.args:
            return self.template
        return self.template.format(*self.args)


def configure_logging(level: str = "INFO") -> None:
    """安装控制台 handler 并设置日志级别（可重复调用，仅更新级别）。"""
    global _configured
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"未知的日志级别: {level}")

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%H:%M:%S"))
        _logger.addHandler(handler)
        _configured = True
    _logger.setLevel(numeric_level)


def log_debug(template: str, *args: object) -> None:
    _logger.debug(_BraceMessage(template, args))


def log_info(template: str, *args: object) -> None:
    _logger.info(_BraceMessage(template, args))


def log_warn(template: str, *args: object) -> None:
    _logger.warning(_BraceMessage(template, args))


def log_error(template: str, *args: object) -> None:
    _logger.error(_BraceMessage(template, args))


__all__ = [
    "LOGGER_NAME",
    "configure_logging",
    "log_debug",
    "log_info",
    "log_warn",
    "log_error",
]
