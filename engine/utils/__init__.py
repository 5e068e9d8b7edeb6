"""Utilities 工具包

提供通用工具与基础设施能力：
- logging：统一日志接口
"""
