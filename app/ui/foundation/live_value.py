"""可观察值与一次性事件。

- `LiveValue`：持有当前值的 QObject，新观察者连接时立即收到当前值（若已设置）；
- `OneShotEvent`：包装一次性信号（如保存结果），保证同一事件最多被处理一次，
  即使页面重建后重新观察、`LiveValue` 重放了旧事件也不会重复处理。
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from PyQt6 import QtCore

T = TypeVar("T")


class OneShotEvent(Generic[T]):
    def __init__(self, payload: T) -> None:
        self._payload = payload
        self._handled = False

    def if_unhandled(self, consumer: Callable[[T], None]) -> None:
        if self._handled:
            return
        self._handled = True
        consumer(self._payload)


class LiveValue(QtCore.QObject):
    """带当前值重放的可观察值。"""

    changed = QtCore.pyqtSignal(object)

    _UNSET = object()

    def __init__(self, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent)
        self._value: object = LiveValue._UNSET

    @property
    def has_value(self) -> bool:
        return self._value is not LiveValue._UNSET

    @property
    def value(self) -> object:
        """当前值；尚未设置时为 None。"""
        if self._value is LiveValue._UNSET:
            return None
        return self._value

    def set_value(self, value: object) -> None:
        self._value = value
        self.changed.emit(value)

    def observe(self, callback: Callable[[object], None]) -> QtCore.QMetaObject.Connection:
        """连接观察者并立即重放当前值；返回连接句柄供 `remove_observer` 使用。"""
        connection = self.changed.connect(callback)
        if self.has_value:
            callback(self._value)
        return connection

    def remove_observer(self, connection: QtCore.QMetaObject.Connection) -> None:
        self.changed.disconnect(connection)


__all__ = ["LiveValue", "OneShotEvent"]
