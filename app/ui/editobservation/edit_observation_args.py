"""观测编辑页的启动参数"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EditObservationArgs:
    project_id: str
    feature_id: str
    form_id: str
    observation_id: str = ""  # 为空表示新建观测

    @property
    def is_new(self) -> bool:
        return not self.observation_id

