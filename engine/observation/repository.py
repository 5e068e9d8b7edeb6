"""观测记录仓库。

界面层只依赖 `ObservationRepository` 协议；当前提供的 `InMemoryObservationRepository`
在进程内保存数据，可从 JSON 示例项目文件初始化，不负责落盘。
"""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple

from engine.form import Form
from engine.observation.observation_model import Feature, Observation, Project
from engine.utils.logging.logger import log_info


class ObservationRepository(Protocol):
    def get_project(self, project_id: str) -> Project: ...

    def get_form(self, project_id: str, form_id: str) -> Form: ...

    def get_feature(self, project_id: str, feature_id: str) -> Feature: ...

    def get_observation(self, project_id: str, feature_id: str, observation_id: str) -> Observation: ...

    def create_observation(self, project_id: str, feature_id: str, form_id: str) -> Observation: ...

    def save_observation(self, observation: Observation) -> None: ...


class InMemoryObservationRepository:
    """进程内观测仓库"""

    def __init__(self, project: Project, observations: Optional[List[Observation]] = None) -> None:
        self._projects: Dict[str, Project] = {project.id: project}
        self._observations: Dict[Tuple[str, str], Observation] = {}
        for observation in observations or []:
            self._observations[(observation.project_id, observation.id)] = observation

    @classmethod
    def from_json_file(cls, path: Path) -> "InMemoryObservationRepository":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        project = Project.deserialize(data["project"])
        observations = [Observation.deserialize(o) for o in data.get("observations", [])]
        log_info(
            "[Repository] 已加载示例项目 {}：{} 张表单，{} 个要素，{} 条观测",
            project.id,
            len(project.forms),
            len(project.features),
            len(observations),
        )
        return cls(project, observations)

    def get_project(self, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise KeyError(f"项目不存在: {project_id}")
        return project

    def projects(self) -> List[Project]:
        return list(self._projects.values())

    def get_form(self, project_id: str, form_id: str) -> Form:
        form = self.get_project(project_id).get_form(form_id)
        if form is None:
            raise KeyError(f"表单不存在: {form_id}")
        return form

    def get_feature(self, project_id: str, feature_id: str) -> Feature:
        feature = self.get_project(project_id).get_feature(feature_id)
        if feature is None:
            raise KeyError(f"要素不存在: {feature_id}")
        return feature

    def get_observation(self, project_id: str, feature_id: str, observation_id: str) -> Observation:
        observation = self._observations.get((project_id, observation_id))
        if observation is None or observation.feature_id != feature_id:
            raise KeyError(f"观测不存在: {observation_id}")
        return observation

    def list_observations(self, project_id: str, feature_id: str) -> List[Observation]:
        return [
            observation
            for (obs_project_id, _), observation in self._observations.items()
            if obs_project_id == project_id and observation.feature_id == feature_id
        ]

    def create_observation(self, project_id: str, feature_id: str, form_id: str) -> Observation:
        """创建尚未保存的空白观测（仅在 save_observation 后才进入仓库）。"""
        self.get_form(project_id, form_id)
        self.get_feature(project_id, feature_id)
        return Observation(
            id=uuid.uuid4().hex,
            project_id=project_id,
            feature_id=feature_id,
            form_id=form_id,
            responses={},
        )

    def save_observation(self, observation: Observation) -> None:
        self._observations[(observation.project_id, observation.id)] = observation
        log_info("[Repository] 已保存观测 {}（{} 个回答）", observation.id, len(observation.responses))


__all__ = ["InMemoryObservationRepository", "ObservationRepository"]
