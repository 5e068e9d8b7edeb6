"""观测记录与项目模型"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Mapping, Optional

from engine.form import Form, Response, deserialize_response


@dataclass(frozen=True)
class Feature:
    """地图要素（观测记录所属的地点/对象）"""
    id: str
    label: str = ""

    def serialize(self) -> dict:
        return {"id": self.id, "label": self.label}

    @staticmethod
    def deserialize(data: dict) -> "Feature":
        return Feature(id=data["id"], label=data.get("label", ""))


@dataclass(frozen=True)
class Observation:
    """一次观测：某个要素按某张表单填写的回答集合"""
    id: str
    project_id: str
    feature_id: str
    form_id: str
    responses: Mapping[str, Response] = field(default_factory=dict)

    def get_response(self, field_id: str) -> Optional[Response]:
        return self.responses.get(field_id)

    def with_responses(self, responses: Mapping[str, Response]) -> "Observation":
        return replace(self, responses=dict(responses))

    def serialize(self) -> dict:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "feature_id": self.feature_id,
            "form_id": self.form_id,
            "responses": {key: value.serialize() for key, value in self.responses.items()},
        }

    @staticmethod
    def deserialize(data: dict) -> "Observation":
        return Observation(
            id=data["id"],
            project_id=data["project_id"],
            feature_id=data["feature_id"],
            form_id=data["form_id"],
            responses={
                key: deserialize_response(value)
                for key, value in data.get("responses", {}).items()
            },
        )


@dataclass
class Project:
    id: str
    title: str = ""
    forms: List[Form] = field(default_factory=list)
    features: List[Feature] = field(default_factory=list)

    def get_form(self, form_id: str) -> Optional[Form]:
        for form in self.forms:
            if form.id == form_id:
                return form
        return None

    def get_feature(self, feature_id: str) -> Optional[Feature]:
        for feature in self.features:
            if feature.id == feature_id:
                return feature
        return None

    def serialize(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "forms": [form.serialize() for form in self.forms],
            "features": [feature.serialize() for feature in self.features],
        }

    @staticmethod
    def deserialize(data: dict) -> "Project":
        return Project(
            id=data["id"],
            title=data.get("title", ""),
            forms=[Form.deserialize(f) for f in data.get("forms", [])],
            features=[Feature.deserialize(f) for f in data.get("features", [])],
        )


__all__ = ["Feature", "Observation", "Project"]
