from __future__ import annotations

import os

# 必须在任何 QApplication 创建之前设置，保证无显示环境下也能运行 UI 测试
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from engine.configs.settings import settings
from engine.form import (
    Cardinality,
    Element,
    ElementType,
    Field,
    FieldType,
    Form,
    MultipleChoice,
    Option,
)
from engine.observation import Feature, InMemoryObservationRepository, Observation, Project

# 测试期间不弹出 Toast 窗口
settings.TOAST_POPUP_ENABLED = False


def make_choice_field(field_id: str, cardinality: Cardinality | None) -> Field:
    return Field(
        id=field_id,
        type=FieldType.MULTIPLE_CHOICE,
        label=f"选择 {field_id}",
        multiple_choice=MultipleChoice(
            options=(
                Option(id="a", code="A", label="甲"),
                Option(id="b", code="B", label="乙"),
                Option(id="c", code="C", label="丙"),
            ),
            cardinality=cardinality,
        ),
    )


def make_survey_form() -> Form:
    """两个非字段元素 + 四个字段（文本、单选、多选、照片）"""
    return Form(
        id="survey",
        name="调查表",
        elements=(
            Element(type=ElementType.UNKNOWN, raw_type="section_header"),
            Element.of_field(Field(id="name", type=FieldType.TEXT, label="名称")),
            Element.of_field(make_choice_field("one", Cardinality.SELECT_ONE)),
            Element(type=ElementType.UNKNOWN, raw_type="divider"),
            Element.of_field(make_choice_field("many", Cardinality.SELECT_MULTIPLE)),
            Element.of_field(Field(id="photo", type=FieldType.PHOTO, label="照片")),
        ),
    )


@pytest.fixture
def survey_form() -> Form:
    return make_survey_form()


@pytest.fixture
def repository(survey_form: Form) -> InMemoryObservationRepository:
    from engine.form import MultipleChoiceResponse, TextResponse

    project = Project(
        id="p1",
        title="测试项目",
        forms=[survey_form],
        features=[Feature(id="f1", label="一号点")],
    )
    observation = Observation(
        id="o1",
        project_id="p1",
        feature_id="f1",
        form_id="survey",
        responses={
            "name": TextResponse("老槐树"),
            "one": MultipleChoiceResponse(("b",)),
        },
    )
    return InMemoryObservationRepository(project, [observation])
