"""表单定义模型。

表单由有序的元素（Element）组成，元素可以是字段（Field）或暂不支持的其他类型。
表单一经交付给界面即视为不可变，界面在表单变更时整体重建。
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Iterator, Optional, Tuple


class ElementType(Enum):
    """表单元素类型"""
    FIELD = "field"
    UNKNOWN = "unknown"  # 无法识别的元素类型（保留，界面跳过）

    @classmethod
    def from_string(cls, value: str) -> "ElementType":
        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN


class FieldType(Enum):
    """字段类型（决定界面控件实现）"""
    TEXT = "text"
    MULTIPLE_CHOICE = "multiple_choice"
    PHOTO = "photo"


class Cardinality(Enum):
    """多选题的可选数量"""
    SELECT_ONE = "select_one"
    SELECT_MULTIPLE = "select_multiple"

    @classmethod
    def from_string(cls, value: str) -> Optional["Cardinality"]:
        """无法识别时返回 None，由界面记录错误并跳过。"""
        for member in cls:
            if member.value == value:
                return member
        return None


@dataclass(frozen=True)
class Option:
    """多选题选项"""
    id: str
    code: str = ""
    label: str = ""

    def serialize(self) -> dict:
        return {"id": self.id, "code": self.code, "label": self.label}

    @staticmethod
    def deserialize(data: dict) -> "Option":
        return Option(
            id=data["id"],
            code=data.get("code", ""),
            label=data.get("label", ""),
        )


@dataclass(frozen=True)
class MultipleChoice:
    options: Tuple[Option, ...] = ()
    cardinality: Optional[Cardinality] = Cardinality.SELECT_ONE

    def get_option(self, option_id: str) -> Optional[Option]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def serialize(self) -> dict:
        return {
            "cardinality": self.cardinality.value if self.cardinality else None,
            "options": [option.serialize() for option in self.options],
        }

    @staticmethod
    def deserialize(data: dict) -> "MultipleChoice":
        return MultipleChoice(
            options=tuple(Option.deserialize(o) for o in data.get("options", [])),
            cardinality=Cardinality.from_string(str(data.get("cardinality", ""))),
        )


@dataclass(frozen=True)
class Field:
    """表单字段：带标识与类型的输入描述"""
    id: str
    type: FieldType
    label: str = ""
    required: bool = False
    multiple_choice: Optional[MultipleChoice] = None

    def serialize(self) -> dict:
        data = {
            "id": self.id,
            "type": self.type.value,
            "label": self.label,
            "required": self.required,
        }
        if self.multiple_choice is not None:
            data["multiple_choice"] = self.multiple_choice.serialize()
        return data

    @staticmethod
    def deserialize(data: dict) -> "Field":
        multiple_choice_data = data.get("multiple_choice")
        return Field(
            id=data["id"],
            type=FieldType(data["type"]),
            label=data.get("label", ""),
            required=bool(data.get("required", False)),
            multiple_choice=(
                MultipleChoice.deserialize(multiple_choice_data)
                if multiple_choice_data is not None
                else None
            ),
        )


@dataclass(frozen=True)
class Element:
    """表单元素（字段或其他尚未支持的类型）"""
    type: ElementType
    field: Optional[Field] = None
    raw_type: str = ""  # 原始类型标记，便于诊断日志

    @staticmethod
    def of_field(field: Field) -> "Element":
        return Element(type=ElementType.FIELD, field=field, raw_type=ElementType.FIELD.value)

    def serialize(self) -> dict:
        data: dict = {"type": self.raw_type or self.type.value}
        if self.field is not None:
            data["field"] = self.field.serialize()
        return data

    @staticmethod
    def deserialize(data: dict) -> "Element":
        raw_type = str(data.get("type", ""))
        element_type = ElementType.from_string(raw_type)
        if element_type is ElementType.FIELD:
            return Element(
                type=element_type,
                field=Field.deserialize(data["field"]),
                raw_type=raw_type,
            )
        return Element(type=element_type, raw_type=raw_type)


@dataclass(frozen=True)
class Form:
    id: str
    name: str = ""
    elements: Tuple[Element, ...] = dataclass_field(default_factory=tuple)

    def fields(self) -> Iterator[Field]:
        """按顺序遍历所有字段元素"""
        for element in self.elements:
            if element.type is ElementType.FIELD and element.field is not None:
                yield element.field

    def get_field(self, field_id: str) -> Optional[Field]:
        for form_field in self.fields():
            if form_field.id == field_id:
                return form_field
        return None

    def serialize(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "elements": [element.serialize() for element in self.elements],
        }

    @staticmethod
    def deserialize(data: dict) -> "Form":
        return Form(
            id=data["id"],
            name=data.get("name", ""),
            elements=tuple(Element.deserialize(e) for e in data.get("elements", [])),
        )


__all__ = [
    "Cardinality",
    "Element",
    "ElementType",
    "Field",
    "FieldType",
    "Form",
    "MultipleChoice",
    "Option",
]
