"""字段回答（Response）模型。

回答是不可变的值对象；“未作答”统一用 None 表示，不存在空回答实例。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from engine.form.form_model import Field


@dataclass(frozen=True)
class TextResponse:
    text: str

    @staticmethod
    def from_string(text: str) -> Optional["TextResponse"]:
        if not text:
            return None
        return TextResponse(text)

    def detail_text(self, field: Field) -> str:
        return self.text

    def serialize(self) -> dict:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class MultipleChoiceResponse:
    selected_option_ids: Tuple[str, ...]

    @staticmethod
    def from_ids(option_ids: Iterable[str]) -> Optional["MultipleChoiceResponse"]:
        ids = tuple(option_ids)
        if not ids:
            return None
        return MultipleChoiceResponse(ids)

    def is_selected(self, option_id: str) -> bool:
        return option_id in self.selected_option_ids

    def detail_text(self, field: Field) -> str:
        if field.multiple_choice is None:
            return ", ".join(self.selected_option_ids)
        labels = []
        for option_id in self.selected_option_ids:
            option = field.multiple_choice.get_option(option_id)
            labels.append(option.label if option is not None else option_id)
        return ", ".join(labels)

    def serialize(self) -> dict:
        return {"type": "multiple_choice", "selected_option_ids": list(self.selected_option_ids)}


@dataclass(frozen=True)
class PhotoResponse:
    path: str

    def detail_text(self, field: Field) -> str:
        return self.path

    def serialize(self) -> dict:
        return {"type": "photo", "path": self.path}


Response = Union[TextResponse, MultipleChoiceResponse, PhotoResponse]


def deserialize_response(data: dict) -> Response:
    """按 `type` 标记还原回答对象，未知标记直接抛出。"""
    response_type = data.get("type")
    if response_type == "text":
        return TextResponse(str(data["text"]))
    if response_type == "multiple_choice":
        return MultipleChoiceResponse(tuple(str(i) for i in data["selected_option_ids"]))
    if response_type == "photo":
        return PhotoResponse(str(data["path"]))
    raise ValueError(f"未知的回答类型: {response_type}")


def detail_text_of(field: Field, response: Optional[Response]) -> str:
    """界面展示用的回答摘要，未作答时返回空字符串。"""
    if response is None:
        return ""
    return response.detail_text(field)


__all__ = [
    "MultipleChoiceResponse",
    "PhotoResponse",
    "Response",
    "TextResponse",
    "deserialize_response",
    "detail_text_of",
]
