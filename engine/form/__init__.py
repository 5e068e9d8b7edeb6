"""表单定义与字段回答模型"""

from .form_model import (
    Cardinality,
    Element,
    ElementType,
    Field,
    FieldType,
    Form,
    MultipleChoice,
    Option,
)
from .response import (
    MultipleChoiceResponse,
    PhotoResponse,
    Response,
    TextResponse,
    deserialize_response,
    detail_text_of,
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
    "MultipleChoiceResponse",
    "PhotoResponse",
    "Response",
    "TextResponse",
    "deserialize_response",
    "detail_text_of",
]
