from __future__ import annotations

import pytest

from engine.form import Cardinality, ElementType, FieldType, Form, Option


def _form_payload() -> dict:
    return {
        "id": "f",
        "name": "表单",
        "elements": [
            {"type": "section_header", "text": "基本信息"},
            {"type": "field", "field": {"id": "t", "type": "text", "label": "文本"}},
            {
                "type": "field",
                "field": {
                    "id": "c",
                    "type": "multiple_choice",
                    "multiple_choice": {
                        "cardinality": "select_multiple",
                        "options": [{"id": "x", "label": "X"}],
                    },
                },
            },
        ],
    }


def test_unknown_element_type_is_kept_as_unknown() -> None:
    form = Form.deserialize(_form_payload())

    assert [element.type for element in form.elements] == [
        ElementType.UNKNOWN,
        ElementType.FIELD,
        ElementType.FIELD,
    ]
    assert form.elements[0].raw_type == "section_header"
    assert [field.id for field in form.fields()] == ["t", "c"]


def test_multiple_choice_field_is_parsed_with_cardinality() -> None:
    form = Form.deserialize(_form_payload())
    field = form.get_field("c")

    assert field is not None
    assert field.type is FieldType.MULTIPLE_CHOICE
    assert field.multiple_choice.cardinality is Cardinality.SELECT_MULTIPLE
    assert field.multiple_choice.get_option("x").label == "X"
    assert field.multiple_choice.get_option("missing") is None


def test_unknown_cardinality_deserializes_to_none() -> None:
    payload = _form_payload()
    payload["elements"][2]["field"]["multiple_choice"]["cardinality"] = "select_some"

    form = Form.deserialize(payload)

    assert form.get_field("c").multiple_choice.cardinality is None


def test_unknown_field_type_is_rejected() -> None:
    payload = _form_payload()
    payload["elements"][1]["field"]["type"] = "barcode"

    with pytest.raises(ValueError):
        Form.deserialize(payload)


def test_serialize_keeps_unknown_element_tag() -> None:
    form = Form.deserialize(_form_payload())

    data = form.serialize()

    assert data["elements"][0]["type"] == "section_header"
    assert Form.deserialize(data) == form


def test_option_positional_order_is_id_code_label() -> None:
    option = Option("good", "G", "良好")

    assert (option.code, option.label) == ("G", "良好")
    assert Option.deserialize({"id": "good", "code": "G", "label": "良好"}) == option
