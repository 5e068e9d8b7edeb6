from __future__ import annotations

from PyQt6 import QtWidgets

from app.ui.editobservation.select_dialogs import (
    MultiSelectDialog,
    MultiSelectDialogFactory,
    SingleSelectDialog,
    SingleSelectDialogFactory,
)
from engine.form import MultipleChoiceResponse, TextResponse


_app = QtWidgets.QApplication.instance()
if _app is None:
    _app = QtWidgets.QApplication([])


def _ok(dialog) -> None:
    dialog.button_box.button(QtWidgets.QDialogButtonBox.StandardButton.Ok).click()


def _cancel(dialog) -> None:
    dialog.button_box.button(QtWidgets.QDialogButtonBox.StandardButton.Cancel).click()


def test_single_select_is_prepopulated_from_response(survey_form) -> None:
    field = survey_form.get_field("one")
    dialog = SingleSelectDialogFactory().create(field, MultipleChoiceResponse(("b",)), lambda _r: None)

    assert isinstance(dialog, SingleSelectDialog)
    assert [button.text() for button in dialog.option_buttons] == ["甲", "乙", "丙"]
    assert all(isinstance(button, QtWidgets.QRadioButton) for button in dialog.option_buttons)
    assert dialog.selected_option_ids() == ("b",)
    assert dialog.windowTitle() == "选择 one"


def test_single_select_keeps_one_option_checked(survey_form) -> None:
    chosen = []
    field = survey_form.get_field("one")
    dialog = SingleSelectDialogFactory().create(field, MultipleChoiceResponse(("b",)), chosen.append)

    dialog.option_buttons[2].click()
    _ok(dialog)

    assert chosen == [MultipleChoiceResponse(("c",))]


def test_multi_select_allows_several_options(survey_form) -> None:
    chosen = []
    field = survey_form.get_field("many")
    dialog = MultiSelectDialogFactory().create(field, MultipleChoiceResponse(("a",)), chosen.append)

    assert isinstance(dialog, MultiSelectDialog)
    assert all(isinstance(button, QtWidgets.QCheckBox) for button in dialog.option_buttons)
    dialog.option_buttons[2].click()
    _ok(dialog)

    assert chosen == [MultipleChoiceResponse(("a", "c"))]


def test_clearing_every_option_reports_no_answer(survey_form) -> None:
    chosen = []
    field = survey_form.get_field("many")
    dialog = MultiSelectDialogFactory().create(field, MultipleChoiceResponse(("a",)), chosen.append)

    dialog.option_buttons[0].click()
    _ok(dialog)

    assert chosen == [None]


def test_cancel_does_not_report(survey_form) -> None:
    chosen = []
    field = survey_form.get_field("many")
    dialog = MultiSelectDialogFactory().create(field, None, chosen.append)

    dialog.option_buttons[1].click()
    _cancel(dialog)

    assert chosen == []


def test_non_choice_response_selects_nothing(survey_form) -> None:
    field = survey_form.get_field("many")
    dialog = MultiSelectDialogFactory().create(field, TextResponse("a"), lambda _r: None)

    assert dialog.selected_option_ids() == ()
