from __future__ import annotations

import pytest
from PyQt6 import QtWidgets

from app.ui.editobservation.edit_observation_args import EditObservationArgs
from app.ui.editobservation.edit_observation_view_model import (
    EditObservationViewModel,
    SaveResult,
)
from engine.form import MultipleChoiceResponse, PhotoResponse, TextResponse


_app = QtWidgets.QApplication.instance()
if _app is None:
    _app = QtWidgets.QApplication([])


EXISTING = EditObservationArgs(project_id="p1", feature_id="f1", form_id="survey", observation_id="o1")
NEW = EditObservationArgs(project_id="p1", feature_id="f1", form_id="survey")


def _collect_save_results(view_model: EditObservationViewModel) -> list[SaveResult]:
    results: list[SaveResult] = []
    view_model.save_results.observe(lambda event: event.if_unhandled(results.append))
    return results


def test_initialize_publishes_titles_and_form(repository, survey_form) -> None:
    view_model = EditObservationViewModel(repository)
    forms = []
    view_model.form.observe(forms.append)

    view_model.initialize(EXISTING)

    assert forms == [survey_form]
    assert view_model.toolbar_title.value == "调查表"
    assert view_model.toolbar_subtitle.value == "一号点"
    assert view_model.get_response("name") == TextResponse("老槐树")
    assert view_model.get_response("photo") is None
    assert not view_model.has_unsaved_changes()


def test_initialize_twice_with_same_args_does_not_republish(repository) -> None:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(EXISTING)
    forms = []
    view_model.form.observe(forms.append)  # 重放一次

    view_model.initialize(EXISTING)

    assert len(forms) == 1


def test_response_changes_track_unsaved_state(repository, survey_form) -> None:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(EXISTING)
    changes = []
    view_model.response_changed.connect(lambda field_id, response: changes.append((field_id, response)))
    name_field = survey_form.get_field("name")

    view_model.on_response_changed(name_field, TextResponse("银杏"))
    assert view_model.has_unsaved_changes()

    view_model.on_response_changed(name_field, TextResponse("老槐树"))
    assert not view_model.has_unsaved_changes()

    view_model.on_response_changed(name_field, None)
    assert view_model.get_response("name") is None
    assert changes == [
        ("name", TextResponse("银杏")),
        ("name", TextResponse("老槐树")),
        ("name", None),
    ]


def test_setting_same_response_does_not_emit(repository, survey_form) -> None:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(EXISTING)
    changes = []
    view_model.response_changed.connect(lambda *args: changes.append(args))

    view_model.on_response_changed(survey_form.get_field("one"), MultipleChoiceResponse(("b",)))

    assert changes == []


def test_save_without_changes_reports_no_changes(repository) -> None:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(EXISTING)
    results = _collect_save_results(view_model)

    view_model.on_save_click()

    assert results == [SaveResult.NO_CHANGES_TO_SAVE]


def test_save_with_changes_stores_observation(repository, survey_form) -> None:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(EXISTING)
    results = _collect_save_results(view_model)

    view_model.on_photo_selected(survey_form.get_field("photo"), "/data/tree.jpg")
    view_model.on_save_click()

    assert results == [SaveResult.SAVED]
    stored = repository.get_observation("p1", "f1", "o1")
    assert stored.get_response("photo") == PhotoResponse("/data/tree.jpg")
    assert not view_model.has_unsaved_changes()


def test_new_observation_is_saved_under_generated_id(repository, survey_form) -> None:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(NEW)

    view_model.on_response_changed(survey_form.get_field("name"), TextResponse("梧桐"))
    view_model.on_save_click()

    observation_id = view_model.observation.id
    assert repository.get_observation("p1", "f1", observation_id).get_response("name") == TextResponse("梧桐")


def test_validator_errors_block_saving(repository, survey_form) -> None:
    def require_photo(form, responses):
        return {} if "photo" in responses else {"photo": "必须上传照片"}

    view_model = EditObservationViewModel(repository, validator=require_photo)
    view_model.initialize(EXISTING)
    results = _collect_save_results(view_model)

    view_model.on_response_changed(survey_form.get_field("name"), TextResponse("银杏"))
    view_model.on_save_click()

    assert results == [SaveResult.HAS_VALIDATION_ERRORS]
    assert view_model.validation_errors == {"photo": "必须上传照片"}
    assert repository.get_observation("p1", "f1", "o1").get_response("name") == TextResponse("老槐树")


def test_replayed_save_result_is_not_handled_twice(repository, survey_form) -> None:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(EXISTING)
    first = _collect_save_results(view_model)
    view_model.on_save_click()

    # 页面重建后重新观察：LiveValue 会重放最近的事件，但事件已被处理
    second = _collect_save_results(view_model)

    assert first == [SaveResult.NO_CHANGES_TO_SAVE]
    assert second == []


def test_save_before_initialize_is_an_error(repository) -> None:
    view_model = EditObservationViewModel(repository)

    with pytest.raises(RuntimeError):
        view_model.on_save_click()

