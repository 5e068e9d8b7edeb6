from __future__ import annotations

import logging

from PIL import Image
from PyQt6 import QtWidgets

from app.ui.editobservation.edit_observation_args import EditObservationArgs
from app.ui.editobservation.edit_observation_view_model import EditObservationViewModel
from app.ui.editobservation.photo_selector_sheet import PhotoSelectorSheet
from app.ui.editobservation.photo_thumbnail import load_thumbnail
from engine.form import PhotoResponse


_app = QtWidgets.QApplication.instance()
if _app is None:
    _app = QtWidgets.QApplication([])


ARGS = EditObservationArgs(project_id="p1", feature_id="f1", form_id="survey", observation_id="o1")


def _view_model(repository) -> EditObservationViewModel:
    view_model = EditObservationViewModel(repository)
    view_model.initialize(ARGS)
    return view_model


def test_thumbnail_keeps_aspect_ratio(tmp_path) -> None:
    photo_path = tmp_path / "wide.png"
    Image.new("RGB", (400, 200), (30, 120, 90)).save(photo_path)

    pixmap = load_thumbnail(str(photo_path), 100)

    assert pixmap is not None
    assert (pixmap.width(), pixmap.height()) == (100, 50)


def test_thumbnail_of_missing_file_is_none(tmp_path) -> None:
    assert load_thumbnail(str(tmp_path / "missing.jpg"), 100) is None
    assert load_thumbnail("", 100) is None


def test_choose_file_records_photo(repository, survey_form) -> None:
    view_model = _view_model(repository)
    sheet = PhotoSelectorSheet(view_model, file_picker=lambda _parent: "/data/a.jpg")
    finished = []
    sheet.finished.connect(lambda: finished.append(True))
    sheet.set_field(survey_form.get_field("photo"))

    sheet.choose_file_button.click()

    assert view_model.get_response("photo") == PhotoResponse("/data/a.jpg")
    assert finished == [True]


def test_cancelled_file_picker_changes_nothing(repository, survey_form) -> None:
    view_model = _view_model(repository)
    sheet = PhotoSelectorSheet(view_model, file_picker=lambda _parent: "")
    sheet.set_field(survey_form.get_field("photo"))

    sheet.choose_file_button.click()

    assert view_model.get_response("photo") is None
    assert not view_model.has_unsaved_changes()


def test_remove_is_enabled_only_with_a_photo(repository, survey_form) -> None:
    view_model = _view_model(repository)
    photo_field = survey_form.get_field("photo")
    sheet = PhotoSelectorSheet(view_model, file_picker=lambda _parent: "")

    sheet.set_field(photo_field)
    assert not sheet.remove_button.isEnabled()

    view_model.on_photo_selected(photo_field, "/data/a.jpg")
    sheet.set_field(photo_field)
    assert sheet.remove_button.isEnabled()

    sheet.remove_button.click()
    assert view_model.get_response("photo") is None


def test_thumbnail_of_undecodable_file_is_none(tmp_path, caplog) -> None:
    broken = tmp_path / "broken.jpg"
    broken.write_bytes(b"not an image")

    with caplog.at_level(logging.WARNING, logger="ground"):
        assert load_thumbnail(str(broken), 100) is None

    assert "broken.jpg" in caplog.text
