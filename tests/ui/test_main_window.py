from __future__ import annotations

import pytest
from PyQt6 import QtCore, QtWidgets

from app.ui.editobservation.edit_observation_args import EditObservationArgs
from app.ui.editobservation.edit_observation_screen import EditObservationScreen
from app.ui.foundation.two_line_toolbar import TwoLineToolbar
from app.ui.main_window import MainWindow
from engine.form import TextResponse


_app = QtWidgets.QApplication.instance()
if _app is None:
    _app = QtWidgets.QApplication([])


ARGS = EditObservationArgs(project_id="p1", feature_id="f1", form_id="survey", observation_id="o1")


@pytest.fixture
def window(repository) -> MainWindow:
    main_window = MainWindow(repository)
    yield main_window
    main_window.deleteLater()


def test_home_page_lists_observations_and_new_entries(window: MainWindow) -> None:
    feature_item = window.home_page.tree.topLevelItem(0)

    assert feature_item.text(0) == "一号点"
    assert feature_item.childCount() == 2
    assert "调查表" in feature_item.child(0).text(0)
    assert feature_item.child(1).text(0).startswith("＋ 新建")


def test_activating_an_entry_pushes_edit_screen(window: MainWindow) -> None:
    item = window.home_page.tree.topLevelItem(0).child(0)

    window.home_page.tree.itemActivated.emit(item, 0)

    screen = window.current_screen
    assert isinstance(screen, EditObservationScreen)
    assert screen.toolbar.title() == "调查表"
    assert len(screen.field_bindings) == 4


def test_navigate_up_pops_back_to_home(window: MainWindow) -> None:
    window.navigator.navigate_to_edit_observation(ARGS)

    window.navigator.navigate_up()

    assert window.current_screen is window.home_page


def test_back_without_changes_returns_home(window: MainWindow) -> None:
    window.navigator.navigate_to_edit_observation(ARGS)

    window.on_back_pressed()

    assert window.current_screen is window.home_page


def test_back_with_changes_is_consumed_by_screen(window: MainWindow) -> None:
    window.navigator.navigate_to_edit_observation(ARGS)
    screen = window.current_screen
    screen.field_view_models[0].on_text_edited("银杏")

    window.on_back_pressed()

    assert window.current_screen is screen
    assert screen.alert_dialog is not None


def test_saving_new_observation_shows_it_on_home(window: MainWindow, repository) -> None:
    window.navigator.navigate_to_edit_observation(
        EditObservationArgs(project_id="p1", feature_id="f1", form_id="survey")
    )
    screen = window.current_screen
    screen.field_view_models[0].on_text_edited("梧桐")

    screen.save_action.trigger()

    assert window.current_screen is window.home_page
    assert len(repository.list_observations("p1", "f1")) == 2
    assert window.home_page.tree.topLevelItem(0).childCount() == 3
    saved = [
        observation
        for observation in repository.list_observations("p1", "f1")
        if observation.get_response("name") == TextResponse("梧桐")
    ]
    assert len(saved) == 1


def test_closed_screens_release_their_toolbars(window: MainWindow) -> None:
    for _ in range(5):
        window.navigator.navigate_to_edit_observation(ARGS)
        window.navigator.navigate_up()
    QtCore.QCoreApplication.sendPostedEvents(None, QtCore.QEvent.Type.DeferredDelete.value)

    assert window.findChildren(TwoLineToolbar) == [window.home_toolbar]


def test_pop_restores_previous_screen_toolbar(window: MainWindow) -> None:
    window.navigator.navigate_to_edit_observation(ARGS)
    first = window.current_screen
    window.navigator.navigate_to_edit_observation(
        EditObservationArgs(project_id="p1", feature_id="f1", form_id="survey")
    )

    window.navigator.navigate_up()

    assert window.current_screen is first
    assert not first.toolbar.isHidden()
    assert first.toolbar.parent() is window
