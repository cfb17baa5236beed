import logging

import pytest
from PyQt5 import QtCore, QtGui, QtWidgets
from PyQt5.QtTest import QTest

from controllers.viewer_controller import ViewerController
from models.item_catalog import build_catalog
from models.selection_model import SelectionModel
from views.main_view import MainView


def write_png(path):
    image = QtGui.QImage(4, 4, QtGui.QImage.Format_ARGB32)
    image.fill(QtGui.QColor("red"))
    assert image.save(str(path), "PNG")


@pytest.fixture
def view(qapp, asset_root):
    write_png(asset_root / "diagrams" / "012.png")
    return MainView(build_catalog(asset_root))


def test_initial_view(view):
    assert view.windowTitle() == "Species Complex Needs Diagram"
    assert len(view.cards) == 7
    assert view.selection_count_label.text() == "0 / 3 selected"
    assert not view.diagram_panel.showing_diagram
    assert view.diagram_panel.message == "Select exactly 3 species to view the diagram"


def test_missing_item_image_is_hidden_and_logged(qapp, tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        view = MainView(build_catalog(tmp_path))
    assert view.cards[0].image_label.isHidden()
    assert "Failed to load image" in caplog.text


def test_controller_drives_view(view, resolver, immediate):
    model = SelectionModel()
    ViewerController(model, resolver, view, scheduler=immediate)

    for item_id in (1, 2, 0):
        view.cards[item_id].clicked.emit(item_id)

    assert view.selection_count_label.text() == "3 / 3 selected"
    assert all(view.cards[i].is_selected for i in (0, 1, 2))
    assert not view.cards[3].is_selected
    assert view.diagram_panel.showing_diagram

    view.item_toggled.emit(5)
    assert view.notification.text() == "You can only select up to 3 species"
    assert not view.cards[5].is_selected

    QtWidgets.QApplication.sendEvent(
        view,
        QtGui.QKeyEvent(QtCore.QEvent.KeyPress, QtCore.Qt.Key_Escape, QtCore.Qt.NoModifier),
    )
    assert model.selected_ids == ()
    assert not any(card.is_selected for card in view.cards.values())
    assert not view.diagram_panel.showing_diagram


def test_missing_diagram_shows_error_text(view, resolver, immediate):
    ViewerController(SelectionModel(), resolver, view, scheduler=immediate)
    for item_id in (3, 5, 6):
        view.item_toggled.emit(item_id)
    assert not view.diagram_panel.showing_diagram
    assert view.diagram_panel.message == "Diagram not found for selected species"


def test_notification_hides_after_configured_delay(qapp, asset_root):
    view = MainView(build_catalog(asset_root), notification_ms=50)
    view.show()
    assert view.notification.duration_ms == 50

    view.show_notification("x")
    assert view.notification.isVisible()

    QTest.qWait(200)
    assert not view.notification.isVisible()
    view.close()


def test_notification_follows_window_resize(qapp, asset_root):
    view = MainView(build_catalog(asset_root))
    view.resize(900, 600)
    view.show()
    view.show_notification("You can only select up to 3 species")

    view.resize(1300, 700)
    qapp.processEvents()
    notification = view.notification
    assert notification.x() == view.width() - notification.width() - 20
    assert notification.y() == 20
    view.close()
