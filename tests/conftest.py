import base64
import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models.asset_resolver import AssetResolver
from models.selection_model import SelectionModel

# 1x1 PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


class FakeSignal:
    def __init__(self):
        self._slots = []

    def connect(self, slot):
        self._slots.append(slot)

    def emit(self, *args):
        for slot in list(self._slots):
            slot(*args)


class FakeView:
    """Records what the controller pushes into the view."""

    def __init__(self, load_ok=True):
        self.item_toggled = FakeSignal()
        self.reset_requested = FakeSignal()
        self.load_ok = load_ok
        self.selected_ids = ()
        self.count = None
        self.display = None
        self.notifications = []

    def set_selected_ids(self, selected_ids):
        self.selected_ids = tuple(selected_ids)

    def set_selection_count(self, count):
        self.count = count

    def show_placeholder(self, message=None):
        self.display = ("placeholder", message)

    def show_diagram(self, path, alt_text=""):
        if not self.load_ok:
            return False
        self.display = ("diagram", path, alt_text)
        return True

    def show_notification(self, message):
        self.notifications.append(message)


class DeferredScheduler:
    """Queues callbacks until run_all() is called."""

    def __init__(self):
        self.pending = []

    def __call__(self, callback):
        self.pending.append(callback)

    def run_all(self):
        pending, self.pending = self.pending, []
        for callback in pending:
            callback()


@pytest.fixture
def asset_root(tmp_path):
    (tmp_path / "items").mkdir()
    (tmp_path / "diagrams").mkdir()
    for item_id in range(7):
        (tmp_path / "items" / f"{item_id}.png").write_bytes(PNG_BYTES)
    for key in ("012", "024", "456"):
        (tmp_path / "diagrams" / f"{key}.png").write_bytes(PNG_BYTES)
    return tmp_path


@pytest.fixture
def resolver(asset_root):
    return AssetResolver(asset_root)


@pytest.fixture
def selection_model():
    return SelectionModel()


@pytest.fixture
def fake_view():
    return FakeView()


@pytest.fixture
def immediate():
    return lambda callback: callback()


@pytest.fixture
def deferred():
    return DeferredScheduler()


@pytest.fixture(scope="session")
def qapp():
    from PyQt5 import QtWidgets

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
