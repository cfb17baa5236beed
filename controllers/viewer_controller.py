"""Controller that connects the selection model, asset resolver and view."""

import logging

from PyQt5 import QtCore

from models.asset_resolver import ResolutionStatus
from models.text_content import get_text

logger = logging.getLogger(__name__)


def qt_scheduler(callback):
    """Run ``callback`` on the next pass of the Qt event loop."""
    QtCore.QTimer.singleShot(0, callback)


class ViewerController:
    """Handles toggle and reset events and keeps the view in sync.

    Args:
        selection_model: SelectionModel owning the current selection
        resolver: AssetResolver for completed selections
        view: object with ``item_toggled``/``reset_requested`` signals and the
            rendering methods of MainView
        scheduler: callable that runs a callback later; defaults to the Qt
            event loop
    """

    def __init__(self, selection_model, resolver, view, scheduler=None):
        self.selection_model = selection_model
        self.resolver = resolver
        self.view = view
        self.scheduler = scheduler or qt_scheduler
        self._generation = 0

        self.view.item_toggled.connect(self.on_item_toggled)
        self.view.reset_requested.connect(self.on_reset)
        self.selection_model.add_observer(self._on_model_event)

        self.render(self.selection_model.selection)

    @property
    def generation(self):
        return self._generation

    def on_item_toggled(self, item_id):
        return self.selection_model.toggle(item_id)

    def on_reset(self):
        self.selection_model.clear()

    def _on_model_event(self, event_type, data):
        if event_type == "selection_changed":
            self.render(data)
        elif event_type == "selection_limit_reached":
            logger.info("Selection limit reached, ignoring item %s", data)
            self.view.show_notification(get_text("notifications.maxSelections"))

    def render(self, selection):
        """Mirror ``selection`` into the view and start resolution if complete."""
        self._generation += 1
        self.view.set_selected_ids(selection.ids)
        self.view.set_selection_count(len(selection))

        if not selection.is_complete:
            self.view.show_placeholder()
            return

        generation = self._generation
        self.scheduler(lambda: self._resolve(selection, generation))

    def _resolve(self, selection, generation):
        if generation != self._generation:
            logger.debug("Dropping superseded diagram probe for %s", selection.ids)
            return

        resolution = self.resolver.resolve(selection)
        if resolution.status is ResolutionStatus.FOUND:
            if self.view.show_diagram(resolution.path, resolution.alt_text):
                logger.info("Showing diagram %s", resolution.key)
                return
            resolution = self.resolver.not_found(resolution.key, resolution.path)

        self.view.show_placeholder(resolution.message)
