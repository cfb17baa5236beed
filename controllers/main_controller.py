"""Main controller that coordinates all components."""

import logging
import sys
from PyQt5 import QtWidgets

from models.asset_resolver import AssetResolver
from models.item_catalog import build_catalog
from models.selection_model import SelectionModel
from models.settings_model import SettingsModel
from views.main_view import MainView
from controllers.viewer_controller import ViewerController

logger = logging.getLogger(__name__)


class MainController:
    """Builds models, the view and the viewer controller."""

    def __init__(self, settings_model=None):
        # Create models
        self.settings_model = settings_model or SettingsModel()
        self.selection_model = SelectionModel()
        self.resolver = AssetResolver(self.settings_model.asset_root)
        self.items = build_catalog(self.settings_model.asset_root)

        # Create view
        self.view = MainView(
            self.items,
            grid_columns=self.settings_model.grid_columns,
            notification_ms=self.settings_model.notification_ms,
        )
        self.view.resize(*self.settings_model.window_size)

        # Create sub-controllers
        self.viewer_controller = ViewerController(
            self.selection_model, self.resolver, self.view
        )
        logger.info("Using assets from %s", self.settings_model.asset_root)

    def show(self):
        """Show the main window."""
        self.view.show()
        self.view.setFocus()


def configure_logging(level):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Main application entry point."""
    app = QtWidgets.QApplication(sys.argv)

    settings_model = SettingsModel()
    configure_logging(settings_model.log_level)

    controller = MainController(settings_model)
    controller.show()

    sys.exit(app.exec_())
