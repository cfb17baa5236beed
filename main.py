"""
Species Diagram Viewer

Main entry point for the application.
Run this file to start the viewer.
"""

import logging
import sys
from PyQt5 import QtWidgets

logger = logging.getLogger(__name__)


def run():
    """Start the viewer, reporting startup failures in a message box."""
    try:
        from controllers.main_controller import main

        main()
    except SystemExit:
        raise
    except Exception as e:
        logger.exception("Failed to start application")
        if QtWidgets.QApplication.instance() is None:
            QtWidgets.QApplication(sys.argv)
        QtWidgets.QMessageBox.critical(
            None, "Startup Error", f"Failed to start application:\n\n{str(e)}"
        )
        sys.exit(1)


if __name__ == "__main__":
    run()
