"""Panel that shows the resolved diagram or a placeholder message."""

import logging

from PyQt5 import QtWidgets, QtCore, QtGui

logger = logging.getLogger(__name__)


class DiagramPanel(QtWidgets.QFrame):
    """Displays either a placeholder (icon plus message) or a diagram image."""

    def __init__(self, placeholder_icon, placeholder_message, parent=None):
        super().__init__(parent)
        self.setObjectName("DiagramContainer")
        self._placeholder_icon = placeholder_icon
        self._placeholder_message = placeholder_message
        self._pixmap = None
        self._init_ui()
        self.show_placeholder()

    def _init_ui(self):
        layout = QtWidgets.QVBoxLayout()
        layout.setContentsMargins(20, 20, 20, 20)

        self.stack = QtWidgets.QStackedWidget()

        # Placeholder page
        placeholder = QtWidgets.QWidget()
        placeholder_layout = QtWidgets.QVBoxLayout()
        placeholder_layout.addStretch()
        self.icon_label = QtWidgets.QLabel(self._placeholder_icon)
        self.icon_label.setObjectName("PlaceholderIcon")
        self.icon_label.setAlignment(QtCore.Qt.AlignCenter)
        placeholder_layout.addWidget(self.icon_label)
        self.message_label = QtWidgets.QLabel()
        self.message_label.setObjectName("PlaceholderMessage")
        self.message_label.setAlignment(QtCore.Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        placeholder_layout.addWidget(self.message_label)
        placeholder_layout.addStretch()
        placeholder.setLayout(placeholder_layout)
        self.stack.addWidget(placeholder)

        # Diagram page
        self.image_label = QtWidgets.QLabel()
        self.image_label.setAlignment(QtCore.Qt.AlignCenter)
        self.image_label.setMinimumSize(200, 200)
        self.image_label.setSizePolicy(
            QtWidgets.QSizePolicy.Ignored, QtWidgets.QSizePolicy.Ignored
        )
        self.stack.addWidget(self.image_label)

        layout.addWidget(self.stack)
        self.setLayout(layout)

    @property
    def showing_diagram(self):
        return self.stack.currentWidget() is self.image_label

    @property
    def message(self):
        return self.message_label.text()

    def show_placeholder(self, message=None):
        """Show the placeholder, with ``message`` replacing the default prompt."""
        self._pixmap = None
        self.image_label.clear()
        self.message_label.setText(message or self._placeholder_message)
        self.stack.setCurrentIndex(0)

    def show_diagram(self, path, alt_text=""):
        """Load and show the image at ``path``.

        Returns False without changing the display if the image cannot be
        loaded.
        """
        pixmap = QtGui.QPixmap(str(path))
        if pixmap.isNull():
            logger.warning("Failed to load diagram: %s", path)
            return False
        self._pixmap = pixmap
        self.image_label.setToolTip(alt_text)
        self.image_label.setAccessibleName(alt_text)
        self._rescale()
        self.stack.setCurrentIndex(1)
        return True

    def _rescale(self):
        if self._pixmap is None:
            return
        self.image_label.setPixmap(
            self._pixmap.scaled(
                self.image_label.size(),
                QtCore.Qt.KeepAspectRatio,
                QtCore.Qt.SmoothTransformation,
            )
        )

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._rescale()
