"""Transient notification shown over the main window."""

from PyQt5 import QtWidgets, QtCore

from models.stylesheets import NOTIFICATION_STYLE


class Notification(QtWidgets.QLabel):
    """Label pinned to the top-right corner of its parent that hides itself."""

    def __init__(self, parent, duration_ms=3000):
        super().__init__(parent)
        self.setObjectName("Notification")
        self.setStyleSheet(NOTIFICATION_STYLE)
        self.setWordWrap(True)
        self.setMaximumWidth(300)
        self.duration_ms = duration_ms
        self._timer = QtCore.QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide)
        self.hide()

    def reposition(self):
        """Pin the label to the top-right corner of its parent."""
        parent = self.parentWidget()
        if parent is not None:
            self.move(parent.width() - self.width() - 20, 20)

    def show_message(self, message):
        """Show ``message`` and restart the hide timer."""
        self.setText(message)
        self.adjustSize()
        self.reposition()
        self.raise_()
        self.show()
        self._timer.start(self.duration_ms)
