"""Card widget for a single selectable species."""

import logging

from PyQt5 import QtWidgets, QtCore, QtGui

logger = logging.getLogger(__name__)


def _repolish(widget):
    style = widget.style()
    style.unpolish(widget)
    style.polish(widget)
    widget.update()


class ItemCard(QtWidgets.QFrame):
    """Shows an item image, its name and a selection marker."""

    clicked = QtCore.pyqtSignal(int)  # item id

    def __init__(self, item, parent=None):
        super().__init__(parent)
        self.item = item
        self._selected = False
        self.setObjectName("ItemCard")
        self.setFixedSize(180, 210)
        self.setCursor(QtCore.Qt.PointingHandCursor)
        self.setProperty("selected", False)
        self._init_ui()

    def _init_ui(self):
        layout = QtWidgets.QVBoxLayout()
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self.image_label = QtWidgets.QLabel()
        self.image_label.setAlignment(QtCore.Qt.AlignCenter)
        self.image_label.setFixedHeight(140)
        self.image_label.setToolTip(self.item.alt_text)
        self._load_image()
        layout.addWidget(self.image_label)

        name_row = QtWidgets.QHBoxLayout()
        self.name_label = QtWidgets.QLabel(self.item.name)
        self.name_label.setObjectName("ItemName")
        name_row.addWidget(self.name_label)
        name_row.addStretch()

        self.selection_dot = QtWidgets.QLabel()
        self.selection_dot.setObjectName("SelectionDot")
        self.selection_dot.setFixedSize(12, 12)
        self.selection_dot.setProperty("selected", False)
        name_row.addWidget(self.selection_dot)
        layout.addLayout(name_row)

        self.setLayout(layout)

    def _load_image(self):
        """Show the item image, or hide the image area if it cannot be loaded."""
        pixmap = QtGui.QPixmap(str(self.item.image_path))
        if pixmap.isNull():
            logger.warning("Failed to load image: %s", self.item.image_path)
            self.image_label.hide()
            return
        self.image_label.setPixmap(
            pixmap.scaled(
                160, 140, QtCore.Qt.KeepAspectRatio, QtCore.Qt.SmoothTransformation
            )
        )

    @property
    def is_selected(self):
        return self._selected

    def set_selected(self, selected):
        selected = bool(selected)
        if selected == self._selected:
            return
        self._selected = selected
        self.setProperty("selected", selected)
        self.selection_dot.setProperty("selected", selected)
        _repolish(self)
        _repolish(self.selection_dot)

    def mousePressEvent(self, event):
        if event.button() == QtCore.Qt.LeftButton:
            self.clicked.emit(self.item.id)
        super().mousePressEvent(event)
