"""Main viewer window."""

from PyQt5 import QtWidgets, QtCore

from models.stylesheets import MAIN_STYLE
from models.text_content import get_text
from views.diagram_panel import DiagramPanel
from views.item_card import ItemCard
from views.notification import Notification


class MainView(QtWidgets.QWidget):
    """Species grid, selection count and diagram area.

    The view holds no selection state of its own; the controller pushes the
    current selection and resolution into it.
    """

    # Signals for user actions
    item_toggled = QtCore.pyqtSignal(int)  # item id
    reset_requested = QtCore.pyqtSignal()

    def __init__(self, items, grid_columns=4, notification_ms=3000):
        super().__init__()
        self.items = list(items)
        self.grid_columns = grid_columns
        self.cards = {}
        self.setWindowTitle(get_text("pageTitle"))
        self.setStyleSheet(MAIN_STYLE)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)

        self._init_ui()
        self.notification = Notification(self, notification_ms)

    def _init_ui(self):
        """Initialize the user interface."""
        layout = QtWidgets.QVBoxLayout()
        layout.setContentsMargins(30, 30, 30, 30)
        layout.setSpacing(15)

        # Header
        title = QtWidgets.QLabel(get_text("header.title"))
        title.setObjectName("HeaderTitle")
        layout.addWidget(title)
        subtitle = QtWidgets.QLabel(get_text("header.subtitle"))
        subtitle.setObjectName("HeaderSubtitle")
        layout.addWidget(subtitle)

        content = QtWidgets.QHBoxLayout()
        content.setSpacing(25)

        # Species section
        items_section = QtWidgets.QVBoxLayout()
        items_header = QtWidgets.QHBoxLayout()
        items_title = QtWidgets.QLabel(get_text("sections.items.title"))
        items_title.setObjectName("SectionTitle")
        items_header.addWidget(items_title)
        items_header.addStretch()
        self.selection_count_label = QtWidgets.QLabel()
        self.selection_count_label.setObjectName("SelectionCount")
        items_header.addWidget(self.selection_count_label)
        items_section.addLayout(items_header)

        scroll = QtWidgets.QScrollArea()
        scroll.setWidgetResizable(True)
        grid_container = QtWidgets.QWidget()
        grid = QtWidgets.QGridLayout()
        grid.setSpacing(15)
        grid.setAlignment(QtCore.Qt.AlignTop | QtCore.Qt.AlignLeft)
        for index, item in enumerate(self.items):
            card = ItemCard(item)
            card.clicked.connect(self.item_toggled.emit)
            self.cards[item.id] = card
            grid.addWidget(card, index // self.grid_columns, index % self.grid_columns)
        grid_container.setLayout(grid)
        scroll.setWidget(grid_container)
        items_section.addWidget(scroll)
        content.addLayout(items_section, 3)

        # Diagram section
        diagram_section = QtWidgets.QVBoxLayout()
        diagram_title = QtWidgets.QLabel(get_text("sections.diagram.title"))
        diagram_title.setObjectName("SectionTitle")
        diagram_section.addWidget(diagram_title)
        self.diagram_panel = DiagramPanel(
            get_text("sections.diagram.placeholder.icon"),
            get_text("sections.diagram.placeholder.message"),
        )
        diagram_section.addWidget(self.diagram_panel)
        content.addLayout(diagram_section, 2)

        layout.addLayout(content)
        self.setLayout(layout)
        self.set_selection_count(0)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if hasattr(self, "notification"):
            self.notification.reposition()

    def keyPressEvent(self, event):
        if event.key() == QtCore.Qt.Key_Escape:
            self.reset_requested.emit()
            return
        super().keyPressEvent(event)

    def set_selected_ids(self, selected_ids):
        selected = set(selected_ids)
        for item_id, card in self.cards.items():
            card.set_selected(item_id in selected)

    def set_selection_count(self, count):
        self.selection_count_label.setText(
            f"{count} {get_text('sections.items.selectionInfo')}"
        )

    def show_placeholder(self, message=None):
        self.diagram_panel.show_placeholder(message)

    def show_diagram(self, path, alt_text=""):
        return self.diagram_panel.show_diagram(path, alt_text)

    def show_notification(self, message):
        self.notification.show_message(message)
