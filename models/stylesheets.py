MAIN_STYLE = """
        QWidget {
            background-color: #2a2a2a;
            color: #ffffff;
        }
        QLabel {
            background-color: transparent;
        }
        QLabel#HeaderTitle {
            font-size: 24px;
            font-weight: bold;
        }
        QLabel#HeaderSubtitle {
            color: #aaaaaa;
            font-size: 13px;
        }
        QLabel#SectionTitle {
            font-size: 16px;
            font-weight: bold;
            color: #cccccc;
        }
        QLabel#SelectionCount {
            color: #aaaaaa;
        }
        QFrame#ItemCard {
            background-color: #1e1e1e;
            border: 2px solid #555555;
            border-radius: 10px;
        }
        QFrame#ItemCard:hover {
            background-color: #333333;
        }
        QFrame#ItemCard[selected="true"] {
            background-color: #2d5a2d;
            border: 2px solid #4a9e4a;
        }
        QLabel#ItemName {
            font-weight: bold;
        }
        QLabel#SelectionDot {
            background-color: #404040;
            border-radius: 6px;
        }
        QLabel#SelectionDot[selected="true"] {
            background-color: #4a9e4a;
        }
        QFrame#DiagramContainer {
            background-color: #1e1e1e;
            border: 1px solid #555555;
            border-radius: 10px;
        }
        QLabel#PlaceholderIcon {
            font-size: 48px;
        }
        QLabel#PlaceholderMessage {
            color: #aaaaaa;
            font-size: 14px;
        }
        QScrollArea {
            border: none;
        }
"""

NOTIFICATION_STYLE = """
        QLabel#Notification {
            background-color: #e53e3e;
            color: #ffffff;
            padding: 12px 18px;
            border-radius: 10px;
            font-weight: 500;
        }
"""
