"""Theme colours and the application stylesheet."""

THEMES = {
    "Light": {
        "bg": "#f5f5f7",
        "card": "#ffffff",
        "border": "#d2d2d7",
        "text": "#1d1d1f",
        "muted": "#6e6e73",
        "primary": "#5b4bdb",
        "primary_text": "#ffffff",
        "running": "#22a559",
        "paused": "#e0a800",
        "danger": "#d93025",
    },
    "Dark": {
        "bg": "#1c1c1e",
        "card": "#2c2c2e",
        "border": "#3a3a3c",
        "text": "#f5f5f7",
        "muted": "#a1a1a6",
        "primary": "#8e7cff",
        "primary_text": "#1c1c1e",
        "running": "#30d158",
        "paused": "#ffd60a",
        "danger": "#ff453a",
    },
}


def resolve_theme(name):
    return THEMES.get(name, THEMES["Light"])


def build_stylesheet(t):
    return f"""
        QMainWindow, QDialog {{ background-color: {t['bg']}; }}
        QLabel {{ color: {t['text']}; }}
        QLabel#muted {{ color: {t['muted']}; }}
        QLabel#clock {{ color: {t['primary']}; font-family: monospace; font-weight: bold; }}
        QWidget#timerBar {{
            background-color: {t['card']};
            border: 1px solid {t['border']};
            border-radius: 18px;
        }}
        QPushButton {{
            background-color: {t['card']};
            color: {t['text']};
            border: 1px solid {t['border']};
            border-radius: 8px;
            padding: 6px 12px;
        }}
        QPushButton:checked, QPushButton#primary {{
            background-color: {t['primary']};
            color: {t['primary_text']};
            border-color: {t['primary']};
        }}
        QPushButton:disabled {{ color: {t['muted']}; }}
        QPushButton#danger {{
            background-color: {t['danger']};
            color: #ffffff;
            border-color: {t['danger']};
        }}
        QPlainTextEdit {{
            background-color: {t['card']};
            color: {t['text']};
            border: 1px solid {t['border']};
            border-radius: 8px;
        }}
    """
