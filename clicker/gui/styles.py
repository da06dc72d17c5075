"""Dark-theme stylesheets shared across the application."""

MAIN_WINDOW = """
    QMainWindow, QWidget  { background: #1E1E1E; color: #CCCCCC; }
    QGroupBox             {
        color: #AAAAAA; border: 1px solid #3C3C3C;
        border-radius: 4px; margin-top: 8px; padding-top: 8px;
    }
    QGroupBox::title      { subcontrol-origin: margin; left: 8px; font-size: 13px; }
    QSpinBox, QComboBox   {
        background: #3C3C3C; color: #CCCCCC;
        border: 1px solid #555; border-radius: 3px; padding: 3px;
    }
    QSpinBox:disabled     { color: #555555; }
    QRadioButton          { color: #CCCCCC; }
    QStatusBar            { background: #007ACC; color: #FFFFFF; font-size: 12px; }
    QStatusBar::item      { border: none; }
"""

CONTROL_BUTTON = """
    QPushButton {{
        min-width: 100px; min-height: 40px;
        border-radius: 4px;
        background: #3C3C3C;
        color: {color};
        border: 1px solid #555555;
        font-size: 12px;
    }}
    QPushButton:hover {{ background: #4A4A4A; }}
    QPushButton:pressed {{ background: #2A2A2A; }}
"""

STATUS_RUNNING = "background: #16825D;"
STATUS_IDLE    = "background: #007ACC;"
