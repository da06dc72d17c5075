"""Auto Clicker — Entry point."""
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from clicker.core.settings_manager import SettingsManager
from clicker.gui.main_window import MainWindow

BASE_DIR = Path(__file__).parent


def main() -> None:
    app = QApplication(sys.argv)
    app.setApplicationName("Auto Clicker")
    app.setApplicationVersion("0.1.0")
    app.setOrganizationName("AutoClicker")
    app.setStyle("Fusion")

    settings = SettingsManager(BASE_DIR / "settings.ini")
    window = MainWindow(settings)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
