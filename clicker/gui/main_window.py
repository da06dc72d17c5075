"""Main application window — the control surface for the click engine."""
from __future__ import annotations

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QGridLayout,
    QLabel, QSpinBox, QComboBox, QRadioButton, QPushButton, QButtonGroup,
)
from PySide6.QtCore import Qt, QObject, QTimer, Signal
from PySide6.QtGui import QCloseEvent, QKeyEvent

from clicker.core.emitter import EventEmitter
from clicker.core.hotkey_manager import HotkeyManager
from clicker.core.models import (
    ClickInterval, ClickOptions, ClickPosition, ClickType, CurrentCursor,
    Fixed, MouseButton,
)
from clicker.core.session import ClickSession
from clicker.core.settings_manager import SettingsManager
from clicker.gui import styles
from clicker.gui.log_panel import LogPanel

_SPIN_MAX = 2_147_483_647
_STATUS_REFRESH_MS = 100


class _EngineLogRelay(QObject):
    """Carries engine-thread log calls onto the GUI thread."""

    log_msg = Signal(str, str)   # (level, message)


def _spin(maximum: int = _SPIN_MAX) -> QSpinBox:
    box = QSpinBox(minimum=0, maximum=maximum)
    box.setMinimumWidth(70)
    return box


class MainWindow(QMainWindow):
    def __init__(self, settings: SettingsManager) -> None:
        super().__init__()
        self._settings = settings

        self._relay   = _EngineLogRelay(self)
        self._emitter = EventEmitter(
            settle_delay = settings.settle_delay,
            log_callback = self._relay.log_msg.emit,
        )
        self._session = ClickSession(
            self._emitter,
            log_callback  = self._relay.log_msg.emit,
            poll_interval = settings.poll_interval,
        )
        self._hotkeys = HotkeyManager(settings, self)

        self.setWindowTitle("Auto Clicker")
        self.setStyleSheet(styles.MAIN_WINDOW)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._build_interval_group())
        layout.addWidget(self._build_options_group())
        layout.addWidget(self._build_position_group())
        layout.addLayout(self._build_control_row())
        self._log_panel = LogPanel()
        layout.addWidget(self._log_panel, stretch=1)
        self.setCentralWidget(central)
        self.resize(460, 560)

        self._build_statusbar()
        self._connect_signals()

        self._session.launch()
        self._send_interval()
        self._send_options()
        self._send_position()
        self._start_hotkeys()

        self._log("INFO", "Auto Clicker ready")

    # ================================================================
    # UI construction
    # ================================================================

    def _build_interval_group(self) -> QGroupBox:
        group = QGroupBox("Click Interval")
        row = QHBoxLayout(group)
        self._hours   = _spin()
        self._minutes = _spin()
        self._seconds = _spin()
        self._millis  = _spin()
        self._millis.setValue(100)
        for box, label in (
            (self._hours, "Hours"), (self._minutes, "Minutes"),
            (self._seconds, "Seconds"), (self._millis, "Milliseconds"),
        ):
            row.addWidget(box)
            row.addWidget(QLabel(label))
        return group

    def _build_options_group(self) -> QGroupBox:
        group = QGroupBox("Click Options")
        grid = QGridLayout(group)

        self._button_combo = QComboBox()
        for button in MouseButton:
            self._button_combo.addItem(button.value.capitalize(), button)

        self._type_combo = QComboBox()
        for click_type in ClickType:
            self._type_combo.addItem(click_type.value.capitalize(), click_type)

        grid.addWidget(QLabel("Mouse Button"), 0, 0)
        grid.addWidget(self._button_combo,     0, 1)
        grid.addWidget(QLabel("Click Type"),   1, 0)
        grid.addWidget(self._type_combo,       1, 1)
        return group

    def _build_position_group(self) -> QGroupBox:
        group = QGroupBox("Click Position")
        col = QVBoxLayout(group)

        self._cursor_radio = QRadioButton("Current Cursor Position")
        self._fixed_radio  = QRadioButton("")
        self._cursor_radio.setChecked(True)
        self._position_group = QButtonGroup(self)
        self._position_group.addButton(self._cursor_radio)
        self._position_group.addButton(self._fixed_radio)

        self._x = _spin()
        self._y = _spin()

        row = QHBoxLayout()
        row.addWidget(self._fixed_radio)
        row.addWidget(QLabel("X: "))
        row.addWidget(self._x)
        row.addWidget(QLabel("Y: "))
        row.addWidget(self._y)
        row.addStretch()

        col.addWidget(self._cursor_radio)
        col.addLayout(row)
        self._sync_position_widgets()
        return group

    def _build_control_row(self) -> QHBoxLayout:
        hk = self._settings.hotkeys
        row = QHBoxLayout()
        self._start_btn  = QPushButton(f"Start ({hk['start']})")
        self._stop_btn   = QPushButton(f"Stop ({hk['stop']})")
        self._toggle_btn = QPushButton(f"Toggle ({hk['toggle']})")
        for btn, color in (
            (self._start_btn, "#4EC9B0"),
            (self._stop_btn, "#F48771"),
            (self._toggle_btn, "#CCCCCC"),
        ):
            btn.setStyleSheet(styles.CONTROL_BUTTON.format(color=color))
            row.addWidget(btn)
        return row

    def _build_statusbar(self) -> None:
        self._status_label = QLabel("Idle")
        self.statusBar().addWidget(self._status_label)
        self._status_timer = QTimer(self)
        self._status_timer.setInterval(_STATUS_REFRESH_MS)
        self._status_timer.timeout.connect(self._refresh_status)
        self._status_timer.start()

    # ================================================================
    # Signal wiring
    # ================================================================

    def _connect_signals(self) -> None:
        self._relay.log_msg.connect(self._log)

        for box in (self._hours, self._minutes, self._seconds, self._millis):
            box.valueChanged.connect(self._send_interval)

        self._button_combo.currentIndexChanged.connect(self._send_options)
        self._type_combo.currentIndexChanged.connect(self._send_options)

        self._cursor_radio.toggled.connect(self._on_position_mode_changed)
        self._x.valueChanged.connect(self._send_position)
        self._y.valueChanged.connect(self._send_position)

        self._start_btn.clicked.connect(self._do_start)
        self._stop_btn.clicked.connect(self._do_stop)
        self._toggle_btn.clicked.connect(self._do_toggle)

        self._hotkeys.start_triggered.connect(self._do_start)
        self._hotkeys.stop_triggered.connect(self._do_stop)
        self._hotkeys.toggle_triggered.connect(self._do_toggle)

    def _start_hotkeys(self) -> None:
        try:
            self._hotkeys.start()
        except Exception as exc:          # noqa: BLE001
            self._log("WARNING", f"global hotkeys unavailable: {exc}")

    # ================================================================
    # Configuration → engine
    # ================================================================

    def current_interval(self) -> ClickInterval:
        return ClickInterval(
            hours        = self._hours.value(),
            minutes      = self._minutes.value(),
            seconds      = self._seconds.value(),
            milliseconds = self._millis.value(),
        )

    def current_options(self) -> ClickOptions:
        return ClickOptions(
            button     = self._button_combo.currentData(),
            click_type = self._type_combo.currentData(),
        )

    def current_position(self) -> ClickPosition:
        if self._cursor_radio.isChecked():
            return CurrentCursor()
        return Fixed(self._x.value(), self._y.value())

    def _send_interval(self, _value: int = 0) -> None:
        self._session.send_interval(self.current_interval())

    def _send_options(self, _index: int = 0) -> None:
        self._session.send_options(self.current_options())

    def _send_position(self, _value: int = 0) -> None:
        self._session.send_position(self.current_position())

    def _on_position_mode_changed(self, _checked: bool) -> None:
        self._sync_position_widgets()
        self._send_position()

    def _sync_position_widgets(self) -> None:
        fixed = self._fixed_radio.isChecked()
        self._x.setEnabled(fixed)
        self._y.setEnabled(fixed)

    # ================================================================
    # Run state
    # ================================================================

    def _do_start(self) -> None:
        self._session.start()
        self._refresh_status()

    def _do_stop(self) -> None:
        self._session.stop()
        self._refresh_status()

    def _do_toggle(self) -> None:
        self._session.toggle()
        self._refresh_status()

    def _refresh_status(self) -> None:
        running = self._session.is_running
        self._status_label.setText("Running" if running else "Idle")
        self.statusBar().setStyleSheet(
            styles.STATUS_RUNNING if running else styles.STATUS_IDLE
        )

    # ================================================================
    # Keyboard
    # ================================================================

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Escape:
            self.close()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        # F-keys come through HotkeyManager while the global listener runs.
        if not self._hotkeys.is_active and not event.isAutoRepeat():
            key = event.key()
            if key == Qt.Key.Key_F6:
                self._do_start()
                return
            if key == Qt.Key.Key_F7:
                self._do_stop()
                return
            if key == Qt.Key.Key_F8:
                self._do_toggle()
                return
        super().keyReleaseEvent(event)

    # ================================================================
    # Helpers
    # ================================================================

    def _log(self, level: str, message: str) -> None:
        self._log_panel.log(level, message)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._status_timer.stop()
        self._hotkeys.stop()
        self._session.close()
        event.accept()
