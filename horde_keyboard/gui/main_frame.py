"""
Main Frame - Combines all components

Output on top, hive below with the horde drawn over it.
"""

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QShortcut
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QKeySequence

from horde_keyboard.app_context import AppContext
from horde_keyboard.config import (
    HordeConfig, INSTRUCTIONS, INSTRUCTION_LINE_DELAY_MS,
    INSTRUCTION_START_DELAY_MS, INSTRUCTION_PROMPT_DELAY_MS, PROMPT, WINDOW_SIZE,
)
from horde_keyboard.horde.horde_controller import HordeController
from horde_keyboard.gui.hive_widget import HiveWidget
from horde_keyboard.gui.horde_overlay import HordeOverlay
from horde_keyboard.gui.output_panel import OutputPanel
from horde_keyboard.gui.theme import COLORS
from horde_keyboard.utils.logger import logger


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, config: HordeConfig = None):
        super().__init__()

        self.setWindowTitle("Horde Keyboard")
        width, height = WINDOW_SIZE
        self.setGeometry(100, 50, width, height)
        self.setStyleSheet(f"background-color: {COLORS['background_darkest']};")

        # Cores start at the initial size; the hive resize signal corrects it
        self.context = AppContext.build(width, height * 0.6, config)
        self.horde_controller = HordeController(self.context.horde, self)

        self.setup_ui()
        self.setup_shortcuts()

        self.horde_controller.frame_advanced.connect(self.hive_widget.on_frame)
        self.horde_controller.agent_count_changed.connect(self._refresh_status)
        self.horde_controller.chorus_mode_changed.connect(self._refresh_status)
        self.horde_controller.start()

        QTimer.singleShot(INSTRUCTION_START_DELAY_MS, self.show_instructions)

    def setup_ui(self):
        """Create the main interface layout."""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.output_panel = OutputPanel(self.context.output)
        layout.addWidget(self.output_panel, stretch=2)

        self.hive_widget = HiveWidget(self.context.hive)
        self.hive_widget.resized.connect(self.on_viewport_resized)
        layout.addWidget(self.hive_widget, stretch=3)

        # Overlay is a child of the hive so it shares its coordinates
        self.horde_overlay = HordeOverlay(self.hive_widget)
        self.horde_overlay.set_horde_controller(self.horde_controller)

        self._refresh_status()

    def setup_shortcuts(self):
        """Ctrl (Cmd on macOS) shortcuts for the control surface."""
        bindings = [
            ("Ctrl+H", self.toggle_haptics),
            ("Ctrl+C", self.horde_controller.toggle_chorus_mode),
            ("Ctrl++", self.horde_controller.add_agent),
            ("Ctrl+=", self.horde_controller.add_agent),
            ("Ctrl+-", self.horde_controller.remove_agent),
            ("Ctrl+D", self.horde_controller.disperse_swarm),
        ]
        self._shortcuts = []
        for sequence, slot in bindings:
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(slot)
            self._shortcuts.append(shortcut)

    def keyPressEvent(self, event):
        """Plain keys edit the output directly."""
        key = event.key()
        if key == Qt.Key_Escape:
            self.context.clear_output()
        elif key == Qt.Key_Backspace:
            self.context.backspace()
        elif key == Qt.Key_Space:
            self.context.space()
        elif key in (Qt.Key_Return, Qt.Key_Enter):
            self.context.new_line()
        else:
            super().keyPressEvent(event)
            return
        event.accept()

    def on_viewport_resized(self, width: float, height: float):
        self.context.resize(width, height)
        self.horde_overlay.setGeometry(0, 0, int(width), int(height))

    def toggle_haptics(self):
        self.context.toggle_haptics()
        self._refresh_status()

    def _refresh_status(self, *_):
        self.output_panel.set_status(self.context.get_state())

    def show_instructions(self):
        """Type the instruction banner line by line, then the prompt."""
        for index, line in enumerate(INSTRUCTIONS):
            QTimer.singleShot(index * INSTRUCTION_LINE_DELAY_MS,
                              lambda text=line: self.context.add_text(text + "\n"))
        QTimer.singleShot(len(INSTRUCTIONS) * INSTRUCTION_LINE_DELAY_MS + INSTRUCTION_PROMPT_DELAY_MS,
                          lambda: self.context.add_text(PROMPT))

    def closeEvent(self, event):
        self.horde_controller.stop()
        logger.info("Horde Keyboard closed", component="APP")
        super().closeEvent(event)
