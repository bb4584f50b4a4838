import sys
import os
from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                               QHBoxLayout, QLabel, QFrame, QGridLayout, QLineEdit, QSlider)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QIcon
from loguru import logger

from styles import STYLESHEET
from color_logic import MalformedHexError, normalize_hex
from palette_logic import intensity_from_percent, palette_from_hex
from swatches import describe_palette
from icon_gen import create_app_icon
from settings import load_settings, configure_logging
from widgets import SwatchCard


def load_icon():
    base_path = getattr(sys, '_MEIPASS', os.path.dirname(os.path.abspath(__file__)))
    for name in ["icon.ico", "icon.png"]:
        path = os.path.join(base_path, name)
        if os.path.exists(path):
            return QIcon(path)
    return create_app_icon()


class PaletteWindow(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()
        self.setWindowTitle("Palette Grid")
        self.setMinimumWidth(800)
        self.setWindowIcon(load_icon())

        self.app_settings = settings or load_settings()
        self.base_hex = self.app_settings["base_color"]
        self.warmth = self.app_settings["warmth"]
        self.palette = []
        self.swatches = []

        self.setup_ui()
        self.regenerate()

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setSpacing(10)
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Top Bar
        top_bar = QHBoxLayout()
        top_bar.setSpacing(10)

        color_label = QLabel("Base Color")
        color_label.setObjectName("SectionTitle")
        top_bar.addWidget(color_label)

        self.color_input = QLineEdit(self.base_hex)
        self.color_input.setObjectName("ColorInput")
        self.color_input.setMaxLength(7)
        self.color_input.setFixedWidth(110)
        self.color_input.textChanged.connect(self.on_color_changed)
        top_bar.addWidget(self.color_input)

        self.selected_preview = QFrame()
        self.selected_preview.setObjectName("PreviewFrame")
        self.selected_preview.setFixedSize(40, 40)
        top_bar.addWidget(self.selected_preview)

        top_bar.addStretch()

        warmth_label = QLabel("Warmth")
        warmth_label.setObjectName("SectionTitle")
        top_bar.addWidget(warmth_label)

        self.warmth_slider = QSlider(Qt.Horizontal)
        self.warmth_slider.setRange(0, 100)
        self.warmth_slider.setValue(self.warmth)
        self.warmth_slider.setFixedWidth(180)
        self.warmth_slider.valueChanged.connect(self.on_warmth_changed)
        top_bar.addWidget(self.warmth_slider)

        self.warmth_value = QLabel(f"{self.warmth}%")
        self.warmth_value.setObjectName("CodeLabel")
        self.warmth_value.setFixedWidth(40)
        top_bar.addWidget(self.warmth_value)

        main_layout.addLayout(top_bar)

        self.error_label = QLabel("")
        self.error_label.setObjectName("ErrorLabel")
        self.error_label.hide()
        main_layout.addWidget(self.error_label)

        palette_label = QLabel("Palette")
        palette_label.setObjectName("SectionTitle")
        main_layout.addWidget(palette_label)

        content = QWidget()
        content.setObjectName("PaletteContainer")
        self.grid = QGridLayout(content)
        self.grid.setSpacing(8)
        self.grid.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(content)
        main_layout.addStretch()

    # --- Input handlers ---

    def on_color_changed(self, text):
        try:
            base_hex = normalize_hex(text)
        except MalformedHexError as e:
            # Keep the last good palette on screen
            logger.debug(f"Rejected color input: {e}")
            self.error_label.setText(str(e))
            self.error_label.show()
            return

        self.error_label.hide()
        self.base_hex = base_hex
        self.regenerate()

    def on_warmth_changed(self, value):
        self.warmth = value
        self.warmth_value.setText(f"{value}%")
        self.regenerate()

    # --- Palette ---

    def regenerate(self):
        intensity = intensity_from_percent(self.warmth)
        self.palette = palette_from_hex(self.base_hex, intensity)
        self.swatches = describe_palette(self.palette)
        logger.debug(f"Palette regenerated for {self.base_hex} at warmth {self.warmth}")

        self.selected_preview.setStyleSheet(
            f"background-color: {self.base_hex}; border: 1px solid #333; border-radius: 8px;")
        self.update_grid()

    def update_grid(self):
        while self.grid.count():
            child = self.grid.takeAt(0)
            if child.widget():
                child.widget().deleteLater()

        for swatch in self.swatches:
            card = SwatchCard(swatch, self.app_settings)
            self.grid.addWidget(card, swatch.row, swatch.column)

        QTimer.singleShot(10, self, self.adjustSize)

    def cards(self):
        return [self.grid.itemAt(i).widget() for i in range(self.grid.count())]


def run(argv=None):
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
    # Provisional sink so settings warnings respect the env level
    configure_logging()
    settings = load_settings()
    configure_logging(settings["log_level"])

    app = QApplication(argv if argv is not None else sys.argv)
    app.setStyleSheet(STYLESHEET)

    window = PaletteWindow(settings)
    window.show()
    logger.info(f"Palette Grid started with base color {settings['base_color']}")

    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
