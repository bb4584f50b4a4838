from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QSizePolicy
from PySide6.QtCore import Qt


class SwatchCard(QFrame):
    """
    One palette entry: a frame filled with the color, with its hex, rgb()
    and hsl() forms drawn on top in a contrasting text color.
    The base swatch gets a white outline.
    """
    def __init__(self, swatch, settings, parent=None):
        super().__init__(parent)
        self.swatch = swatch
        self.setObjectName("BaseSwatch" if swatch.is_base else "Swatch")
        self.setMinimumSize(120, 90)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setToolTip(f"Row {swatch.row + 1}, step {swatch.column + 1}")

        layout = QVBoxLayout()
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(2)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        # Create labels based on settings
        self.labels = []

        if settings.get("show_hex", True):
            self._add_label(swatch.hex, bold=True)
        if settings.get("show_rgb", True):
            self._add_label(swatch.rgb_css)
        if settings.get("show_hsl", True):
            self._add_label(swatch.hsl_css)

        self.setStyleSheet(self.card_style())

    def _add_label(self, text, bold=False):
        lbl = QLabel(text)
        lbl.setObjectName("CodeLabel")
        lbl.setAlignment(Qt.AlignCenter)
        weight = "bold" if bold else "normal"
        lbl.setStyleSheet(f"color: {self.swatch.text_color}; font-weight: {weight}; background: transparent;")
        self.layout().addWidget(lbl, 0, Qt.AlignCenter)
        self.labels.append(lbl)

    def card_style(self):
        style = f"background-color: {self.swatch.hex};"
        if self.swatch.is_base:
            style += " border: 3px solid #ffffff;"
        return style

    def label_texts(self):
        return [lbl.text() for lbl in self.labels]
