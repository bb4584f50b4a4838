from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor
from PySide6.QtCore import Qt

from palette_logic import GRID_COLUMNS, GRID_ROWS, palette_from_hex
from swatches import to_hex

ICON_SEED_COLOR = "#3366cc"


def create_app_icon(seed=ICON_SEED_COLOR):
    """
    Draws the seed color's palette as a tiny 3x5 grid.
    """
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setPen(Qt.NoPen)

    # Rounded dark backing
    painter.setBrush(QColor("#121212"))
    painter.drawRoundedRect(0, 0, size, size, 10, 10)

    margin = 6
    cell_w = (size - 2 * margin) // GRID_COLUMNS
    cell_h = (size - 2 * margin) // GRID_ROWS

    for i, color in enumerate(palette_from_hex(seed)):
        row, col = divmod(i, GRID_COLUMNS)
        painter.setBrush(QColor(to_hex(color)))
        painter.drawRect(margin + col * cell_w, margin + row * cell_h, cell_w - 1, cell_h - 1)

    painter.end()

    return QIcon(pixmap)
