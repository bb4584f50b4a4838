STYLESHEET = """
QMainWindow {
    background-color: #121212;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

/* Labels */
QLabel {
    color: #e0e0e0;
}

QLabel#SectionTitle {
    font-weight: bold;
    font-size: 15px;
    margin-top: 8px;
    margin-bottom: 4px;
    color: #ffffff;
}

QLabel#ErrorLabel {
    color: #ff6b6b;
    font-size: 12px;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 11px;
    color: #aaaaaa;
}

/* Base color input */
QLineEdit#ColorInput {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 6px;
    font-family: monospace;
    color: #ffffff;
}

QLineEdit#ColorInput:focus {
    border-color: #666666;
}

/* Warmth slider */
QSlider::groove:horizontal {
    height: 6px;
    border-radius: 3px;
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #4a90e2, stop:1 #e2784a);
}

QSlider::handle:horizontal {
    background: #ffffff;
    width: 16px;
    margin: -6px 0;
    border-radius: 8px;
}

/* Color Swatches */
QFrame#Swatch {
    border-radius: 6px;
    border: 1px solid #333333;
}

QFrame#BaseSwatch {
    border-radius: 6px;
}

/* Selected Preview Area */
QFrame#PreviewFrame {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
}

QWidget#PaletteContainer {
    background-color: #121212;
}
"""
