from __future__ import annotations

from PyQt6.QtWidgets import QApplication


THEME_QSS = """
QWidget {
    color: #ffffff;
    font-size: 13px;
}

QMainWindow, QDialog {
    background: #1c1b22;
}

QLabel, QCheckBox {
    background: transparent;
}

QToolTip {
    background-color: #2a2933;
    color: #f2f0f5;
    border: none;
    border-radius: 8px;
    padding: 6px 8px;
}

QLabel#TimerLabel {
    font-size: 72px;
    font-weight: 200;
    font-family: "Menlo", "DejaVu Sans Mono", monospace;
}

QLabel#OverlayTimerLabel {
    font-weight: 200;
    font-family: "Menlo", "DejaVu Sans Mono", monospace;
}

QLabel#FloatingTimerLabel {
    font-size: 32px;
    font-weight: 200;
    font-family: "Menlo", "DejaVu Sans Mono", monospace;
}

QLabel#SessionLine, QLabel#MutedText {
    color: rgba(255, 255, 255, 180);
}

QLabel#DateLabel {
    font-size: 16px;
    color: rgba(255, 255, 255, 180);
}

QLabel#CompletionMessage {
    font-size: 48px;
    font-weight: 500;
}

QPushButton {
    border: none;
    background: rgba(255, 255, 255, 40);
    border-radius: 14px;
    padding: 6px 14px;
    font-weight: 600;
}

QPushButton:hover {
    background: rgba(255, 255, 255, 60);
}

QPushButton:checked {
    background: rgba(255, 255, 255, 90);
}

QPushButton#RoundButton {
    border-radius: 16px;
    min-width: 32px;
    max-width: 32px;
    min-height: 32px;
    max-height: 32px;
    padding: 0;
}

QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox {
    background: #2a2933;
    border: none;
    border-radius: 10px;
    padding: 5px 8px;
    min-height: 22px;
}

QComboBox::drop-down {
    border: none;
    width: 18px;
}

QSlider::groove:horizontal {
    height: 4px;
    background: #3a3944;
    border-radius: 2px;
}

QSlider::handle:horizontal {
    background: #2f6fed;
    width: 14px;
    margin: -5px 0;
    border-radius: 7px;
}

QCheckBox::indicator {
    width: 16px;
    height: 16px;
    border-radius: 8px;
    background: #2a2933;
}

QCheckBox::indicator:checked {
    background: #2f6fed;
}
"""


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
