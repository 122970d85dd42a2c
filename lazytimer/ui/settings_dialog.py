from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QSlider,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from lazytimer.core.app_state import AppState
from lazytimer.core.assets import forget_image
from lazytimer.core.completion import CompletionAction
from lazytimer.core.gradients import KIND_IMAGE
from lazytimer.core.settings import (
    LONG_BREAK_MINUTES_RANGE,
    SHORT_BREAK_MINUTES_RANGE,
    SUBTITLE_FONTS,
    SettingsError,
    TimerPosition,
    WORK_MINUTES_RANGE,
)
from lazytimer.core.timer import TimerEngine


class SettingsDialog(QDialog):
    """Edits the in-memory settings; every change applies immediately."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.resize(420, 560)
        self.engine = engine
        self.app_state: AppState = engine.app_state

        layout = QVBoxLayout(self)
        layout.addWidget(self._build_durations())
        layout.addWidget(self._build_overlay())
        layout.addWidget(self._build_background())
        layout.addWidget(self._build_completion())
        layout.addStretch()

        self._sync_visibility()

    def _build_durations(self) -> QGroupBox:
        box = QGroupBox("Pomodoro")
        form = QFormLayout(box)
        settings = self.app_state.settings
        for key, title, bounds in (
            ("work_minutes", "Work", WORK_MINUTES_RANGE),
            ("short_break_minutes", "Short Break", SHORT_BREAK_MINUTES_RANGE),
            ("long_break_minutes", "Long Break", LONG_BREAK_MINUTES_RANGE),
        ):
            spin = QSpinBox()
            spin.setRange(*bounds)
            spin.setSuffix(" min")
            spin.setValue(getattr(settings, key))
            spin.valueChanged.connect(lambda value, k=key: self._save(k, value))
            form.addRow(f"{title}:", spin)
        return box

    def _build_overlay(self) -> QGroupBox:
        box = QGroupBox("Overlay")
        form = QFormLayout(box)
        settings = self.app_state.settings

        opacity = QSlider(Qt.Orientation.Horizontal)
        opacity.setRange(10, 100)
        opacity.setSingleStep(5)
        opacity.setValue(round(settings.overlay_opacity * 100))
        opacity.valueChanged.connect(lambda value: self._save("overlay_opacity", value / 100))
        form.addRow("Opacity:", opacity)

        position = QComboBox()
        position.addItems([p.value for p in TimerPosition])
        position.setCurrentText(settings.overlay_position.value)
        position.currentTextChanged.connect(lambda text: self._save("overlay_position", TimerPosition(text)))
        form.addRow("Timer Position:", position)

        subtitle = QLineEdit(settings.subtitle_text)
        subtitle.setPlaceholderText("Enter text to show under timer...")
        subtitle.textChanged.connect(lambda text: self._save("subtitle_text", text))
        form.addRow("Subtitle:", subtitle)

        font_size = QSlider(Qt.Orientation.Horizontal)
        font_size.setRange(12, 72)
        font_size.setSingleStep(2)
        font_size.setValue(int(settings.subtitle_font_size))
        font_size.valueChanged.connect(lambda value: self._save("subtitle_font_size", float(value)))
        form.addRow("Font Size:", font_size)

        font_name = QComboBox()
        font_name.addItems(list(SUBTITLE_FONTS))
        font_name.setCurrentText(settings.subtitle_font_name)
        font_name.currentTextChanged.connect(lambda text: self._save("subtitle_font_name", text))
        form.addRow("Font:", font_name)

        styles = QHBoxLayout()
        bold = QCheckBox("Bold")
        bold.setChecked(settings.subtitle_bold)
        bold.toggled.connect(lambda checked: self._save("subtitle_bold", checked))
        italic = QCheckBox("Italic")
        italic.setChecked(settings.subtitle_italic)
        italic.toggled.connect(lambda checked: self._save("subtitle_italic", checked))
        styles.addWidget(bold)
        styles.addWidget(italic)
        styles.addStretch()
        form.addRow("", styles)
        return box

    def _build_background(self) -> QGroupBox:
        box = QGroupBox("Background")
        form = QFormLayout(box)

        self.gradient_combo = QComboBox()
        for preset in self.app_state.gradient_presets:
            self.gradient_combo.addItem(preset.name)
        self.gradient_combo.setCurrentText(self.app_state.selected_gradient.name)
        self.gradient_combo.currentIndexChanged.connect(self._on_gradient_selected)
        form.addRow("Preset:", self.gradient_combo)

        self.image_row = QWidget()
        image_layout = QHBoxLayout(self.image_row)
        image_layout.setContentsMargins(0, 0, 0, 0)
        self.image_path = QLineEdit(self.app_state.settings.custom_image_path)
        self.image_path.setReadOnly(True)
        browse = QPushButton("Choose…")
        browse.clicked.connect(self._choose_image)
        image_layout.addWidget(self.image_path, 1)
        image_layout.addWidget(browse)
        form.addRow("Image:", self.image_row)
        return box

    def _build_completion(self) -> QGroupBox:
        box = QGroupBox("When Timer Completes")
        form = QFormLayout(box)
        settings = self.app_state.settings

        self.action_combo = QComboBox()
        self.action_combo.addItems([a.value for a in CompletionAction])
        self.action_combo.setCurrentText(settings.completion_action.value)
        self.action_combo.currentTextChanged.connect(self._on_action_selected)
        form.addRow("Action:", self.action_combo)

        self.message_edit = QLineEdit(settings.completion_text)
        self.message_edit.setPlaceholderText("Enter message...")
        self.message_edit.textChanged.connect(lambda text: self._save("completion_text", text))
        form.addRow("Message:", self.message_edit)

        self.sound_row = QWidget()
        sound_layout = QHBoxLayout(self.sound_row)
        sound_layout.setContentsMargins(0, 0, 0, 0)
        self.sound_path = QLineEdit(settings.completion_sound_path)
        self.sound_path.setPlaceholderText("Sound file path...")
        self.sound_path.textChanged.connect(lambda text: self._save("completion_sound_path", text))
        browse = QPushButton("Choose…")
        browse.clicked.connect(self._choose_sound)
        sound_layout.addWidget(self.sound_path, 1)
        sound_layout.addWidget(browse)
        form.addRow("Sound:", self.sound_row)

        test = QPushButton("Test Action")
        test.clicked.connect(self.engine.test_completion_action)
        form.addRow("", test)
        return box

    def _save(self, key: str, value: object) -> None:
        try:
            self.app_state.save_setting(key, value)
        except SettingsError as error:
            QMessageBox.warning(self, "Settings", str(error))

    def _on_gradient_selected(self, index: int) -> None:
        self._save("selected_gradient_index", index)
        self._sync_visibility()

    def _on_action_selected(self, text: str) -> None:
        self._save("completion_action", CompletionAction(text))
        self._sync_visibility()

    def _choose_image(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Choose Image", "", "Images (*.png *.jpg *.jpeg *.bmp *.gif)")
        if path:
            forget_image(path)
            self.image_path.setText(path)
            self._save("custom_image_path", path)

    def _choose_sound(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Choose Sound", "", "Audio (*.wav *.mp3 *.aiff *.m4a *.ogg)")
        if path:
            self.sound_path.setText(path)

    def _sync_visibility(self) -> None:
        action = self.app_state.settings.completion_action
        self.message_edit.setEnabled(action in {CompletionAction.SPEAK_TEXT, CompletionAction.SHOW_MESSAGE})
        self.sound_row.setEnabled(action == CompletionAction.PLAY_SOUND)
        self.image_row.setEnabled(self.app_state.selected_gradient.kind == KIND_IMAGE)
