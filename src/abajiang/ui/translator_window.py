"""Translator Window - Application shell that renders TranslatorState."""

from pathlib import Path

from PySide6.QtCore import Qt, QUrl, Signal
from PySide6.QtGui import QColor, QPalette, QPixmap
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from abajiang.core import FALLBACK_BACKGROUND_COLOR, LANGUAGES, TranslatorState, display_name


class TranslatorWindow(QMainWindow):
    """Emits user intents and repaints itself from TranslatorState.

    Holds no state of its own beyond what the widgets display.
    """

    input_changed = Signal(str)
    source_language_selected = Signal(str)
    target_language_selected = Signal(str)
    swap_requested = Signal()
    translate_requested = Signal()
    clear_requested = Signal()
    # Signal emitted with a file:// URI when the user picks an image
    background_selected = Signal(str)
    background_reset_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Translator")
        self.setGeometry(100, 100, 480, 720)

        self._background_pixmap: QPixmap | None = None
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        # Background layer fills the window; controls sit on top of it
        self.background_label = QLabel(central_widget)
        self.background_label.setScaledContents(True)
        self.background_label.lower()

        self.main_layout = QVBoxLayout(central_widget)

        language_row = QHBoxLayout()
        self.source_combo = self._build_language_combo()
        self.source_combo.activated.connect(
            lambda index: self.source_language_selected.emit(self.source_combo.itemData(index))
        )
        self.swap_button = QPushButton("⇄")
        self.swap_button.clicked.connect(self.swap_requested)
        self.target_combo = self._build_language_combo()
        self.target_combo.activated.connect(
            lambda index: self.target_language_selected.emit(self.target_combo.itemData(index))
        )
        language_row.addWidget(self.source_combo)
        language_row.addWidget(self.swap_button)
        language_row.addWidget(self.target_combo)
        self.main_layout.addLayout(language_row)

        self.input_edit = QPlainTextEdit()
        self.input_edit.setPlaceholderText("Enter text to translate")
        self.input_edit.textChanged.connect(
            lambda: self.input_changed.emit(self.input_edit.toPlainText())
        )
        self.main_layout.addWidget(self.input_edit)

        self.result_label = QLabel()
        self.result_label.setWordWrap(True)
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.result_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.main_layout.addWidget(self.result_label)

        self.translate_button = QPushButton("Translate")
        self.translate_button.clicked.connect(self.translate_requested)
        self.main_layout.addWidget(self.translate_button)

        action_row = QHBoxLayout()
        self.change_background_button = QPushButton("Change background")
        self.change_background_button.clicked.connect(self._on_change_background)
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear_requested)
        self.reset_background_button = QPushButton("Restore background")
        self.reset_background_button.clicked.connect(self.background_reset_requested)
        action_row.addWidget(self.change_background_button)
        action_row.addWidget(self.clear_button)
        action_row.addWidget(self.reset_background_button)
        self.main_layout.addLayout(action_row)

    def _build_language_combo(self) -> QComboBox:
        combo = QComboBox()
        for language in LANGUAGES:
            combo.addItem(language.label, language.code)
        return combo

    def render(self, state: TranslatorState):
        """Bring every widget in line with the given state."""
        if self.input_edit.toPlainText() != state.input_text:
            # Avoid echoing the programmatic change back as user input
            self.input_edit.blockSignals(True)
            self.input_edit.setPlainText(state.input_text)
            self.input_edit.blockSignals(False)

        self._select_code(self.source_combo, state.source_lang)
        self._select_code(self.target_combo, state.target_lang)
        self.source_combo.setToolTip(f"Source language ({display_name(state.source_lang)})")
        self.target_combo.setToolTip(f"Target language ({display_name(state.target_lang)})")

        self.result_label.setText(state.result_text)
        self.translate_button.setText("Translating..." if state.is_translating else "Translate")

        self._render_background(state)

    def _render_background(self, state: TranslatorState):
        if state.has_background:
            self._background_pixmap = QPixmap.fromImage(state.background)
            self.background_label.setPixmap(self._background_pixmap)
            self.background_label.show()
        else:
            self._background_pixmap = None
            self.background_label.clear()
            self.background_label.hide()

        palette = self.centralWidget().palette()
        palette.setColor(QPalette.ColorRole.Window, QColor(FALLBACK_BACKGROUND_COLOR))
        self.centralWidget().setAutoFillBackground(not state.has_background)
        self.centralWidget().setPalette(palette)

    @staticmethod
    def _select_code(combo: QComboBox, code: str):
        index = combo.findData(code)
        if index >= 0 and index != combo.currentIndex():
            combo.setCurrentIndex(index)

    def resizeEvent(self, event):
        """Keep the background layer covering the whole window."""
        super().resizeEvent(event)
        self.background_label.setGeometry(self.centralWidget().rect())

    def _on_change_background(self):
        """Handle the Change background action."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Background Image",
            str(Path.home()),
            "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp)",
        )
        if file_path:
            self.background_selected.emit(QUrl.fromLocalFile(file_path).toString())

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)
