# -*- coding: utf-8 -*-
"""
Wizard Header Component - Title and progress for multi-step forms.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar
from PyQt5.QtGui import QFont

from services.translation_manager import tr


class WizardHeader(QWidget):
    """
    Reusable wizard header component.

    Shows the wizard title, "Step N of M", the percentage complete and a
    thin progress bar.
    """

    def __init__(self, title: str, parent=None):
        super().__init__(parent)
        self.title_text = title
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet("""
            QWidget {
                background-color: #f8f9fa;
                border-bottom: 1px solid #dee2e6;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.title_text)
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        labels_row = QHBoxLayout()
        self.progress_label = QLabel("")
        self.percent_label = QLabel("")
        labels_row.addWidget(self.progress_label)
        labels_row.addStretch()
        labels_row.addWidget(self.percent_label)
        layout.addLayout(labels_row)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet("""
            QProgressBar {
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }
            QProgressBar::chunk {
                background-color: #2563EB;
                border-radius: 3px;
            }
        """)
        layout.addWidget(self.progress_bar)

    def set_title(self, title: str):
        """Update title text."""
        self.title_text = title
        self.title_label.setText(title)

    def set_progress(self, current: int, total: int, percentage: float):
        """Show step `current` of `total` at `percentage` complete."""
        percent = round(percentage)
        self.progress_label.setText(tr("wizard.progress.step", current=current, total=total))
        self.percent_label.setText(tr("wizard.progress.percent", percent=percent))
        self.progress_bar.setValue(percent)
