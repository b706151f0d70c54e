# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Navigation buttons for multi-step forms.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from ui.components.action_button import ActionButton
from services.translation_manager import tr


class WizardFooter(QWidget):
    """
    Reusable wizard footer component.

    Cancel sits on the left, Previous and Next on the right. Cancel and
    Previous are separate controls.

    Signals:
        previous_clicked: Emitted when Previous button is clicked
        next_clicked: Emitted when Next button is clicked
        cancel_clicked: Emitted when Cancel button is clicked
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    cancel_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet("""
            QWidget {
                background-color: #f8f9fa;
                border-top: 1px solid #dee2e6;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = ActionButton(tr("button.cancel"), variant="secondary")
        self.btn_cancel.clicked.connect(self.cancel_clicked.emit)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = ActionButton(tr("wizard.button.previous"), variant="secondary")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(tr("wizard.button.next"), variant="primary", width=140)
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_next_enabled(self, enabled: bool):
        """Enable/disable next button."""
        self.btn_next.setEnabled(enabled)

    def set_previous_enabled(self, enabled: bool):
        """Enable/disable previous button."""
        self.btn_previous.setEnabled(enabled)

    def set_cancel_enabled(self, enabled: bool):
        self.btn_cancel.setEnabled(enabled)

    def set_next_text(self, text: str):
        """Update next button text."""
        self.btn_next.setText(text)
