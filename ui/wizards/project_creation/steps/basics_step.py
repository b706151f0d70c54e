# -*- coding: utf-8 -*-
"""
Basics Step - Step 1 of the Project Creation Wizard.

Collects the project title, description and research field.
"""

from typing import Dict, Any

from PyQt5.QtWidgets import QLabel, QLineEdit, QPlainTextEdit, QComboBox

from ui.wizards.framework import BaseStep
from ui.wizards.project_creation.project_context import ProjectContext
from services.translation_manager import tr
from services.display_mappings import get_research_field_options, get_research_field_description
from utils.logger import get_logger

logger = get_logger(__name__)


class BasicsStep(BaseStep):
    """Step 1: Project title, description and field."""

    STEP_NUMBER = 1
    STEP_KEY = "basics"

    def __init__(self, context: ProjectContext, parent=None):
        super().__init__(context, parent)

    def get_step_title(self) -> str:
        return tr("wizard.step.basics")

    def get_step_description(self) -> str:
        return tr("wizard.basics.subtitle")

    def setup_ui(self):
        """Setup the step's UI."""
        self.add_step_heading()
        layout = self.main_layout

        layout.addWidget(QLabel(tr("wizard.basics.title_label")))
        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText(tr("wizard.basics.title_placeholder"))
        self.title_input.textChanged.connect(lambda text: self.save_to_context(title=text))
        layout.addWidget(self.title_input)

        layout.addWidget(QLabel(tr("wizard.basics.description_label")))
        self.description_input = QPlainTextEdit()
        self.description_input.setPlaceholderText(tr("wizard.basics.description_placeholder"))
        self.description_input.setFixedHeight(100)
        self.description_input.textChanged.connect(
            lambda: self.save_to_context(description=self.description_input.toPlainText())
        )
        layout.addWidget(self.description_input)

        layout.addWidget(QLabel(tr("wizard.basics.field_label")))
        self.field_combo = QComboBox()
        self.field_combo.addItem("", None)
        for research_field, label in get_research_field_options():
            self.field_combo.addItem(label, research_field.value)
        self.field_combo.currentIndexChanged.connect(self._on_field_changed)
        layout.addWidget(self.field_combo)

        self.field_description = QLabel("")
        self.field_description.setStyleSheet("color: #6B7280;")
        layout.addWidget(self.field_description)

        layout.addStretch()

    def _on_field_changed(self, index: int):
        value = self.field_combo.itemData(index)
        self.field_description.setText(get_research_field_description(value) or "")
        self.save_to_context(field=value)

    def populate_data(self):
        """Restore the form from the draft."""
        draft = self.context.draft
        self.title_input.setText(draft.title)
        self.description_input.setPlainText(draft.description)

        index = self.field_combo.findData(draft.field.value) if draft.field else 0
        self.field_combo.setCurrentIndex(max(index, 0))
        self.field_description.setText(get_research_field_description(draft.field) or "")

    def collect_data(self) -> Dict[str, Any]:
        data = self.context.draft.to_dict()
        return {key: data[key] for key in ("title", "description", "field")}
