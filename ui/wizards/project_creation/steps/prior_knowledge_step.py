# -*- coding: utf-8 -*-
"""
Prior Knowledge Step - Step 5 (final) of the Project Creation Wizard.
"""

from typing import Dict, Any

from PyQt5.QtWidgets import QLabel, QPlainTextEdit

from ui.wizards.framework import BaseStep
from ui.wizards.project_creation.project_context import ProjectContext
from services.translation_manager import tr


class PriorKnowledgeStep(BaseStep):
    """Step 5: What the researcher already knows."""

    STEP_NUMBER = 5
    STEP_KEY = "prior_knowledge"

    def __init__(self, context: ProjectContext, parent=None):
        super().__init__(context, parent)

    def get_step_title(self) -> str:
        return tr("wizard.step.prior_knowledge")

    def get_step_description(self) -> str:
        return tr("wizard.prior_knowledge.subtitle")

    def setup_ui(self):
        self.add_step_heading()
        layout = self.main_layout

        layout.addWidget(QLabel(tr("wizard.prior_knowledge.label")))
        self.prior_knowledge_input = QPlainTextEdit()
        self.prior_knowledge_input.setPlaceholderText(tr("wizard.prior_knowledge.placeholder"))
        self.prior_knowledge_input.setFixedHeight(150)
        self.prior_knowledge_input.textChanged.connect(
            lambda: self.save_to_context(prior_knowledge=self.prior_knowledge_input.toPlainText())
        )
        layout.addWidget(self.prior_knowledge_input)

        self.add_hint_box(
            tr("wizard.prior_knowledge.ready_title"),
            [tr("wizard.prior_knowledge.ready_text")],
            color="#DCFCE7",
        )
        layout.addStretch()

    def populate_data(self):
        self.prior_knowledge_input.setPlainText(self.context.draft.prior_knowledge)

    def collect_data(self) -> Dict[str, Any]:
        return {"prior_knowledge": self.context.draft.prior_knowledge}
