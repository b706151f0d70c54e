# -*- coding: utf-8 -*-
"""
Question Step - Step 2 of the Project Creation Wizard.
"""

from typing import Dict, Any

from PyQt5.QtWidgets import QLabel, QPlainTextEdit

from ui.wizards.framework import BaseStep
from ui.wizards.project_creation.project_context import ProjectContext
from services.translation_manager import tr


class QuestionStep(BaseStep):
    """Step 2: Initial research question."""

    STEP_NUMBER = 2
    STEP_KEY = "question"

    def __init__(self, context: ProjectContext, parent=None):
        super().__init__(context, parent)

    def get_step_title(self) -> str:
        return tr("wizard.step.question")

    def get_step_description(self) -> str:
        return tr("wizard.question.subtitle")

    def setup_ui(self):
        self.add_step_heading()
        layout = self.main_layout

        layout.addWidget(QLabel(tr("wizard.question.label")))
        self.question_input = QPlainTextEdit()
        self.question_input.setPlaceholderText(tr("wizard.question.placeholder"))
        self.question_input.setFixedHeight(110)
        self.question_input.textChanged.connect(
            lambda: self.save_to_context(initial_question=self.question_input.toPlainText())
        )
        layout.addWidget(self.question_input)

        tip = QLabel(tr("wizard.question.tip"))
        tip.setStyleSheet("color: #6B7280;")
        tip.setWordWrap(True)
        layout.addWidget(tip)

        self.add_hint_box(
            tr("wizard.question.good_title"),
            [tr(f"wizard.question.good_{i}") for i in range(1, 5)],
        )
        layout.addStretch()

    def populate_data(self):
        self.question_input.setPlainText(self.context.draft.initial_question)

    def collect_data(self) -> Dict[str, Any]:
        return {"initial_question": self.context.draft.initial_question}
