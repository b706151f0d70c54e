# -*- coding: utf-8 -*-
"""
Objectives Step - Step 3 of the Project Creation Wizard.

Allows user to:
- Add objectives (each starts blank)
- Edit objectives in place
- Remove objectives
"""

from typing import Dict, Any, List

from PyQt5.QtWidgets import QLabel, QLineEdit, QHBoxLayout, QVBoxLayout, QWidget

from ui.components.action_button import ActionButton
from ui.wizards.framework import BaseStep
from ui.wizards.project_creation.project_context import ProjectContext
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ObjectivesStep(BaseStep):
    """Step 3: Ordered list of research objectives."""

    STEP_NUMBER = 3
    STEP_KEY = "objectives"

    def __init__(self, context: ProjectContext, parent=None):
        super().__init__(context, parent)
        self.objective_inputs: List[QLineEdit] = []

    def get_step_title(self) -> str:
        return tr("wizard.step.objectives")

    def get_step_description(self) -> str:
        return tr("wizard.objectives.subtitle")

    def setup_ui(self):
        self.add_step_heading()
        layout = self.main_layout

        layout.addWidget(QLabel(tr("wizard.objectives.label")))
        help_label = QLabel(tr("wizard.objectives.help"))
        help_label.setStyleSheet("color: #6B7280;")
        layout.addWidget(help_label)

        self.rows_container = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_container)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(8)
        layout.addWidget(self.rows_container)

        self.btn_add = ActionButton(tr("wizard.objectives.add"), variant="ghost", width=None, height=36)
        self.btn_add.clicked.connect(self._add_objective)
        layout.addWidget(self.btn_add)

        self.add_hint_box(
            tr("wizard.objectives.examples_title"),
            [tr(f"wizard.objectives.example_{i}") for i in range(1, 5)],
            color="#EDE9FE",
        )
        layout.addStretch()

    # =========================================================================
    # Rows
    # =========================================================================

    def _rebuild_rows(self):
        """Recreate one row per objective, in draft order."""
        while self.rows_layout.count():
            item = self.rows_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self.objective_inputs = []

        for index, objective in enumerate(self.context.draft.objectives):
            self.rows_layout.addWidget(self._create_row(index, objective))

    def _create_row(self, index: int, text: str) -> QWidget:
        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)

        line_edit = QLineEdit()
        line_edit.setPlaceholderText(tr("wizard.objectives.placeholder", number=index + 1))
        line_edit.setText(text)
        # Connected after setText so filling the row is not an edit
        line_edit.textChanged.connect(lambda value, i=index: self._update_objective(i, value))
        row_layout.addWidget(line_edit, 1)

        btn_remove = ActionButton(tr("wizard.objectives.remove"), variant="danger", width=None, height=36)
        btn_remove.clicked.connect(lambda _checked=False, i=index: self._remove_objective(i))
        row_layout.addWidget(btn_remove)

        self.objective_inputs.append(line_edit)
        return row

    def _add_objective(self):
        self.context.add_objective()
        self.rows_layout.addWidget(
            self._create_row(len(self.context.draft.objectives) - 1, "")
        )
        self.objective_inputs[-1].setFocus()
        self.notify_data_changed({"objectives": list(self.context.draft.objectives)})

    def _update_objective(self, index: int, value: str):
        if self._populating:
            return
        self.context.update_objective(index, value)
        self.notify_data_changed({"objectives": list(self.context.draft.objectives)})

    def _remove_objective(self, index: int):
        logger.debug(f"Removing objective {index + 1}")
        self.context.remove_objective(index)
        # Indices after the removed row shifted, so rebind every row
        self._rebuild_rows()
        self.notify_data_changed({"objectives": list(self.context.draft.objectives)})

    def populate_data(self):
        self._rebuild_rows()

    def collect_data(self) -> Dict[str, Any]:
        return {"objectives": list(self.context.draft.objectives)}
