# -*- coding: utf-8 -*-
"""
Timeline Step - Step 4 of the Project Creation Wizard.

Start date, expected completion and the significance of the research.
"""

from datetime import date
from typing import Dict, Any

from PyQt5.QtWidgets import QLabel, QDateEdit, QPlainTextEdit, QGridLayout
from PyQt5.QtCore import QDate

from models.project_draft import Timeframe
from ui.wizards.framework import BaseStep
from ui.wizards.project_creation.project_context import ProjectContext
from services.translation_manager import tr


def _to_qdate(value: date) -> QDate:
    return QDate(value.year, value.month, value.day)


class TimelineStep(BaseStep):
    """Step 4: Timeframe and significance."""

    STEP_NUMBER = 4
    STEP_KEY = "timeline"

    def __init__(self, context: ProjectContext, parent=None):
        super().__init__(context, parent)

    def get_step_title(self) -> str:
        return tr("wizard.step.timeline")

    def get_step_description(self) -> str:
        return tr("wizard.timeline.subtitle")

    def setup_ui(self):
        self.add_step_heading()
        layout = self.main_layout

        dates = QGridLayout()
        dates.setHorizontalSpacing(16)
        dates.addWidget(QLabel(tr("wizard.timeline.start_label")), 0, 0)
        dates.addWidget(QLabel(tr("wizard.timeline.completion_label")), 0, 1)

        self.start_date_input = QDateEdit()
        self.start_date_input.setCalendarPopup(True)
        self.start_date_input.setDisplayFormat("yyyy-MM-dd")
        self.start_date_input.dateChanged.connect(self._on_dates_changed)
        dates.addWidget(self.start_date_input, 1, 0)

        self.completion_date_input = QDateEdit()
        self.completion_date_input.setCalendarPopup(True)
        self.completion_date_input.setDisplayFormat("yyyy-MM-dd")
        self.completion_date_input.dateChanged.connect(self._on_dates_changed)
        dates.addWidget(self.completion_date_input, 1, 1)
        layout.addLayout(dates)

        layout.addWidget(QLabel(tr("wizard.timeline.significance_label")))
        self.significance_input = QPlainTextEdit()
        self.significance_input.setPlaceholderText(tr("wizard.timeline.significance_placeholder"))
        self.significance_input.setFixedHeight(110)
        self.significance_input.textChanged.connect(
            lambda: self.save_to_context(significance=self.significance_input.toPlainText())
        )
        layout.addWidget(self.significance_input)

        self.warning_label = QLabel("")
        self.warning_label.setStyleSheet("color: #B45309;")
        layout.addWidget(self.warning_label)

        layout.addStretch()

    def _on_dates_changed(self, _qdate=None):
        self.save_to_context(timeframe=Timeframe(
            start_date=self.start_date_input.date().toPyDate(),
            expected_completion=self.completion_date_input.date().toPyDate(),
        ))
        self._refresh_warnings()

    def _refresh_warnings(self):
        lines = list(self.validate().warnings)
        if self.context.draft.timeframe is None:
            # The editors show default dates that are not saved yet
            lines.insert(0, tr("wizard.timeline.pick_dates"))
        self.warning_label.setText("\n".join(lines))

    def populate_data(self):
        draft = self.context.draft
        # Shown only; an unset timeframe stays unset until a date is picked
        timeframe = draft.timeframe or Timeframe.default()
        self.start_date_input.setDate(_to_qdate(timeframe.start_date))
        self.completion_date_input.setDate(_to_qdate(timeframe.expected_completion))
        self.significance_input.setPlainText(draft.significance)
        self._refresh_warnings()

    def collect_data(self) -> Dict[str, Any]:
        data = self.context.draft.to_dict()
        return {"timeframe": data["timeframe"], "significance": data["significance"]}
