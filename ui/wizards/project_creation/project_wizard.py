# -*- coding: utf-8 -*-
"""
Project Creation Wizard.

Multi-step wizard for creating a research project, built on the
unified Wizard Framework.

Steps:
1. Project Basics - Title, description and research field
2. Research Question - Initial question
3. Research Objectives - Ordered list of goals
4. Timeline & Significance - Dates and why the research matters
5. Prior Knowledge - What the researcher already knows
"""

from typing import Callable, List, Optional

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from models.project_draft import ProjectDraft
from ui.wizards.framework import BaseWizard, BaseStep, with_error_boundary
from ui.wizards.project_creation.project_context import ProjectContext
from ui.wizards.project_creation.steps import (
    BasicsStep,
    QuestionStep,
    ObjectivesStep,
    TimelineStep,
    PriorKnowledgeStep
)
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectWizard(BaseWizard):
    """
    Research project creation wizard.

    The finished draft is emitted once through `project_created` and
    passed to `on_complete`; persisting it is the receiver's job.
    """

    project_created = pyqtSignal(object)  # ProjectDraft
    project_cancelled = pyqtSignal()

    def __init__(
        self,
        on_complete: Optional[Callable[[ProjectDraft], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        context: Optional[ProjectContext] = None,
        parent=None
    ):
        """Initialize the wizard."""
        self._initial_context = context
        self._on_complete_callback = on_complete
        self._on_cancel_callback = on_cancel
        super().__init__(parent)

        self.setWindowTitle(tr("wizard.project.title"))
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        self.wizard_completed.connect(self._on_project_created)
        self.wizard_cancelled.connect(self._on_project_cancelled)

        logger.info(f"Project wizard opened ({self.context.reference_number})")

    def create_context(self) -> ProjectContext:
        """Create and return wizard context."""
        return self._initial_context if self._initial_context is not None else ProjectContext()

    def create_steps(self) -> List[BaseStep]:
        """Create and return list of wizard steps."""
        return [
            BasicsStep(self.context, self),
            QuestionStep(self.context, self),
            ObjectivesStep(self.context, self),
            TimelineStep(self.context, self),
            PriorKnowledgeStep(self.context, self)
        ]

    def get_wizard_title(self) -> str:
        return tr("wizard.project.title")

    def get_submit_button_text(self) -> str:
        return tr("wizard.button.create_project")

    @with_error_boundary("Project Wizard", "creating the project")
    def _on_project_created(self, draft: ProjectDraft):
        logger.info(f"Project '{draft.title}' ready ({self.context.reference_number})")
        self.project_created.emit(draft)
        if self._on_complete_callback is not None:
            self._on_complete_callback(draft)

    @with_error_boundary("Project Wizard", "cancelling")
    def _on_project_cancelled(self):
        self.project_cancelled.emit()
        if self._on_cancel_callback is not None:
            self._on_cancel_callback()
