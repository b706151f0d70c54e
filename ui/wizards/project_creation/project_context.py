# -*- coding: utf-8 -*-
"""
Project Context - Manages state and data for the project creation wizard.

This context extends WizardContext with a single ProjectDraft and the
operations the steps use to edit it:
- Shallow field merge
- Objective list editing
- Per-step validation gates
"""

import copy
from typing import Any, Callable, Dict, Optional

from app.config import Config
from models.project_draft import DRAFT_FIELDS, ProjectDraft, ResearchField, Timeframe
from services.exceptions import ValidationException
from services.translation_manager import tr
from ui.wizards.framework import StepNavigator, StepValidationResult, WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


# Ordered step keys; position + 1 is the step number
PROJECT_STEPS = (
    "basics",
    "question",
    "objectives",
    "timeline",
    "prior_knowledge",
)


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _is_empty(value: Optional[str]) -> bool:
    return not value


class ProjectContext(WizardContext):
    """Context for the research project creation wizard."""

    def __init__(self, draft: Optional[ProjectDraft] = None):
        """Initialize project context."""
        super().__init__()
        self.draft: ProjectDraft = draft if draft is not None else ProjectDraft()

    def _get_reference_prefix(self) -> str:
        """Override to use project-specific prefix."""
        return "PRJ"

    # =========================================================================
    # Field mutation
    # =========================================================================

    def update_fields(self, changes: Optional[Dict[str, Any]] = None, **kwargs):
        """
        Shallow-merge values into the draft. Last write wins.

        Raises:
            ValidationException: for a key the draft does not have, or a
                research field outside the enumerated set, or a plain string
                for objectives
        """
        merged = dict(changes or {}, **kwargs)
        unknown = sorted(set(merged) - set(DRAFT_FIELDS))
        if unknown:
            raise ValidationException(
                f"Unknown draft field(s): {', '.join(unknown)}",
                errors=unknown,
                context="project_draft",
            )
        if isinstance(merged.get("objectives"), str):
            raise ValidationException(
                "Objectives must be a list of strings",
                field="objectives",
                context="project_draft",
            )

        # A rejected value leaves the draft untouched
        coerced = {}
        for key, value in merged.items():
            if key == "field":
                value = ResearchField.parse(value)
            elif key == "timeframe" and isinstance(value, dict):
                value = Timeframe.from_dict(value)
            elif key == "objectives":
                value = list(value)
            coerced[key] = value

        for key, value in coerced.items():
            setattr(self.draft, key, value)

        self.touch()

    def add_objective(self):
        """Append one empty objective."""
        self.draft.objectives.append("")
        self.touch()

    def update_objective(self, index: int, value: str):
        """Replace the objective at `index`."""
        self._check_objective_index(index)
        self.draft.objectives[index] = value
        self.touch()

    def remove_objective(self, index: int):
        """Remove the objective at `index`; later objectives shift down."""
        self._check_objective_index(index)
        del self.draft.objectives[index]
        self.touch()

    def _check_objective_index(self, index: int):
        # Negative indices are rejected rather than counted from the end
        if not 0 <= index < len(self.draft.objectives):
            raise IndexError(
                f"Objective index {index} out of range (0-{len(self.draft.objectives) - 1})"
            )

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_step(self, step: int) -> StepValidationResult:
        """Validation gate for a 1-indexed step. Pure function of the draft."""
        result = StepValidationResult(is_valid=True)
        draft = self.draft

        if step == 1:
            if _is_empty(draft.title):
                result.add_error(tr("validation.title_required"))
            if _is_empty(draft.description):
                result.add_error(tr("validation.description_required"))
            if draft.field is None:
                result.add_error(tr("validation.field_required"))

        elif step == 2:
            if len((draft.initial_question or "").strip()) <= Config.QUESTION_MIN_LENGTH:
                result.add_error(
                    tr("validation.question_too_short", min_length=Config.QUESTION_MIN_LENGTH)
                )

        elif step == 3:
            if not draft.objectives:
                result.add_error(tr("validation.objectives_required"))
            for number, objective in enumerate(draft.objectives, start=1):
                if _is_blank(objective):
                    result.add_error(tr("validation.objective_blank", number=number))

        elif step == 4:
            timeframe = draft.timeframe
            if timeframe is None or timeframe.start_date is None or timeframe.expected_completion is None:
                result.add_error(tr("validation.timeframe_required"))
            elif timeframe.expected_completion < timeframe.start_date:
                result.add_warning(tr("validation.completion_before_start"))
            if _is_empty(draft.significance):
                result.add_error(tr("validation.significance_required"))

        elif step == 5:
            if _is_empty(draft.prior_knowledge):
                result.add_error(tr("validation.prior_knowledge_required"))

        else:
            result.add_error(tr("validation.unknown_step", step=step))

        return result

    def get_result(self) -> ProjectDraft:
        """The draft, copied so later edits cannot reach the receiver."""
        return copy.deepcopy(self.draft)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        base_data = super().to_dict()
        base_data["draft"] = self.draft.to_dict()
        return base_data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectContext':
        """Restore context from dictionary."""
        draft_data = data.get("draft")
        ctx = cls(draft=ProjectDraft.from_dict(draft_data) if draft_data else None)
        cls._restore_base_fields(ctx, data)
        logger.debug(f"Restored project context {ctx.reference_number}")
        return ctx


def create_project_navigator(
    on_complete: Optional[Callable[[ProjectDraft], None]] = None,
    on_cancel: Optional[Callable[[], None]] = None,
    context: Optional[ProjectContext] = None,
) -> StepNavigator:
    """
    Build the five-step project creation state machine.

    `on_complete` receives a copy of the finished draft; `on_cancel` is
    called with no arguments.
    """
    context = context if context is not None else ProjectContext()
    return StepNavigator(context, PROJECT_STEPS, on_complete=on_complete, on_cancel=on_cancel)
