# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for managing wizard state and data.

Provides unified interface for:
- Step validation
- Serialization/deserialization
- State tracking
- Reference number generation
"""

from typing import Dict, Any, Optional
from datetime import datetime
from abc import ABC, abstractmethod
import uuid

from .base_step import StepValidationResult


class WizardContext(ABC):
    """
    Base class for wizard context.

    All wizard contexts should inherit from this class and implement:
    - update_fields(): Merge step edits into the wizard data
    - validate_step(): Validate the data a step is responsible for
    - get_result(): Value handed to the completion callback
    - from_dict(): Restore context from dictionary
    """

    STATUS_DRAFT = "draft"
    STATUS_IN_PROGRESS = "in_progress"
    STATUS_COMPLETED = "completed"
    STATUS_CANCELLED = "cancelled"

    def __init__(self):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = self.STATUS_DRAFT
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step: int = 1
        self.user_id: Optional[str] = None
        self.reference_number: str = self._generate_reference_number()

        # Step completion tracking (1-indexed step numbers)
        self.completed_steps: set = set()

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: WIZ-20260118153045-A3F2

        Override _get_reference_prefix() in subclasses to customize the prefix.
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        prefix = self._get_reference_prefix()
        return f"{prefix}-{timestamp}-{short_id}"

    def _get_reference_prefix(self) -> str:
        """Get the prefix for reference number. Override in subclasses."""
        return "WIZ"

    @property
    def is_finished(self) -> bool:
        """True once the wizard was submitted or cancelled."""
        return self.status in (self.STATUS_COMPLETED, self.STATUS_CANCELLED)

    def touch(self):
        self.updated_at = datetime.now()

    def mark_step_completed(self, step: int):
        """Mark a step as completed."""
        self.completed_steps.add(step)
        self.touch()

    def is_step_completed(self, step: int) -> bool:
        """Check if a step is completed."""
        return step in self.completed_steps

    @abstractmethod
    def update_fields(self, changes: Optional[Dict[str, Any]] = None, **kwargs):
        """
        Shallow-merge several values at once. Last write wins.

        Steps write every edit through this method.
        """
        pass

    @abstractmethod
    def validate_step(self, step: int) -> StepValidationResult:
        """
        Validate the data owned by a 1-indexed step.

        Must be a pure function of the current state.
        """
        pass

    def can_proceed(self, step: int) -> bool:
        """True when the step's validation gate is open."""
        return self.validate_step(step).is_valid

    @abstractmethod
    def get_result(self) -> Any:
        """Value handed to the completion callback on submit."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step": self.current_step,
            "user_id": self.user_id,
            "completed_steps": sorted(self.completed_steps),
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        """
        Restore context from dictionary.

        Subclasses must implement this method.
        """
        pass

    @classmethod
    def _restore_base_fields(cls, context: 'WizardContext', data: Dict[str, Any]):
        """Helper method to restore base fields from dictionary."""
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.reference_number = data.get("reference_number", context.reference_number)
        context.status = data.get("status", cls.STATUS_DRAFT)
        context.current_step = data.get("current_step", 1)
        context.user_id = data.get("user_id")
        context.completed_steps = set(data.get("completed_steps", []))

        # Parse datetime strings
        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
