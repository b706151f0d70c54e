# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Strictly sequential step progression (next/previous)
- Step validation before moving forward
- Completion and cancellation at the boundaries
- Progress tracking

The navigator holds no widgets; views listen to its signals.
"""

from typing import Any, Callable, List, Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import StepValidationResult
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Linear step state machine.

    Steps are 1-indexed. Forward navigation is gated on the context's
    validation of the current step. Submitting the last step or
    cancelling is terminal: every later navigation call is a no-op.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(StepValidationResult)
    completed = pyqtSignal(object)  # context.get_result()
    cancelled = pyqtSignal()

    def __init__(
        self,
        context: WizardContext,
        step_keys: Sequence[str],
        on_complete: Optional[Callable[[Any], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize the navigator.

        Args:
            context: Wizard context that owns the data and validation
            step_keys: Ordered step identifiers
            on_complete: Called once with the result when the last step is submitted.
                Raised exceptions propagate out of next_step().
            on_cancel: Called once when the wizard is cancelled. Raised exceptions
                propagate out of cancel() and previous_step().
        """
        super().__init__()
        if not step_keys:
            raise ValueError("A wizard needs at least one step")

        self.context = context
        self.step_keys: List[str] = list(step_keys)
        self.context.current_step = 1

        # Invoked directly after the signal; exceptions propagate to the caller
        self._on_complete = on_complete
        self._on_cancel = on_cancel

    @property
    def current_step(self) -> int:
        return self.context.current_step

    @property
    def is_finished(self) -> bool:
        return self.context.is_finished

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.step_keys)

    def get_step_key(self, step: Optional[int] = None) -> str:
        """Key of the given step (defaults to the current one)."""
        step = self.current_step if step is None else step
        return self.step_keys[step - 1]

    def is_last_step(self) -> bool:
        return self.current_step == len(self.step_keys)

    def validate(self, step: Optional[int] = None) -> StepValidationResult:
        """Validation result for a step (defaults to the current one)."""
        return self.context.validate_step(self.current_step if step is None else step)

    def can_proceed(self, step: Optional[int] = None) -> bool:
        """Whether the validation gate of a step is open."""
        return self.validate(step).is_valid

    def can_go_next(self) -> bool:
        """Check if the Next/Submit control should be enabled."""
        return not self.is_finished and self.can_proceed()

    def can_go_previous(self) -> bool:
        """Check if there is an earlier step to go back to."""
        return not self.is_finished and self.current_step > 1

    def next_step(self) -> bool:
        """
        Move forward, or submit on the last step.

        Returns:
            True if the step advanced or the wizard completed
        """
        if self.is_finished:
            logger.debug(f"Ignoring next: wizard already {self.context.status}")
            return False

        step = self.current_step
        validation_result = self.validate(step)
        if not validation_result.is_valid:
            logger.warning(f"Step {step} validation failed: {validation_result.errors}")
            self.validation_failed.emit(validation_result)
            return False

        self.context.mark_step_completed(step)

        if self.is_last_step():
            self._complete()
            return True

        self.context.status = WizardContext.STATUS_IN_PROGRESS
        logger.info(f"Navigating: Step {step} → {step + 1}")
        self._navigate_to(step + 1)
        return True

    def previous_step(self) -> bool:
        """
        Move back one step; on the first step this cancels the wizard.

        Returns:
            True if the step moved back or the wizard was cancelled
        """
        if self.is_finished:
            logger.debug(f"Ignoring previous: wizard already {self.context.status}")
            return False

        if self.current_step == 1:
            logger.info("Previous pressed on first step, cancelling wizard")
            return self.cancel()

        step = self.current_step
        logger.info(f"Navigating back: Step {step} → {step - 1}")
        self._navigate_to(step - 1)
        return True

    def cancel(self) -> bool:
        """Cancel the wizard from any step."""
        if self.is_finished:
            return False

        logger.info(f"Wizard {self.context.reference_number} cancelled at step {self.current_step}")
        self.context.status = WizardContext.STATUS_CANCELLED
        self.context.touch()
        self._emit_navigation_state()
        self.cancelled.emit()
        if self._on_cancel is not None:
            self._on_cancel()
        return True

    def _complete(self):
        """Hand the result to listeners; the step itself does not change."""
        logger.info(f"Wizard {self.context.reference_number} completed")
        self.context.status = WizardContext.STATUS_COMPLETED
        self.context.touch()
        result = self.context.get_result()
        self._emit_navigation_state()
        self.completed.emit(result)
        if self._on_complete is not None:
            self._on_complete(result)

    def _navigate_to(self, new_step: int):
        old_step = self.current_step
        self.context.current_step = new_step
        self.context.touch()

        self.step_changed.emit(old_step, new_step)
        self._emit_navigation_state()
        logger.debug(f"Step {new_step} ({self.get_step_key(new_step)}) is now active")

    def _emit_navigation_state(self):
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

    def refresh(self):
        """Re-evaluate the gates after the data changed."""
        self._emit_navigation_state()

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Step 1 of 5 reports 20.0, the last step reports 100.0.
        """
        return (self.current_step / len(self.step_keys)) * 100.0

    def get_completed_steps_count(self) -> int:
        """Get number of completed steps."""
        return len(self.context.completed_steps)
