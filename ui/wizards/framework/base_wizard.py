# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and progress
- Step container
- Navigation buttons (Cancel, Previous, Next/Submit)
- Next button gated on the current step's validation
"""

from typing import List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QStackedWidget
from PyQt5.QtCore import pyqtSignal

from .base_step import BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from .error_boundary import with_error_boundary
from ui.components.wizard_header import WizardHeader
from ui.components.wizard_footer import WizardFooter
from services.translation_manager import tr, get_layout_direction
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_steps(): Create and return list of wizard steps
    - create_context(): Create and return wizard context
    """

    # Signals
    wizard_completed = pyqtSignal(object)  # context.get_result()
    wizard_cancelled = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)
        self.setLayoutDirection(get_layout_direction())

        # Initialize context and steps
        self.context = self.create_context()
        self.steps = self.create_steps()

        # Create navigator
        self.navigator = StepNavigator(self.context, [step.STEP_KEY for step in self.steps])

        # Connect navigator signals
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.can_go_next_changed.connect(self._update_navigation_buttons)
        self.navigator.can_go_previous_changed.connect(self._update_navigation_buttons)
        self.navigator.completed.connect(self._on_completed)
        self.navigator.cancelled.connect(self._on_cancelled)

        # Re-evaluate the Next gate after every field edit
        for step in self.steps:
            step.step_data_changed.connect(self._on_step_data_changed)

        # Setup UI
        self._setup_ui()

        # Show first step
        self._show_step(self.navigator.current_step)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """
        Create and return list of wizard steps.

        Returns:
            List of BaseStep instances, in navigation order
        """
        pass

    @abstractmethod
    def create_context(self) -> WizardContext:
        """
        Create and return wizard context.

        Returns:
            WizardContext instance
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return ""

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return tr("wizard.button.next")

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.header = WizardHeader(self.get_wizard_title())
        main_layout.addWidget(self.header)

        # Step container
        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        self.footer = WizardFooter()
        self.footer.cancel_clicked.connect(self._handle_cancel)
        self.footer.previous_clicked.connect(self._handle_previous)
        self.footer.next_clicked.connect(self._handle_next)
        main_layout.addWidget(self.footer)

    def current_step_widget(self) -> BaseStep:
        return self.steps[self.navigator.current_step - 1]

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    @with_error_boundary("wizard", "going back")
    def _handle_previous(self):
        """Handle previous button click."""
        self.navigator.previous_step()

    @with_error_boundary("wizard", "moving to the next step")
    def _handle_next(self):
        """Handle next/submit button click."""
        self.navigator.next_step()

    @with_error_boundary("wizard", "cancelling")
    def _handle_cancel(self):
        """Handle cancel button click."""
        self.navigator.cancel()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _show_step(self, step_number: int):
        step = self.steps[step_number - 1]
        step.on_show()
        self.step_container.setCurrentIndex(step_number - 1)
        self._update_progress()
        self._update_navigation_buttons()

    def _on_step_changed(self, old_step: int, new_step: int):
        """Hide the old step widget and show the new one."""
        old_widget = self.steps[old_step - 1]
        logger.debug(f"Leaving step {old_step} ({old_widget.STEP_KEY}): {old_widget.collect_data()}")
        old_widget.on_hide()
        self._show_step(new_step)

    def _on_step_data_changed(self, changes: dict):
        logger.debug(f"Step {self.navigator.current_step} changed: {sorted(changes)}")
        self._update_navigation_buttons()

    def _update_progress(self):
        """Update progress indicator."""
        self.header.set_progress(
            self.navigator.current_step,
            self.navigator.get_step_count(),
            self.navigator.get_progress_percentage(),
        )

    def _update_navigation_buttons(self, *_):
        """Update navigation button states."""
        self.footer.set_previous_enabled(self.navigator.can_go_previous())
        self.footer.set_next_enabled(self.navigator.can_go_next())
        self.footer.set_cancel_enabled(not self.navigator.is_finished)

        if self.navigator.is_last_step():
            self.footer.set_next_text(self.get_submit_button_text())
        else:
            self.footer.set_next_text(tr("wizard.button.next"))

    def _on_completed(self, result):
        self.wizard_completed.emit(result)
        self.close()

    def _on_cancelled(self):
        self.wizard_cancelled.emit()
        self.close()
