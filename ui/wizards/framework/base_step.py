# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- collect_data(): Return the slice of wizard data the step edits
- populate_data(): Populate UI with data (optional)

Validation is owned by the wizard context; a step only asks the context
about its own step number.
"""

from typing import List, Dict, Any, Optional
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Data validation (delegated to the context)
    - Writing edits back to the context
    """

    # 1-indexed position of the step; set by subclasses
    STEP_NUMBER: int = 0
    STEP_KEY: str = ""

    # Signals
    step_data_changed = pyqtSignal(dict)
    validation_changed = pyqtSignal(bool)

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            context: The wizard context for data sharing
            parent: Parent widget
        """
        super().__init__(parent)
        self.context = context
        self._is_initialized = False
        self._populating = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """
        Called when the step is shown.

        Builds the UI on first show and refreshes it from the context.
        """
        if not self._is_initialized:
            self.initialize()
        self._populating = True
        try:
            self.populate_data()
        finally:
            self._populating = False

    def on_hide(self):
        """
        Called when the step is hidden (moving to another step).

        Override this method to perform cleanup if needed.
        """
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        Create all widgets and layouts here.
        """
        pass

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """
        Collect the data this step edits.

        Returns:
            Dictionary containing step data
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def validate(self) -> StepValidationResult:
        """Validate this step's data through the context."""
        return self.context.validate_step(self.STEP_NUMBER)

    def populate_data(self):
        """
        Populate the step's UI with data from context.

        Override this method to restore data when navigating back to the step.
        """
        pass

    def get_step_title(self) -> str:
        """
        Get the step's title.

        Default implementation returns the class name.
        """
        return self.__class__.__name__

    def get_step_description(self) -> str:
        """Get the step's description shown under the title."""
        return ""

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def save_to_context(self, **changes):
        """Merge edits into the context and notify listeners."""
        if self._populating:
            return
        self.context.update_fields(changes)
        self.notify_data_changed(changes)

    def notify_data_changed(self, changes: Dict[str, Any]):
        """Tell listeners the context changed outside save_to_context()."""
        self.step_data_changed.emit(changes)
        self.emit_validation_changed(self.validate().is_valid)

    def emit_validation_changed(self, is_valid: bool):
        """Emit validation changed signal."""
        self.validation_changed.emit(is_valid)

    def add_step_heading(self):
        """Title and description block shared by every step."""
        title = QLabel(self.get_step_title())
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        self.main_layout.addWidget(title)

        description = self.get_step_description()
        if description:
            subtitle = QLabel(description)
            subtitle.setStyleSheet("color: #4B5563;")
            subtitle.setWordWrap(True)
            self.main_layout.addWidget(subtitle)

    def add_hint_box(self, title: str, lines: List[str], color: str = "#DBEAFE"):
        """Tinted box with a heading and bullet lines."""
        text = f"<b>{title}</b>"
        if lines:
            text += "<br>" + "<br>".join(f"• {line}" for line in lines)
        hint = QLabel(text)
        hint.setWordWrap(True)
        hint.setStyleSheet(f"""
            QLabel {{
                background-color: {color};
                border-radius: 8px;
                padding: 12px;
            }}
        """)
        self.main_layout.addWidget(hint)
        return hint
