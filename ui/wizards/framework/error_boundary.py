# -*- coding: utf-8 -*-
"""
Error Boundary for Wizard UI handlers.

An exception escaping a Qt slot aborts the event loop. Handlers wrapped
here log the error with its traceback and show a message box instead.
"""

from typing import Callable
from functools import wraps

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


def with_error_boundary(step_name: str, operation_name: str = "operation"):
    """
    Decorator to add error boundary to a widget method.

    Usage:
        @with_error_boundary("Project Wizard", "creating the project")
        def _handle_next(self):
            ...

    Args:
        step_name: Name of the step or wizard
        operation_name: Name of the operation

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)

            except (MemoryError, KeyboardInterrupt):
                raise

            except Exception as e:
                logger.error(
                    f"Error in {step_name} during {operation_name}: {str(e)}",
                    exc_info=True
                )

                parent_window = self.window() if isinstance(self, QWidget) else None
                if parent_window is not None and parent_window.isVisible():
                    QMessageBox.critical(
                        parent_window,
                        tr("error.boundary.title", step=step_name),
                        tr("error.boundary.message", operation=operation_name, error=str(e)),
                        QMessageBox.Ok
                    )

                return None

        return wrapper
    return decorator
