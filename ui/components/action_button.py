# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer and step forms so every button shares the same
dimensions, colors and disabled look.
"""

from PyQt5.QtWidgets import QPushButton


_VARIANT_STYLES = {
    # Primary: Next, Create Project
    "primary": """
        QPushButton {
            background-color: #2563EB;
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }
        QPushButton:hover {
            background-color: #1D4ED8;
        }
        QPushButton:disabled {
            background-color: #D1D5DB;
            color: #F9FAFB;
        }
    """,
    # Secondary: Cancel, Previous
    "secondary": """
        QPushButton {
            background-color: #6c757d;
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }
        QPushButton:hover {
            background-color: #5c636a;
        }
        QPushButton:disabled {
            background-color: #adb5bd;
        }
    """,
    # Ghost: inline actions such as Add / Remove objective
    "ghost": """
        QPushButton {
            background-color: transparent;
            color: #2563EB;
            border: none;
            padding: 6px 10px;
            font-size: 13px;
        }
        QPushButton:hover {
            background-color: #EFF6FF;
        }
    """,
    "danger": """
        QPushButton {
            background-color: transparent;
            color: #DC2626;
            border: none;
            padding: 6px 10px;
            font-size: 13px;
        }
        QPushButton:hover {
            background-color: #FEF2F2;
        }
    """,
}


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn = ActionButton("Remove", variant="danger", width=None)
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 114,
        height: int = 44,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary", "ghost" or "danger"
            width: Fixed width in pixels, or None to size to the text
            height: Fixed height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)

        if variant not in _VARIANT_STYLES:
            raise ValueError(
                f"Invalid variant: {variant}. Must be one of {', '.join(_VARIANT_STYLES)}"
            )
        self.variant = variant

        if width is not None:
            self.setFixedWidth(width)
        self.setFixedHeight(height)
        self.setStyleSheet(_VARIANT_STYLES[variant])
