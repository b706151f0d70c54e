# -*- coding: utf-8 -*-
"""
Research Project Wizard UI Components
"""

from .action_button import ActionButton
from .wizard_header import WizardHeader
from .wizard_footer import WizardFooter

__all__ = [
    "ActionButton",
    "WizardHeader",
    "WizardFooter",
]
