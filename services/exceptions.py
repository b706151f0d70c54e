# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ValidationException(Exception):
    """Exception raised when a caller hands the wizard data it cannot hold."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context

    def __str__(self):
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message
