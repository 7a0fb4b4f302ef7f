"""Domain-specific exceptions"""

from typing import Dict, List, Optional


class CalculatorError(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(CalculatorError):
    """
    A required field is missing, non-numeric, or outside its valid domain.

    The calculation is never attempted once this is raised. ``errors`` holds
    one ``{"field": ..., "message": ...}`` entry per offending field so a front
    end can show per-field messages.
    """

    def __init__(self, message: str, field: Optional[str] = None, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.field = field
        if errors is None:
            errors = [{"field": field or "", "message": message}]
        self.errors = errors
