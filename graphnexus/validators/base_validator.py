"""
Base validation infrastructure for graph diagnostics.
"""

from abc import ABC, abstractmethod
from typing import List

from .validation_result import ValidationResult


class BaseValidator(ABC):
    """Base class for all validators."""
    
    def __init__(self, config=None):
        self.config = config
    
    @abstractmethod
    def validate(self, *args, **kwargs) -> ValidationResult:
        """Perform validation and return results."""
        pass
    
    def _create_result(self) -> ValidationResult:
        """Create a new validation result."""
        return ValidationResult()
    
    def _format_items(self, items: List, max_items: int = 5) -> str:
        """Render at most ``max_items`` items for a message."""
        shown = ", ".join(str(item) for item in items[:max_items])
        if len(items) > max_items:
            shown += f" ... and {len(items) - max_items} more"
        return shown
