"""
Validation results for graph diagnostics.

Each issue names the vertices or vertex pairs it concerns, so callers can act
on the offending parts of a graph without parsing messages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """
    A single validation finding.

    Attributes:
        severity: Error or warning
        message: Human readable description
        subjects: Offending vertices, ``(u, v)`` pairs or ``(u, v, w)`` edges
    """
    severity: ValidationSeverity
    message: str
    subjects: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.message}"


@dataclass
class ValidationResult:
    """Container for validation issues and the measurements behind them."""
    issues: List[ValidationIssue] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> List[ValidationIssue]:
        """Get only error-level issues."""
        return [issue for issue in self.issues if issue.severity is ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        """Get only warning-level issues."""
        return [issue for issue in self.issues if issue.severity is ValidationSeverity.WARNING]

    def add_error(self, message: str, subjects: Iterable[Any] = ()) -> None:
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, message, tuple(subjects)))

    def add_warning(self, message: str, subjects: Iterable[Any] = ()) -> None:
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, message, tuple(subjects)))

    def flagged(self) -> List[Any]:
        """All subjects named by any issue, in issue order, without repeats."""
        seen: Dict[Any, None] = {}
        for issue in self.issues:
            for subject in issue.subjects:
                seen.setdefault(subject, None)
        return list(seen)

    def merge(self, other: 'ValidationResult') -> None:
        """Merge another validation result into this one."""
        self.issues.extend(other.issues)
        self.details.update(other.details)

    def get_summary(self) -> Dict[str, int]:
        """Get a summary of issues by severity."""
        return {
            'errors': len(self.errors),
            'warnings': len(self.warnings),
            'total': len(self.issues),
        }

    def __str__(self) -> str:
        status = "VALID" if self.is_valid else "INVALID"
        summary = self.get_summary()
        return f"ValidationResult({status}, errors={summary['errors']}, warnings={summary['warnings']})"
