"""
modevo exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All modevo-specific exceptions inherit from ModevoError for easy catching.

Example:
    try:
        algorithm.optimize()
    except ModevoError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class ModevoError(Exception):
    """
    Base exception for all modevo errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ModevoError, ValueError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidParameterError(ConfigurationError):
    """Raised when an algorithm parameter is outside its admissible range."""

    def __init__(self, name: str, value: Any, expected: str) -> None:
        message = f"Invalid value for '{name}': {value!r}."
        suggestion = f"'{name}' must be {expected}"
        super().__init__(message, suggestion, {"name": name, "value": value, "expected": expected})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(ModevoError):
    """Base class for problem-related errors."""

    pass


class UnknownProblemError(ProblemError, KeyError):
    """Raised when an unknown problem name is requested."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if available:
            suggestion = f"Available problems: {', '.join(available)}."
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem})

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return self._format_message()


class ProblemDimensionError(ProblemError, ValueError):
    """Raised when fitness or gene vector dimensions are inconsistent."""

    def __init__(
        self,
        message: str,
        n_var: int | None = None,
        n_obj: int | None = None,
    ) -> None:
        suggestion = "Check problem dimensions: n_var (genes), n_obj (objectives) must stay fixed for a run"
        super().__init__(message, suggestion, {"n_var": n_var, "n_obj": n_obj})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(ModevoError, RuntimeError):
    """Raised when optimization is driven incorrectly during execution."""

    pass


class EvaluationError(OptimizationError):
    """Raised when an objective evaluation returns unusable values."""

    def __init__(self, message: str, individual: Any = None) -> None:
        suggestion = "Check your problem's calculate_fitness_values() for errors"
        super().__init__(message, suggestion, {"individual": individual})


__all__ = [
    "ModevoError",
    "ConfigurationError",
    "InvalidParameterError",
    "MissingConfigError",
    "ProblemError",
    "UnknownProblemError",
    "ProblemDimensionError",
    "OptimizationError",
    "EvaluationError",
]
