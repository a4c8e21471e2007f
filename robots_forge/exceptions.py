# File: robots_forge/exceptions.py
"""Exception hierarchy for the RobotsForge core."""

from __future__ import annotations


class RobotsForgeError(Exception):
    """Base class for all RobotsForge errors."""


class InvalidInputError(RobotsForgeError, ValueError):
    """Raised when a URL handed to the evaluator cannot be parsed."""

    def __init__(self, value: str, reason: str = "Please enter a valid URL") -> None:
        super().__init__(f"{reason}: {value!r}")
        self.value = value
        self.reason = reason


class RuleShapeError(RobotsForgeError, ValueError):
    """Raised when a rule or sitemap is built from invalid input (empty path, bad comment)."""


class TemplateNotFoundError(RobotsForgeError, KeyError):
    """Raised when a preset template id is unknown."""

    def __str__(self) -> str:
        return f"Unknown template: {self.args[0]}"
