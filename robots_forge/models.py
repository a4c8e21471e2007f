# File: robots_forge/models.py
"""
Data models shared by the serializer, validator and evaluator.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from robots_forge.exceptions import RuleShapeError

ALL_BOTS = "All"
DEFAULT_RULE_ID = "default"


def new_id() -> str:
    """Return a fresh opaque identifier for a rule or sitemap."""
    return uuid.uuid4().hex


class Permission(str, Enum):
    ALLOW = "allow"
    DISALLOW = "disallow"

    @property
    def directive(self) -> str:
        """Directive name as written in robots.txt."""
        return "Allow" if self is Permission.ALLOW else "Disallow"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Outcome(str, Enum):
    ALLOWED = "allowed"
    DISALLOWED = "disallowed"


@dataclass(frozen=True, slots=True)
class BotTarget:
    """A rule target: either every bot (``"All"``) or one named bot."""

    name: str

    @property
    def is_all(self) -> bool:
        return self.name == ALL_BOTS

    @property
    def user_agent(self) -> str:
        """Value emitted after ``User-agent:``."""
        return "*" if self.is_all else self.name


def normalize_bots(bots: Any) -> List[str]:
    """Treat *bots* as an ordered set; ``"All"`` wins over specific names, empty → ``["All"]``."""
    if isinstance(bots, str):
        bots = [bots]
    names: List[str] = []
    for bot in bots or ():
        name = str(bot).strip()
        if name and name not in names:
            names.append(name)
    if not names or ALL_BOTS in names:
        return [ALL_BOTS]
    return names


@dataclass(slots=True)
class RobotRule:
    """One Allow/Disallow directive for one or more bots."""

    path: str
    permission: Permission
    bot: List[str] = field(default_factory=lambda: [ALL_BOTS])
    comment: Optional[str] = None
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.strip():
            raise RuleShapeError("Path cannot be empty")
        self.permission = Permission(self.permission)
        self.bot = normalize_bots(self.bot)
        if self.comment is not None and not self.comment.strip():
            self.comment = None

    @property
    def targets_all(self) -> bool:
        return ALL_BOTS in self.bot

    def targets(self) -> Tuple[BotTarget, ...]:
        return tuple(BotTarget(name) for name in self.bot)

    def applies_to(self, bot: str) -> bool:
        """True if this rule targets every bot or *bot* specifically."""
        return self.targets_all or bot in self.bot

    def copy(self, **changes: Any) -> RobotRule:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "bot": list(self.bot),
            "path": self.path,
            "permission": self.permission.value,
        }
        if self.comment:
            data["comment"] = self.comment
        return data


@dataclass(slots=True)
class Sitemap:
    """A ``Sitemap:`` reference; blank URLs are kept but never emitted."""

    url: str
    id: str = field(default_factory=new_id)

    @property
    def is_blank(self) -> bool:
        return not self.url.strip()

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "url": self.url}


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One finding of the validator. ``line_number == 0`` refers to the whole document."""

    severity: Severity
    line_number: int
    message: str
    offending_text: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "line_number": self.line_number,
            "message": self.message,
            "offending_text": self.offending_text,
        }


@dataclass(slots=True)
class ValidationReport:
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(issue.is_error for issue in self.issues)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if not issue.is_error]

    def to_dict(self) -> Dict[str, Any]:
        return {"is_valid": self.is_valid, "issues": [issue.to_dict() for issue in self.issues]}


@dataclass(frozen=True, slots=True)
class TestResult:
    """Outcome of evaluating one URL for one bot."""

    __test__ = False  # not a pytest test class

    bot: str
    outcome: Outcome
    matched_rule: RobotRule

    @property
    def allowed(self) -> bool:
        return self.outcome is Outcome.ALLOWED

    @property
    def is_default(self) -> bool:
        return self.matched_rule.id == DEFAULT_RULE_ID

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bot": self.bot,
            "outcome": self.outcome.value,
            "default": self.is_default,
            "matched_rule": self.matched_rule.to_dict(),
        }


__all__ = [
    "ALL_BOTS",
    "DEFAULT_RULE_ID",
    "BotTarget",
    "Outcome",
    "Permission",
    "RobotRule",
    "Severity",
    "Sitemap",
    "TestResult",
    "ValidationIssue",
    "ValidationReport",
    "new_id",
    "normalize_bots",
]
