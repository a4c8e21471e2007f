# File: robots_forge/validator.py
"""
Line-oriented linter for robots.txt documents.

The validator understands the same grammar the serializer writes and reports
problems as data; it never raises for bad document content.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from robots_forge.logger import get_logger
from robots_forge.models import Severity, ValidationIssue, ValidationReport

logger = get_logger(__name__)

USER_AGENT = "User-agent:"
DISALLOW = "Disallow:"
ALLOW = "Allow:"
SITEMAP = "Sitemap:"
CRAWL_DELAY = "Crawl-delay:"
HOST = "Host:"

DIRECTIVES: Tuple[str, ...] = (USER_AGENT, DISALLOW, ALLOW, SITEMAP, CRAWL_DELAY, HOST)

WHOLE_FILE = "Entire file"

MSG_INVALID_DIRECTIVE = "Invalid directive"
MSG_EMPTY_USER_AGENT = "User-agent directive must have a value"
MSG_NO_USER_AGENT_BEFORE_RULE = "Allow/Disallow directive must be preceded by a User-agent directive"
MSG_BAD_PATH = "Path should start with a / or * character"
MSG_EMPTY_SITEMAP = "Sitemap directive must have a URL value"
MSG_BAD_SITEMAP_SCHEME = "Sitemap URL must start with http:// or https://"
MSG_NO_USER_AGENT = "robots.txt must contain at least one User-agent directive"
MSG_NO_DISALLOW = (
    "Each User-agent section should have at least one Disallow directive "
    "(empty Disallow means allow all)"
)


@dataclass(slots=True)
class _ScanState:
    current_user_agent: Optional[str] = None
    has_seen_user_agent: bool = False
    has_disallow_in_block: bool = False
    any_block_had_disallow: bool = False


def _value(line: str, directive: str) -> str:
    return line[len(directive):].strip()


class RobotsTxtValidator:
    """Scans a document top to bottom, collecting :class:`ValidationIssue` objects."""

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []
        self.state = _ScanState()

    def _add(self, severity: Severity, line_number: int, message: str, text: str) -> None:
        self.issues.append(ValidationIssue(severity, line_number, message, text))

    def validate(self, text: str) -> ValidationReport:
        self.issues = []
        self.state = _ScanState()

        for index, raw in enumerate(text.split("\n"), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            self._check_line(index, line)

        self._check_document()
        report = ValidationReport(issues=list(self.issues))
        logger.debug(
            "Validated document: %d errors, %d warnings",
            len(report.errors),
            len(report.warnings),
        )
        return report

    def _check_line(self, number: int, line: str) -> None:
        if not line.startswith(DIRECTIVES):
            self._add(Severity.ERROR, number, MSG_INVALID_DIRECTIVE, line)
            return

        if line.startswith(USER_AGENT):
            self._check_user_agent(number, line)
        elif line.startswith((ALLOW, DISALLOW)):
            self._check_rule(number, line)
        elif line.startswith(SITEMAP):
            self._check_sitemap(number, line)

    def _check_user_agent(self, number: int, line: str) -> None:
        state = self.state
        state.current_user_agent = _value(line, USER_AGENT)
        state.has_seen_user_agent = True
        state.has_disallow_in_block = False
        if not state.current_user_agent:
            self._add(Severity.ERROR, number, MSG_EMPTY_USER_AGENT, line)

    def _check_rule(self, number: int, line: str) -> None:
        if line.startswith(DISALLOW):
            self.state.has_disallow_in_block = True
            if self.state.has_seen_user_agent:
                self.state.any_block_had_disallow = True
        if not self.state.has_seen_user_agent:
            self._add(Severity.ERROR, number, MSG_NO_USER_AGENT_BEFORE_RULE, line)

        path = line[line.index(":") + 1:].strip()
        if path and not path.startswith(("/", "*")):
            self._add(Severity.WARNING, number, MSG_BAD_PATH, line)

    def _check_sitemap(self, number: int, line: str) -> None:
        url = _value(line, SITEMAP)
        if not url:
            self._add(Severity.ERROR, number, MSG_EMPTY_SITEMAP, line)
        elif not url.startswith(("http://", "https://")):
            self._add(Severity.ERROR, number, MSG_BAD_SITEMAP_SCHEME, line)

    def _check_document(self) -> None:
        if not self.state.has_seen_user_agent:
            self._add(Severity.ERROR, 0, MSG_NO_USER_AGENT, WHOLE_FILE)
        elif not self.state.any_block_had_disallow:
            self._add(Severity.WARNING, 0, MSG_NO_DISALLOW, WHOLE_FILE)


def validate(text: str) -> ValidationReport:
    """Validate robots.txt *text*; ``report.is_valid`` is False only when errors were found."""
    return RobotsTxtValidator().validate(text)


__all__ = ["RobotsTxtValidator", "validate", "DIRECTIVES"]
