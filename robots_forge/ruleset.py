# File: robots_forge/ruleset.py
"""
Editable, ordered rule set for one session.

:class:`RuleSet` wraps the lists of rules and sitemaps the user edits and
hands them to the pure core functions (:func:`serialize`, :func:`validate`,
:func:`evaluate`).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

from robots_forge.evaluator import evaluate
from robots_forge.exceptions import RuleShapeError
from robots_forge.logger import get_logger
from robots_forge.models import ALL_BOTS, Permission, RobotRule, Sitemap, TestResult, ValidationReport
from robots_forge.serializer import serialize
from robots_forge.templates import get_template
from robots_forge.validator import validate

logger = get_logger(__name__)

MAX_COMMENT_LENGTH = 200
EXAMPLE_SITEMAP_URL = "https://example.com/sitemap.xml"

_UNSAFE_FRAGMENTS = ("<", ">", "script")


def check_path(path: str) -> str:
    """Validate a path typed by the user and return it stripped."""
    path = path.strip()
    if not path:
        raise RuleShapeError("Path cannot be empty")
    if not path.startswith("/") and path != "*":
        raise RuleShapeError("Path should start with / (e.g., /blog/)")
    if any(fragment in path for fragment in _UNSAFE_FRAGMENTS):
        raise RuleShapeError("Path contains invalid characters")
    return path


def check_comment(comment: Optional[str]) -> Optional[str]:
    if not comment:
        return None
    if len(comment) > MAX_COMMENT_LENGTH:
        raise RuleShapeError(f"Comment must be less than {MAX_COMMENT_LENGTH} characters")
    if any(fragment in comment for fragment in _UNSAFE_FRAGMENTS):
        raise RuleShapeError("Comment contains invalid characters")
    return comment


def split_paths(path: str) -> List[str]:
    """``"/a/, /b/"`` → ``["/a/", "/b/"]``; blank entries are dropped."""
    return [part.strip() for part in path.split(",") if part.strip()]


def initial_rules() -> List[RobotRule]:
    return [
        RobotRule(
            path="/",
            permission=Permission.ALLOW,
            bot=[ALL_BOTS],
            comment="Allow all bots to access the entire website",
        )
    ]


def initial_sitemaps() -> List[Sitemap]:
    return [Sitemap(url=EXAMPLE_SITEMAP_URL)]


@dataclass
class RuleSet:
    rules: List[RobotRule] = field(default_factory=list)
    sitemaps: List[Sitemap] = field(default_factory=list)

    @classmethod
    def initial(cls) -> RuleSet:
        """The starting state of a new session: allow everything, example sitemap."""
        return cls(rules=initial_rules(), sitemaps=initial_sitemaps())

    # ------------------------------------------------------------------ rules

    def add_rule(
        self,
        path: str,
        permission: Union[Permission, str] = Permission.ALLOW,
        bot: Union[Sequence[str], str, None] = None,
        comment: Optional[str] = None,
    ) -> List[RobotRule]:
        """Append one rule per comma-separated path and return the new rules."""
        paths = [check_path(p) for p in split_paths(path)]
        if not paths:
            raise RuleShapeError("Path cannot be empty")
        comment = check_comment(comment)
        bots = [bot] if isinstance(bot, str) else list(bot or [ALL_BOTS])
        added = [
            RobotRule(path=p, permission=Permission(permission), bot=list(bots), comment=comment)
            for p in paths
        ]
        self.rules.extend(added)
        logger.debug("Added %d rule(s): %s", len(added), ", ".join(paths))
        return added

    def _index(self, rule_id: str) -> int:
        for index, rule in enumerate(self.rules):
            if rule.id == rule_id:
                return index
        raise KeyError(rule_id)

    def get_rule(self, rule_id: str) -> RobotRule:
        return self.rules[self._index(rule_id)]

    def remove_rule(self, rule_id: str) -> RobotRule:
        return self.rules.pop(self._index(rule_id))

    def update_rule(self, rule_id: str, **changes: Any) -> RobotRule:
        """Replace fields of an existing rule; the id and list position are kept."""
        changes.pop("id", None)
        if "path" in changes:
            changes["path"] = check_path(changes["path"])
        if "comment" in changes:
            changes["comment"] = check_comment(changes["comment"])
        index = self._index(rule_id)
        updated = self.rules[index].copy(**changes)
        self.rules[index] = updated
        return updated

    def move_rule(self, source: int, destination: int) -> None:
        """Move the rule at *source* to *destination* (drag-and-drop reordering)."""
        if not -len(self.rules) <= destination < len(self.rules):
            raise IndexError(f"destination index out of range: {destination}")
        destination %= len(self.rules)
        rule = self.rules.pop(source)
        self.rules.insert(destination, rule)

    def apply_template(self, template_id: str, replace: bool = True) -> List[RobotRule]:
        """Load the rules of a preset template, replacing (default) or extending the current ones."""
        rules = get_template(template_id).build_rules()
        if replace:
            self.rules = rules
        else:
            self.rules.extend(rules)
        logger.debug("Applied template %s (%d rules, replace=%s)", template_id, len(rules), replace)
        return rules

    # --------------------------------------------------------------- sitemaps

    def add_sitemap(self, url: str) -> Sitemap:
        sitemap = Sitemap(url=url)
        self.sitemaps.append(sitemap)
        return sitemap

    def set_sitemap(self, url: str) -> Sitemap:
        """Set the first sitemap URL, creating it when the list is empty."""
        if self.sitemaps:
            self.sitemaps[0].url = url
            return self.sitemaps[0]
        return self.add_sitemap(url)

    def remove_sitemap(self, sitemap_id: str) -> Sitemap:
        for index, sitemap in enumerate(self.sitemaps):
            if sitemap.id == sitemap_id:
                return self.sitemaps.pop(index)
        raise KeyError(sitemap_id)

    # ------------------------------------------------------------------- core

    def reset(self) -> None:
        self.rules = initial_rules()
        self.sitemaps = initial_sitemaps()

    def generate(self) -> str:
        return serialize(self.rules, self.sitemaps)

    def validate(self) -> ValidationReport:
        return validate(self.generate())

    def evaluate(self, url: str, bot: str = ALL_BOTS) -> List[TestResult]:
        return evaluate(self.rules, url, bot)


__all__ = [
    "RuleSet",
    "check_comment",
    "check_path",
    "initial_rules",
    "initial_sitemaps",
    "split_paths",
]
