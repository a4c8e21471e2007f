# File: robots_forge/evaluator.py
"""robots_forge.evaluator: Проверка URL против набора правил для конкретного бота или всех ботов."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence
from urllib.parse import urlsplit

from robots_forge.bots import evaluation_bots
from robots_forge.exceptions import InvalidInputError
from robots_forge.logger import get_logger
from robots_forge.matcher import matches
from robots_forge.models import (
    ALL_BOTS,
    DEFAULT_RULE_ID,
    Outcome,
    Permission,
    RobotRule,
    TestResult,
)

logger = get_logger(__name__)

DEFAULT_RULE_COMMENT = "Default rule: If no rule matches, crawling is allowed"

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def extract_path(url: str) -> str:
    """Возвращает только path из URL; без схемы подставляется ``https://``.

    Raises:
        InvalidInputError: пустая строка, нет хоста, пробелы в хосте или неверный порт.
    """
    candidate = url.strip()
    if not candidate:
        raise InvalidInputError(url, "Please enter a URL to test")
    if not _SCHEME_RE.match(candidate):
        candidate = f"https://{candidate}"
    try:
        parts = urlsplit(candidate)
        parts.port  # noqa: B018 - raises ValueError on a malformed port
    except ValueError as exc:
        raise InvalidInputError(url) from exc

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidInputError(url)
    if any(ch.isspace() for ch in parts.netloc):
        raise InvalidInputError(url)
    return parts.path or "/"


def default_rule(bot: str) -> RobotRule:
    """Синтетическое правило, которое применяется, если ни одно правило не совпало."""
    return RobotRule(
        path="/",
        permission=Permission.ALLOW,
        bot=[bot],
        comment=DEFAULT_RULE_COMMENT,
        id=DEFAULT_RULE_ID,
    )


def rules_for_bot(rules: Iterable[RobotRule], bot: str) -> List[RobotRule]:
    """Правила, применимые к *bot*, от более длинного шаблона к более короткому."""
    applicable = [rule for rule in rules if rule.applies_to(bot)]
    return sorted(applicable, key=lambda rule: len(rule.path), reverse=True)


def first_match(rules: Iterable[RobotRule], path: str) -> Optional[RobotRule]:
    for rule in rules:
        if matches(path, rule.path):
            return rule
    return None


def _outcome(rule: RobotRule) -> Outcome:
    return Outcome.ALLOWED if rule.permission is Permission.ALLOW else Outcome.DISALLOWED


def evaluate(rules: Sequence[RobotRule], url: str, target_bot: str = ALL_BOTS) -> List[TestResult]:
    """Определяет, разрешён ли URL для каждого проверяемого бота.

    Args:
        rules: правила в пользовательском порядке.
        url: абсолютный URL или URL без схемы.
        target_bot: имя бота или "All" (все известные боты и сам "All").

    Returns:
        Список TestResult; строка "All" опускается, если конкретный бот совпал
        с тем же правилом.

    Raises:
        InvalidInputError: если URL не удаётся разобрать.
    """
    path = extract_path(url)
    results: List[TestResult] = []

    for bot in evaluation_bots(target_bot):
        rule = first_match(rules_for_bot(rules, bot), path)
        if rule is not None:
            results.append(TestResult(bot=bot, outcome=_outcome(rule), matched_rule=rule))
            logger.debug("%s: %s matched %r", bot, path, rule.path)
        elif bot != ALL_BOTS:
            results.append(TestResult(bot=bot, outcome=Outcome.ALLOWED, matched_rule=default_rule(bot)))

    specific_rule_ids = {r.matched_rule.id for r in results if r.bot != ALL_BOTS}
    return [r for r in results if r.bot != ALL_BOTS or r.matched_rule.id not in specific_rule_ids]


def is_allowed(rules: Sequence[RobotRule], url: str, bot: str) -> bool:
    """True, если *bot* может обходить *url* при данных правилах.

    Для bot="All" проверяются все KNOWN_BOTS и строка "All": результат True,
    только если URL разрешён каждому из них.
    """
    results = evaluate(rules, url, bot)
    return all(result.allowed for result in results)


__all__ = [
    "DEFAULT_RULE_COMMENT",
    "default_rule",
    "evaluate",
    "extract_path",
    "first_match",
    "is_allowed",
    "rules_for_bot",
]
