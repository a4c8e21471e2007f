# File: robots_forge/serializer.py
"""robots_forge.serializer: Генерация текста robots.txt из списка правил и sitemap-ссылок."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from robots_forge.logger import get_logger
from robots_forge.models import RobotRule, Sitemap

logger = get_logger(__name__)


def group_rules(rules: Iterable[RobotRule]) -> Dict[str, List[RobotRule]]:
    """Группирует правила по значению User-agent.

    Правило для "All" попадает в группу ``*``; правило с несколькими ботами
    копируется в группу каждого бота. Порядок групп — порядок первого появления.

    Args:
        rules: правила в порядке пользователя.

    Returns:
        Словарь ``user_agent -> [правила]``.
    """
    groups: Dict[str, List[RobotRule]] = {}
    for rule in rules:
        for target in rule.targets():
            groups.setdefault(target.user_agent, []).append(rule)
            if target.is_all:
                break
    return groups


def _render_rule(rule: RobotRule) -> List[str]:
    lines = [f"{rule.permission.directive}: {rule.path}"]
    if rule.comment:
        lines.append(f"# {rule.comment}")
    return lines


def serialize(rules: Sequence[RobotRule], sitemaps: Sequence[Sitemap] = ()) -> str:
    """Собирает документ robots.txt.

    Для каждой группы: ``User-agent: <key>``, затем Allow/Disallow-строки
    (и ``# комментарий`` сразу после строки правила), затем пустая строка.
    После групп — ``Sitemap: <url>`` для каждой непустой ссылки.

    Пример:
    ```python
    from robots_forge.serializer import serialize
    text = serialize(rules, sitemaps)
    ```
    """
    lines: List[str] = []
    groups = group_rules(rules)
    for user_agent, group in groups.items():
        lines.append(f"User-agent: {user_agent}")
        for rule in group:
            lines.extend(_render_rule(rule))
        lines.append("")

    emitted = [site for site in sitemaps if not site.is_blank]
    lines.extend(f"Sitemap: {site.url}" for site in emitted)

    logger.debug(
        "Serialized %d rules into %d groups, %d sitemaps", len(rules), len(groups), len(emitted)
    )
    return "".join(f"{line}\n" for line in lines)


generate_robots_txt = serialize

__all__ = ["group_rules", "serialize", "generate_robots_txt"]
