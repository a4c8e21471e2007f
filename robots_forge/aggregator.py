# File: robots_forge/aggregator.py
"""robots_forge.aggregator: Сборка итогового отчёта — robots.txt, замечания валидатора, проверки URL."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, TypedDict, Union

from robots_forge.logger import get_logger
from robots_forge.models import ALL_BOTS, ValidationIssue, ValidationReport
from robots_forge.ruleset import RuleSet

logger = get_logger(__name__)


class UrlCheck(TypedDict):
    """Результаты проверки одного URL."""

    url: str
    bot: str
    results: List[Dict[str, Any]]


@dataclass(slots=True)
class BuildReport:
    """Сгенерированный robots.txt вместе с результатами валидации и проверки URL."""

    robots_txt: str
    validation: ValidationReport
    rules: List[Dict[str, Any]] = field(default_factory=list)
    url_checks: List[UrlCheck] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    @property
    def issues(self) -> List[ValidationIssue]:
        return self.validation.issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            "robots_txt": self.robots_txt,
            "validation": self.validation.to_dict(),
            "rules": self.rules,
            "url_checks": self.url_checks,
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_report(ruleset: RuleSet, urls: Iterable[str] = (), bot: str = ALL_BOTS) -> BuildReport:
    """Генерирует robots.txt, валидирует его и проверяет каждый URL для *bot*.

    Raises:
        InvalidInputError: если один из URL не удаётся разобрать.
    """
    text = ruleset.generate()
    report = BuildReport(
        robots_txt=text,
        validation=ruleset.validate(),
        rules=[rule.to_dict() for rule in ruleset.rules],
    )
    for url in urls:
        results = ruleset.evaluate(url, bot)
        report.url_checks.append(
            {"url": url, "bot": bot, "results": [result.to_dict() for result in results]}
        )
    logger.info(
        "Report built: %d rules, %d issues, %d URL checks",
        len(report.rules),
        len(report.issues),
        len(report.url_checks),
    )
    return report


def write_robots_txt(text: str, output_path: Union[str, Path]) -> Path:
    """Сохраняет сгенерированный robots.txt в файл (действие «скачать»)."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    return output


__all__ = ["BuildReport", "UrlCheck", "build_report", "write_robots_txt"]
