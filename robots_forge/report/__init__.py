# File: robots_forge/report/__init__.py
"""robots_forge.report: Утилиты для сохранения отчётов (JSON и HTML), используемые CLI и тестами."""

from __future__ import annotations

from robots_forge.report.html_report import DEFAULT_TEMPLATE_DIR, render_html
from robots_forge.report.json_report import render_json

__all__ = ["render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
