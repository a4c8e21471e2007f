# File: robots_forge/report/json_report.py
"""
Генерация JSON-отчёта для проекта RobotsForge.

Сериализация объекта BuildReport в файл.
"""
import json
from pathlib import Path

from robots_forge.aggregator import BuildReport


def render_json(report: BuildReport, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект BuildReport с robots.txt, замечаниями и проверками URL
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from robots_forge.report.json_report import render_json
    report_path = render_json(report, 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)

    return output
