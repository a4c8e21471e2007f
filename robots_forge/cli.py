# File: robots_forge/cli.py
#!/usr/bin/env python3
"""
Точка входа RobotsForge для командной строки.

Команды:
  generate   Сгенерировать robots.txt из файла набора правил
  validate   Проверить синтаксис готового robots.txt
  test       Проверить, разрешён ли URL для бота
  templates  Показать готовые шаблоны правил
  report     Сохранить JSON/HTML-отчёт (robots.txt, замечания, проверки URL)
  config     Показать загруженный набор правил

Общие опции:
  --config PATH       Путь к YAML/JSON набору правил (default: configs/default.yaml)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  robots-forge --config rules.yaml generate --output public/robots.txt --check
"""
import json
import sys
from pathlib import Path

import click

from robots_forge import __version__
from robots_forge.aggregator import build_report, write_robots_txt
from robots_forge.config import load_config
from robots_forge.exceptions import RobotsForgeError
from robots_forge.logger import DEFAULT_FORMAT, get_logger, init_logging
from robots_forge.models import ValidationReport
from robots_forge.report import render_html, render_json
from robots_forge.templates import KINDS, get_template, list_templates
from robots_forge.serializer import serialize
from robots_forge.validator import validate as validate_text

logger = get_logger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _load_ruleset(ctx):
    try:
        cfg = load_config(ctx.obj['config_path'])
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    return cfg, cfg.to_ruleset()


def _print_issues(report: ValidationReport, err: bool = False):
    if not report.issues:
        click.secho('Valid robots.txt syntax', fg='green', err=err)
        return
    for issue in report.issues:
        where = f'line {issue.line_number}' if issue.line_number else 'document'
        label = 'Error' if issue.is_error else 'Warning'
        click.secho(
            f'{label} ({where}): {issue.message}: {issue.offending_text}',
            fg='red' if issue.is_error else 'yellow',
            err=err,
        )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RobotsForge, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу набора правил YAML/JSON (default: configs/default.yaml).'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования (по умолчанию из ROBOTS_FORGE_LOG_LEVEL или WARNING)'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд RobotsForge CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('generate', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить robots.txt в файл'
)
@click.option('--check', is_flag=True, help='Проверить результат и завершиться с кодом 1 при ошибках')
@click.pass_context
def generate(ctx, output, check):
    """Сгенерировать robots.txt из набора правил."""
    _, ruleset = _load_ruleset(ctx)
    text = ruleset.generate()

    if check:
        report = validate_text(text)
        _print_issues(report, err=True)
        if not report.is_valid:
            print_error('robots.txt содержит ошибки')

    if output:
        saved = write_robots_txt(text, output)
        logger.info('robots.txt saved to %s', saved)
        click.echo(f'robots.txt: {saved}')
    else:
        click.echo(text, nl=False)


@cli.command('validate', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.File('r', encoding='utf-8'))
@click.option('--json', 'as_json', is_flag=True, help='Вывести замечания в JSON')
def validate(robots_file, as_json):
    """Проверить синтаксис ROBOTS_FILE ('-' для stdin)."""
    report = validate_text(robots_file.read())
    if as_json:
        click.echo(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_issues(report)
    if not report.is_valid:
        sys.exit(1)


@cli.command('test', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--bot', '-b', 'bot', default=None, help='Имя бота или All (по умолчанию из конфига)')
@click.option('--json', 'as_json', is_flag=True, help='Вывести результаты в JSON')
@click.pass_context
def test_url(ctx, url, bot, as_json):
    """Проверить, разрешён ли URL для бота по набору правил."""
    cfg, ruleset = _load_ruleset(ctx)
    try:
        results = ruleset.evaluate(url, bot or cfg.target_bot)
    except RobotsForgeError as e:
        print_error(str(e))

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        return
    for result in results:
        rule = result.matched_rule
        line = f'{result.bot}: {result.outcome.value} ({rule.permission.directive}: {rule.path})'
        if result.is_default:
            line += ' [default]'
        click.secho(line, fg='green' if result.allowed else 'red')


@cli.command('templates', context_settings=CONTEXT_SETTINGS)
@click.option('--kind', '-k', 'kind', default=None, type=click.Choice(KINDS), help='Тип шаблонов')
@click.option('--preview', '-p', 'preview', default=None, help='Показать robots.txt для шаблона')
def templates(kind, preview):
    """Показать готовые шаблоны правил."""
    if preview:
        try:
            template = get_template(preview)
        except RobotsForgeError as e:
            print_error(str(e))
        click.echo(serialize(template.build_rules()), nl=False)
        return
    for template in list_templates(kind):
        click.echo(f'{template.id:<28} {template.kind:<8} {template.name}')


@cli.command('report', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'urls', multiple=True, help='URL для проверки (можно несколько)')
@click.option('--bot', '-b', 'bot', default=None, help='Имя бота или All')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def report(ctx, urls, bot, json_output, html_output, template_dir, pretty):
    """Собрать отчёт: robots.txt, замечания валидатора и проверки URL."""
    cfg, ruleset = _load_ruleset(ctx)
    try:
        result = build_report(ruleset, urls, bot or cfg.target_bot)
    except RobotsForgeError as e:
        print_error(str(e))

    if not json_output and not html_output:
        click.echo(result.json(pretty=pretty))
        return

    if json_output:
        try:
            saved_json = render_json(result, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(result, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущий набор правил в JSON."""
    cfg, _ = _load_ruleset(ctx)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
