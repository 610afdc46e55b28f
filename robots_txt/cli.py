# === FILE: robots_txt/cli.py ===
#!/usr/bin/env python3
"""
Точка входа robots-txt: проверка путей по robots.txt из командной строки.

Команды:
  check     Проверить пути (или URL) для User-Agent, код выхода 2 при запрете
  show      Показать группы, sitemap и комментарии в JSON
  report    Сохранить JSON/HTML-отчёт с вердиктами
  config    Показать текущую конфигурацию

SOURCE — локальный файл robots.txt или http(s)-URL.

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  robots-txt check https://example.com/robots.txt /admin/ /public/page --agent "Googlebot/2.1"
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from robots_txt import __version__
from robots_txt.config import CheckerConfig, load_config
from robots_txt.fetcher import fetch_document
from robots_txt.logger import DEFAULT_FORMAT, init_logging
from robots_txt.matcher import can_fetch, select_group
from robots_txt.models import ParsedDocument
from robots_txt.parser.robots_parser import parse_with_domain
from robots_txt.report import build_report, render_html, render_json
from robots_txt.utils import is_url, path_from_url, read_text

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

EXIT_DISALLOWED = 2


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def load_document(source: str, cfg: CheckerConfig) -> ParsedDocument:
    """Загружает robots.txt из URL или файла и разбирает его."""
    if is_url(source):
        return asyncio.run(fetch_document(source, cfg))
    return parse_with_domain(read_text(source), cfg.domain)


def _document_or_exit(source: str, cfg: CheckerConfig) -> ParsedDocument:
    try:
        return load_document(source, cfg)
    except Exception as e:
        print_error(f'Не удалось загрузить robots.txt из {source}: {e!r}')


agent_option = click.option(
    '--agent', '-a', 'agent',
    default=None,
    help='User-Agent для проверки (по умолчанию user_agent из конфига)'
)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='robots_txt, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
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
    """Группа команд robots-txt."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.argument('paths', nargs=-1, required=True)
@agent_option
@click.pass_context
def check(ctx, source, paths, agent):
    """Проверить PATHS (пути или URL) по robots.txt из SOURCE."""
    cfg = ctx.obj['config']
    user_agent = agent or cfg.user_agent
    document = _document_or_exit(source, cfg)

    denied = 0
    for raw in paths:
        allowed = can_fetch(document, user_agent, path_from_url(raw), tie_break=cfg.precedence)
        if not allowed:
            denied += 1
        click.echo(f"{'allowed' if allowed else 'disallowed'}\t{raw}")
    if denied:
        ctx.exit(EXIT_DISALLOWED)


@cli.command('show', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@agent_option
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def show(ctx, source, agent, pretty):
    """Показать разобранный robots.txt (или только группу для --agent)."""
    cfg = ctx.obj['config']
    document = _document_or_exit(source, cfg)
    if agent:
        group = select_group(document, agent)
        data = group.to_dict() if group else None
    else:
        data = document.to_dict()
    click.echo(json.dumps(data, ensure_ascii=False, indent=2 if pretty else None))


@cli.command('report', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@agent_option
@click.option('--path', '-p', 'paths', multiple=True, help='Путь или URL для вердикта (можно несколько)')
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
    help='Папка с шаблоном report.html.j2 (по умолчанию встроенный)'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def report(ctx, source, agent, paths, json_output, html_output, template_dir, pretty):
    """Сгенерировать отчёт по robots.txt с вердиктами для --path."""
    cfg = ctx.obj['config']
    document = _document_or_exit(source, cfg)
    user_agent = agent or cfg.user_agent
    data = build_report(
        document,
        user_agent,
        [path_from_url(p) for p in paths],
        tie_break=cfg.precedence,
    )

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        click.echo(json.dumps(data, ensure_ascii=False, indent=2 if pretty else None))
        return

    if json_output:
        try:
            saved_json = render_json(data, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(data, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
