# === FILE: word_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера WordScout через командную строку.

Команды:
  crawl     Обойти сайты и вывести/сохранить популярные слова
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl:
  SEEDS...            Стартовые URL (по умолчанию start_pages из конфига)
  --json PATH         Сохранить JSON-результат в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON-вывод (отступ 2)

Пример:
  word_scout --config configs/default.yaml crawl https://example.com/ --pretty
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from word_scout import __version__
from word_scout.config import load_config
from word_scout.engine import start_crawl
from word_scout.errors import FetchError
from word_scout.logger import init_logging
from word_scout.report import DEFAULT_TEMPLATE_DIR
from word_scout.report.html_report import render_html
from word_scout.report.json_report import dumps, render_json
from word_scout.utils import max_parallelism

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='WordScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
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
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд WordScout CLI."""
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


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seeds', nargs=-1)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-результат в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=DEFAULT_TEMPLATE_DIR,
    show_default=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def crawl(ctx, seeds, json_output, html_output, template_dir, pretty):
    """Обойти стартовые URL и посчитать популярные слова."""
    cfg = ctx.obj['config']
    urls = list(seeds) or list(cfg.start_pages)
    if not urls:
        print_error('Не заданы стартовые URL: передайте их аргументами или через start_pages')
    try:
        result = asyncio.run(start_crawl(cfg, urls))
    except FetchError as e:
        print_error(f'Ошибка загрузки страницы: {e}')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    json_output = json_output or cfg.result_path

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        click.echo(dumps(result, pretty=pretty))
        return

    if json_output:
        try:
            saved_json = render_json(result, json_output, pretty=pretty)
            click.echo(f'JSON result: {saved_json}')
        except OSError as e:
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
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    data = cfg.model_dump(mode='json')
    data['max_parallelism'] = max_parallelism()
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


# expose these names at module level for test monkey-patching
cli.start_crawl = start_crawl
cli.render_json = render_json
cli.render_html = render_html

if __name__ == "__main__":
    cli()
