# robots_txt/report/json_report.py

"""
Генерация JSON-отчёта по robots.txt.

Сериализация словаря из build_report в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict


def render_json(report: Dict[str, Any], output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: словарь из :func:`robots_txt.report.build_report`
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report, f, ensure_ascii=False, indent=2)

    return output
