# === FILE: robots_txt/config.py ===
"""
Модуль для загрузки и валидации конфигурации robots_txt.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from robots_txt.matcher import Precedence


class CheckerConfig(BaseModel):
    """Настройки проверки robots.txt."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field(
        "RobotsTxtBot/1.0", min_length=1, description="User-Agent для выбора группы и HTTP-запросов."
    )
    timeout: float = Field(10.0, gt=0, description="Таймаут загрузки robots.txt (секунд).")
    tie_break: Literal["allow", "disallow"] = Field(
        "allow", description="Кто побеждает при равной длине Allow/Disallow."
    )
    domain: Optional[str] = Field(None, description="Домен для отображения (вместо извлечённого из URL).")

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("tie_break", mode="before")
    def _lower_tie_break(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def precedence(self) -> Precedence:
        return Precedence(self.tie_break)


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CheckerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CheckerConfig.
    Без пути использует configs/default.yaml, а если его нет — значения по умолчанию.
    Явно указанный, но отсутствующий файл — FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return CheckerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CheckerConfig(**data)
