# === FILE: word_scout/config.py ===
"""
Загрузка и валидация конфигурации краулера WordScout.
Схема описана через Pydantic; ошибки валидации превращаются в ConfigError
до того, как начнётся обход.
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, List, Literal, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from word_scout.errors import ConfigError
from word_scout.utils import max_parallelism


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_pages: List[str] = Field(default_factory=list, description="Стартовые URL (seed).")
    ignored_urls: List[re.Pattern[str]] = Field(
        default_factory=list, description="URL, полностью совпадающие с шаблоном, не посещаются."
    )
    ignored_words: List[re.Pattern[str]] = Field(
        default_factory=list, description="Слова, полностью совпадающие с шаблоном, не считаются."
    )
    parallelism: int = Field(
        default_factory=max_parallelism, ge=1, description="Желаемое число рабочих слотов."
    )
    max_depth: int = Field(3, ge=0, description="Глубина обхода; 0 — ничего не загружать.")
    timeout_seconds: float = Field(10.0, gt=0, description="Общий дедлайн обхода (секунд).")
    popular_word_count: int = Field(10, ge=0, description="Сколько слов оставить в итоге.")
    on_fetch_error: Literal["abort", "skip"] = Field(
        "abort", description="abort — ошибка загрузки прерывает обход; skip — страница пропускается."
    )
    request_timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("WordScoutBot/1.0", min_length=1, description="Заголовок User-Agent.")
    result_path: Optional[Path] = Field(None, description="Куда записать JSON-результат.")

    @field_validator("start_pages")
    def _reject_blank_urls(cls, v: List[str]) -> List[str]:
        if any(not url.strip() for url in v):
            raise ValueError("start_pages must not contain blank URLs")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def build_config(data: dict[str, Any]) -> CrawlerConfig:
    """Проверяет словарь настроек и возвращает CrawlerConfig или бросает ConfigError."""
    try:
        return CrawlerConfig(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
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
        raise ConfigError(f"Unsupported config format: {suffix}")

    return build_config(data)


__all__ = ["CrawlerConfig", "build_config", "load_config"]
